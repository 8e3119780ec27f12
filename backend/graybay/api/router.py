"""
API router that aggregates all endpoint routers.
Only the demo session endpoints deal with tokens; the dashboard routes are open.
"""

from fastapi import APIRouter

from graybay.api.endpoints import (
    health,
    auth,
    clients,
    services,
    tickets,
    quotes,
    invoices,
    templates,
    activities,
    billing,
    catalog,
    documents,
)

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["authentication"])
api_router.include_router(clients.router, prefix="/clients", tags=["clients"])
api_router.include_router(services.router, prefix="/services", tags=["services"])
api_router.include_router(tickets.router, prefix="/tickets", tags=["tickets"])
api_router.include_router(quotes.router, prefix="/quotes", tags=["quotes"])
api_router.include_router(invoices.router, prefix="/invoices", tags=["invoices"])
api_router.include_router(templates.router, prefix="/templates", tags=["templates"])
api_router.include_router(activities.router, prefix="/activities", tags=["activities"])
api_router.include_router(billing.router, prefix="/billing", tags=["billing"])
api_router.include_router(catalog.router, prefix="/catalog", tags=["catalog"])
api_router.include_router(documents.router, prefix="/documents", tags=["documents"])
