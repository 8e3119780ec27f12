"""
PDF quote export tests.
"""

import re

import pytest

from graybay.schemas.onboarding import OnboardingRequest
from graybay.services.document_service import DocumentService, content_disposition, quote_filename


QUOTE_PAYLOAD = {
    "companyInfo": {"name": "Acme Dental", "industry": "Healthcare"},
    "contacts": {"primary": {"name": "Lee Park", "email": "lee@acme.example", "phone": "555-0100"}},
    "selectedServices": [
        {"id": "website-maintenance", "name": "Website Maintenance", "description": "Hosting", "basePrice": 99},
        {"id": "seo-management", "name": "SEO Management", "basePrice": 300, "customPrice": 250},
        {"id": "chatbot-management", "name": "Chatbot Management", "basePrice": 100, "included": False},
    ],
}


def test_quote_filename():
    assert quote_filename("Acme Dental") == "Acme_Dental_quote.pdf"
    assert quote_filename("Acme  Dental\tCo") == "Acme_Dental_Co_quote.pdf"


def test_render_quote_returns_pdf():
    content = DocumentService().render_quote(OnboardingRequest.model_validate(QUOTE_PAYLOAD))

    assert content.startswith(b"%PDF")


def test_render_quote_with_many_services_spans_pages():
    payload = dict(QUOTE_PAYLOAD)
    payload["selectedServices"] = [
        {"id": f"svc-{i}", "name": f"Service {i}", "description": "Long description " * 20, "basePrice": 10}
        for i in range(30)
    ]

    content = DocumentService().render_quote(OnboardingRequest.model_validate(payload))

    assert content.startswith(b"%PDF")
    page_counts = [int(n) for n in re.findall(rb"/Count (\d+)", content)]
    assert max(page_counts) >= 2


@pytest.mark.asyncio
async def test_export_quote_endpoint(test_client):
    response = await test_client.post("/api/documents/quote", json=QUOTE_PAYLOAD)

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert response.headers["content-disposition"] == (
        "attachment; filename=\"Acme_Dental_quote.pdf\"; filename*=UTF-8''Acme_Dental_quote.pdf"
    )
    assert response.content.startswith(b"%PDF")


@pytest.mark.asyncio
async def test_export_requires_company(test_client):
    response = await test_client.post("/api/documents/quote", json={"contacts": QUOTE_PAYLOAD["contacts"]})

    assert response.status_code == 422


def test_content_disposition_escapes_unsafe_names():
    header = content_disposition(quote_filename('Acme "Best" Co'))

    assert header == (
        "attachment; filename=\"Acme_Best_Co_quote.pdf\"; "
        "filename*=UTF-8''Acme_%22Best%22_Co_quote.pdf"
    )


@pytest.mark.asyncio
async def test_export_with_non_ascii_company_name(test_client):
    payload = dict(QUOTE_PAYLOAD, companyInfo={"name": "東京 Dental"})

    response = await test_client.post("/api/documents/quote", json=payload)

    assert response.status_code == 200
    assert response.content.startswith(b"%PDF")
    disposition = response.headers["content-disposition"]
    assert 'filename="_Dental_quote.pdf"' in disposition
    assert "filename*=UTF-8''%E6%9D%B1%E4%BA%AC_Dental_quote.pdf" in disposition


@pytest.mark.asyncio
async def test_export_with_quote_in_company_name(test_client):
    payload = dict(QUOTE_PAYLOAD, companyInfo={"name": 'Acme "Best" Co'})

    response = await test_client.post("/api/documents/quote", json=payload)

    assert response.status_code == 200
    assert response.headers["content-disposition"].startswith('attachment; filename="Acme_Best_Co_quote.pdf";')
