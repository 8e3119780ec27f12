"""
Generated document endpoints.
"""

from fastapi import APIRouter, Request, Response

from graybay.core.rate_limit import limiter, DEFAULT_LIMIT
from graybay.deps.di_container import get_container
from graybay.schemas.onboarding import OnboardingRequest
from graybay.services.document_service import content_disposition

router = APIRouter()


@router.post(
    "/quote",
    response_class=Response,
    responses={200: {"content": {"application/pdf": {}}}},
)
@limiter.limit(DEFAULT_LIMIT)
async def export_quote(
    request: Request,
    quote_data: OnboardingRequest,
) -> Response:
    """Render the onboarding selection as a downloadable PDF quote."""
    controller = get_container().document_controller()
    content, filename = controller.render_quote(quote_data)
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": content_disposition(filename)},
    )
