"""
Document controller.
"""

from typing import Tuple

from graybay.controllers.base_controller import BaseController
from graybay.schemas.onboarding import OnboardingRequest
from graybay.services.document_service import DocumentService, quote_filename


class DocumentController(BaseController):
    """Controller for generated documents."""

    def __init__(self, document_service: DocumentService = None):
        self.document_service = document_service or DocumentService()

    def render_quote(self, data: OnboardingRequest) -> Tuple[bytes, str]:
        """Return the quote PDF and its download filename."""
        content = self.document_service.render_quote(data)
        return content, quote_filename(data.company_info.name)
