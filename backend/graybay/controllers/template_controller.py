"""
Template controller.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from graybay.controllers.base_controller import BaseController
from graybay.services.template_service import TemplateService
from graybay.schemas.template import TemplateCreate, TemplateUpdate, TemplateResponse, TemplateListResponse


class TemplateController(BaseController):
    """Controller for template operations."""

    def __init__(self, session: AsyncSession):
        self.template_service = TemplateService(session)

    async def list_templates(self) -> TemplateListResponse:
        templates = await self.template_service.list_templates()
        return TemplateListResponse(items=templates, total=len(templates))

    async def get_template(self, template_id: int) -> TemplateResponse:
        return await self.template_service.get_template(template_id)

    async def create_template(self, template_data: TemplateCreate) -> TemplateResponse:
        return await self.template_service.create_template(template_data)

    async def update_template(self, template_id: int, template_data: TemplateUpdate) -> TemplateResponse:
        return await self.template_service.update_template(template_id, template_data)

    async def delete_template(self, template_id: int) -> None:
        await self.template_service.delete_template(template_id)
