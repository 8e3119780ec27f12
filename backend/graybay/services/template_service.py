"""
Template service with business logic.
"""

from typing import List
from sqlalchemy.ext.asyncio import AsyncSession

from graybay.core.exceptions import NotFoundError
from graybay.core.logging import get_logger
from graybay.db.repositories.template_repository import TemplateRepository
from graybay.schemas.template import TemplateCreate, TemplateUpdate, TemplateResponse
from graybay.services.activity_service import ActivityService, SYSTEM_USER
from graybay.services.base_service import BaseService

logger = get_logger(__name__)

ACTIVITY_TYPE = "template"


class TemplateService(BaseService):
    """Service for template operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.template_repo = TemplateRepository(session)
        self.activity_service = ActivityService(session)

    async def list_templates(self) -> List[TemplateResponse]:
        """List templates, most recently updated first."""
        templates = await self.template_repo.list_recent()
        return [TemplateResponse.model_validate(template) for template in templates]

    async def get_template(self, template_id: int) -> TemplateResponse:
        template = await self.template_repo.get(template_id)
        if not template:
            raise NotFoundError.for_entity("Template", template_id)
        return TemplateResponse.model_validate(template)

    async def create_template(self, template_data: TemplateCreate) -> TemplateResponse:
        """Create a template and log it to the activity feed."""
        template = await self.template_repo.create(**template_data.model_dump())
        await self.session.commit()
        response = TemplateResponse.model_validate(template)

        await self.activity_service.record(
            type=ACTIVITY_TYPE,
            description=f'Template "{response.name}" created',
            user=response.author,
            target=response.name,
        )
        return response

    async def update_template(self, template_id: int, template_data: TemplateUpdate) -> TemplateResponse:
        """Partially update a template and log it to the activity feed."""
        existing = await self.template_repo.get(template_id)
        if not existing:
            raise NotFoundError.for_entity("Template", template_id)

        template = await self.template_repo.update(template_id, **template_data.model_dump(exclude_unset=True))
        await self.session.commit()
        response = TemplateResponse.model_validate(template)

        await self.activity_service.record(
            type=ACTIVITY_TYPE,
            description=f'Template "{response.name}" updated',
            user=template_data.author or response.author,
            target=response.name,
        )
        return response

    async def delete_template(self, template_id: int) -> None:
        """Delete a template and log it to the activity feed."""
        template = await self.template_repo.get(template_id)
        if not template:
            raise NotFoundError.for_entity("Template", template_id)
        name = template.name

        await self.template_repo.delete(template_id)
        await self.session.commit()
        logger.info("Template deleted", extra={"template_id": template_id})

        await self.activity_service.record(
            type=ACTIVITY_TYPE,
            description=f'Template "{name}" deleted',
            user=SYSTEM_USER,
            target=name,
        )
