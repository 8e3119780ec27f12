"""
Template API endpoints.
"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from graybay.controllers.template_controller import TemplateController
from graybay.db.session import get_db
from graybay.schemas.template import TemplateCreate, TemplateUpdate, TemplateResponse, TemplateListResponse

router = APIRouter()


@router.get("", response_model=TemplateListResponse)
async def list_templates(
    db: AsyncSession = Depends(get_db),
) -> TemplateListResponse:
    """List templates, most recently updated first."""
    controller = TemplateController(db)
    return await controller.list_templates()


@router.post("", response_model=TemplateResponse, status_code=status.HTTP_201_CREATED)
async def create_template(
    template_data: TemplateCreate,
    db: AsyncSession = Depends(get_db),
) -> TemplateResponse:
    controller = TemplateController(db)
    return await controller.create_template(template_data)


@router.get("/{template_id}", response_model=TemplateResponse)
async def get_template(
    template_id: int,
    db: AsyncSession = Depends(get_db),
) -> TemplateResponse:
    controller = TemplateController(db)
    return await controller.get_template(template_id)


@router.put("/{template_id}", response_model=TemplateResponse)
async def update_template(
    template_id: int,
    template_data: TemplateUpdate,
    db: AsyncSession = Depends(get_db),
) -> TemplateResponse:
    controller = TemplateController(db)
    return await controller.update_template(template_id, template_data)


@router.delete("/{template_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_template(
    template_id: int,
    db: AsyncSession = Depends(get_db),
) -> Response:
    controller = TemplateController(db)
    await controller.delete_template(template_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
