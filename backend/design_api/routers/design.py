"""Design router — CRUD and AI regeneration endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from design_api.auth import get_current_user_id
from design_api.db.session import get_db
from design_api.errors import failure_message
from design_api.services.design_service import DesignService
from design_api.schemas.design import (
    DesignSave,
    DesignGenerateRequest,
    DesignResponse,
    DesignEnvelope,
    DesignListEnvelope,
    MessageEnvelope,
)

router = APIRouter()


def _get_service(db: AsyncSession = Depends(get_db)) -> DesignService:
    return DesignService(db)


@router.get("/", response_model=DesignListEnvelope)
async def list_designs(
    user_id: str = Depends(get_current_user_id),
    service: DesignService = Depends(_get_service),
):
    """List the caller's designs, most recently updated first."""
    with failure_message("Failed to fetch designs"):
        designs = await service.list_for_user(user_id)
        return DesignListEnvelope(
            data=[DesignResponse.model_validate(d) for d in designs]
        )


@router.post(
    "/generate",
    response_model=MessageEnvelope,
    dependencies=[Depends(get_current_user_id)],
)
async def generate_design(
    data: DesignGenerateRequest,
    service: DesignService = Depends(_get_service),
):
    """Rewrite a design's canvas with the AI model. Does not return the design."""
    with failure_message("Failed to generate AI response"):
        await service.regenerate(data.id, data.prompt)
        return MessageEnvelope(success=True, message="Design regenerated successfully")


@router.get("/{design_id}", response_model=DesignEnvelope)
async def get_design(
    design_id: str,
    user_id: str = Depends(get_current_user_id),
    service: DesignService = Depends(_get_service),
):
    """Get one of the caller's designs by ID."""
    with failure_message("Failed to fetch design by ID"):
        design = await service.get_owned(design_id, user_id)
        return DesignEnvelope(data=DesignResponse.model_validate(design))


@router.post("/", response_model=DesignEnvelope)
async def save_design(
    data: DesignSave,
    user_id: str = Depends(get_current_user_id),
    service: DesignService = Depends(_get_service),
):
    """Create a design, or partially update it when ``designId`` is given."""
    with failure_message("Failed to save design"):
        design = await service.save(user_id, data)
        return DesignEnvelope(data=DesignResponse.model_validate(design))


@router.delete("/{design_id}", response_model=MessageEnvelope)
async def delete_design(
    design_id: str,
    user_id: str = Depends(get_current_user_id),
    service: DesignService = Depends(_get_service),
):
    """Delete one of the caller's designs."""
    with failure_message("Failed to delete design"):
        await service.delete(design_id, user_id)
        return MessageEnvelope(success=True, message="Design deleted successfully")
