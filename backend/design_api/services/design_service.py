"""Design service — business logic for design CRUD and AI regeneration."""

from __future__ import annotations

import math
import uuid
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from design_api.ai.designer import regenerate_canvas
from design_api.config import get_settings
from design_api.errors import (
    NOT_FOUND_DELETE,
    DesignNotFound,
    InvalidRequest,
    MissingConfiguration,
)
from design_api.models.design import DEFAULT_DESIGN_NAME, Design, utcnow
from design_api.schemas.design import DesignResponse, DesignSave

# Fields a save request may overwrite on an existing design
UPDATABLE_FIELDS = ("name", "canvas_data", "width", "height", "category")


def _js_truthy(value: Any) -> bool:
    """Truthiness as the save endpoint has always applied it.

    Empty objects and arrays count as set; None, False, 0, NaN and "" do not.
    """
    if isinstance(value, (dict, list)):
        return True
    if isinstance(value, float) and math.isnan(value):
        return False
    return bool(value)


def _parse_id(design_id: Any) -> uuid.UUID | None:
    """Identifiers are opaque to callers; an unparseable one matches nothing."""
    if not design_id:
        return None
    try:
        return uuid.UUID(str(design_id))
    except ValueError:
        return None


class DesignService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def _find(
        self, design_id: Any, user_id: str | None = None
    ) -> Design | None:
        parsed = _parse_id(design_id)
        if parsed is None:
            return None
        stmt = select(Design).where(Design.id == parsed)
        if user_id is not None:
            stmt = stmt.where(Design.user_id == user_id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def list_for_user(self, user_id: str) -> list[Design]:
        stmt = (
            select(Design)
            .where(Design.user_id == user_id)
            .order_by(Design.updated_at.desc())
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_owned(self, design_id: str, user_id: str) -> Design:
        design = await self._find(design_id, user_id)
        if design is None:
            raise DesignNotFound()
        return design

    async def save(self, user_id: str, data: DesignSave) -> Design:
        """Update the caller's design when ``designId`` is set, else create one."""
        if data.design_id:
            design = await self.get_owned(data.design_id, user_id)
            # 0, "" and null leave the stored field untouched; {} and [] overwrite
            for field in UPDATABLE_FIELDS:
                value = getattr(data, field)
                if _js_truthy(value):
                    setattr(design, field, value)
            design.updated_at = utcnow()
        else:
            design = Design(
                user_id=user_id,
                name=data.name or DEFAULT_DESIGN_NAME,
                width=data.width,
                height=data.height,
                canvas_data=data.canvas_data,
                category=data.category,
            )
            self.db.add(design)

        await self.db.commit()
        return design

    async def delete(self, design_id: str, user_id: str) -> None:
        design = await self._find(design_id, user_id)
        if design is None:
            raise DesignNotFound(NOT_FOUND_DELETE)

        # Ownership was checked by the lookup above
        await self.db.execute(delete(Design).where(Design.id == design.id))
        await self.db.commit()

    async def regenerate(self, design_id: Any, prompt: Any) -> Design:
        """Replace a design's canvas with the model's answer to ``prompt``.

        The lookup is by id alone, without an owner filter.
        """
        if not prompt or not isinstance(prompt, str):
            raise InvalidRequest("'prompt' is required in request body")

        design = await self._find(design_id)
        if design is None:
            raise DesignNotFound()

        api_key = get_settings().aiml_api_key
        if not api_key:
            raise MissingConfiguration()

        design_json = DesignResponse.model_validate(design).model_dump(
            mode="json", by_alias=True
        )
        design.canvas_data = await regenerate_canvas(design_json, prompt, api_key)
        design.updated_at = utcnow()
        await self.db.commit()
        return design
