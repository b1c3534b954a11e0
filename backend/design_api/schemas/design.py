"""Pydantic schemas for Design CRUD and AI regeneration."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Wire format uses camelCase keys (canvasData, designId, updatedAt, ...)
_camel = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ─── Request Schemas ───


class DesignSave(BaseModel):
    """Create a design, or update one when ``designId`` is given.

    Only truthy fields overwrite an existing design.
    """

    model_config = _camel

    design_id: str | None = None
    name: str | None = None
    canvas_data: Any = None
    width: float | None = None
    height: float | None = None
    category: str | None = None


class DesignGenerateRequest(BaseModel):
    # Left untyped: the service answers a bad prompt with 400 and a bad id
    # with 404, in the standard envelope.
    prompt: Any = None
    id: Any = None


# ─── Response Schemas ───


class DesignResponse(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    id: uuid.UUID
    user_id: str
    name: str
    canvas_data: Any = None
    width: float | None = None
    height: float | None = None
    category: str | None = None
    created_at: datetime
    updated_at: datetime


class DesignEnvelope(BaseModel):
    success: bool = True
    data: DesignResponse


class DesignListEnvelope(BaseModel):
    success: bool = True
    data: list[DesignResponse] = Field(default_factory=list)


class MessageEnvelope(BaseModel):
    success: bool
    message: str
