"""SQLAlchemy ORM model for Design."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import JSON, DateTime, Float, String, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from design_api.db.session import Base

DEFAULT_DESIGN_NAME = "Untitled Design"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Design(Base):
    __tablename__ = "designs"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    name: Mapped[str] = mapped_column(
        String(255), nullable=False, default=DEFAULT_DESIGN_NAME
    )

    # Serialized canvas scene; never interpreted here
    canvas_data: Mapped[Any] = mapped_column(
        JSON().with_variant(JSONB(), "postgresql"), nullable=True
    )

    width: Mapped[float | None] = mapped_column(Float, nullable=True)
    height: Mapped[float | None] = mapped_column(Float, nullable=True)
    category: Mapped[str | None] = mapped_column(String(255), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )

    def __repr__(self) -> str:
        return f"<Design {self.name} ({self.id})>"
