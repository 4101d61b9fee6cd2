"""Post ORM model."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.database import Base, utcnow


class Post(Base):
    """A user's post about a vehicle.

    image_url / image_public_id reference an image stored with an external
    hosting provider; both are null when the post has no image. The upload
    itself is handled outside the persistence layer.
    """

    __tablename__ = "posts"

    post_id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    image_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    image_public_id: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    author_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False
    )
    engine_type_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("engine_types.engine_type_id", ondelete="RESTRICT"), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )
