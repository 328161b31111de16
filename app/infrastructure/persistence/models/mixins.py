"""Columns shared by every dashboard table: CUID primary key and creation time."""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from app.shared.utils.generators import generate_cuid


class CuidPrimaryKey:
    id: Mapped[str] = mapped_column(String, primary_key=True, default=generate_cuid)


class CreatedAt:
    # Tasks are listed and labels ordered by this column.
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


class CuidTimestampModel(CuidPrimaryKey, CreatedAt):
    """CUID id + created_at; mix in before Base."""
