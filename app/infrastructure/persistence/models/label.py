"""Label ORM model. Many labels per task; task_id may be null for unattached labels."""

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import CuidTimestampModel


class Label(CuidTimestampModel, Base):
    """User-defined tag attached to a task. Table: label."""

    __tablename__ = "label"

    task_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("task.id", ondelete="CASCADE"), nullable=True, index=True
    )
    name: Mapped[str] = mapped_column(String, nullable=False)
    color: Mapped[str] = mapped_column(String, nullable=False)
