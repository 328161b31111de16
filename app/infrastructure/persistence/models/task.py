"""Task ORM model. Belongs to one project, optionally assigned to one user."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.domain.enums import TaskStatus
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import CuidTimestampModel


class Task(CuidTimestampModel, Base):
    """Unit of work. Table: task."""

    __tablename__ = "task"

    project_id: Mapped[str] = mapped_column(
        String, ForeignKey("project.id", ondelete="CASCADE"), nullable=False, index=True
    )
    # Not a foreign key; may reference a deleted user.
    user_id: Mapped[str | None] = mapped_column(String, nullable=True, index=True)
    title: Mapped[str] = mapped_column(String, nullable=False)
    number: Mapped[int | None] = mapped_column(Integer, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        default=TaskStatus.TO_DO.value,
        server_default=TaskStatus.TO_DO.value,
    )
    priority: Mapped[str | None] = mapped_column(String(32), nullable=True)
    due_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    position: Mapped[int | None] = mapped_column(Integer, nullable=True)

    __table_args__ = (Index("ix_task_project_created", "project_id", "created_at"),)
