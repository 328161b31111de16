"""Workspace and workspace membership ORM models.

Membership rows decide which tasks a user may see on the dashboard.
"""

from sqlalchemy import ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import CuidTimestampModel


class Workspace(CuidTimestampModel, Base):
    """Top-level scope that owns projects and members. Table: workspace."""

    __tablename__ = "workspace"

    name: Mapped[str] = mapped_column(String, nullable=False)


class WorkspaceUser(CuidTimestampModel, Base):
    """Membership of a user in a workspace. Table: workspace_user."""

    __tablename__ = "workspace_user"

    workspace_id: Mapped[str] = mapped_column(
        String, ForeignKey("workspace.id", ondelete="CASCADE"), nullable=False
    )
    user_id: Mapped[str] = mapped_column(
        String, ForeignKey("user.id", ondelete="CASCADE"), nullable=False
    )
    role: Mapped[str] = mapped_column(
        String(32), nullable=False, default="member", server_default="member"
    )

    __table_args__ = (
        Index("ix_workspace_user_user", "user_id"),
        Index("ix_workspace_user_workspace_user", "workspace_id", "user_id", unique=True),
    )
