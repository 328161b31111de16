"""User ORM model (owned by the auth service; read here for assignee display)."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import CuidTimestampModel


class User(CuidTimestampModel, Base):
    """User model. Table: user."""

    __tablename__ = "user"

    name: Mapped[str] = mapped_column(String, nullable=False)
    email: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    image: Mapped[str | None] = mapped_column(String, nullable=True)
