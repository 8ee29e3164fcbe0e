"""SQLAlchemy model for User aggregate."""

from uuid import UUID

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from budgetbook.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class UserModel(Base, TimestampMixin):
    """
    SQLAlchemy model for persisting User aggregates.

    The email column is unique so concurrent registrations of the same
    address cannot both succeed.

    Table: users
    """

    __tablename__ = "users"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email={self.email})>"
