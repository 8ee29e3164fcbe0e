"""SQLAlchemy model for ledger accounts."""

from decimal import Decimal
from uuid import UUID

from sqlalchemy import Index, Integer, Numeric, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from budgetbook.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class AccountModel(Base, TimestampMixin):
    """
    Database model for accounts.

    ``version`` is SQLAlchemy's version counter: every UPDATE/DELETE is
    issued as ``... WHERE id = :id AND version = :seen`` and raises
    ``StaleDataError`` when another writer got there first.
    """

    __tablename__ = "accounts"

    __table_args__ = (Index("ix_accounts_user_created", "user_id", "created_at"),)

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    user_id: Mapped[UUID] = mapped_column(Uuid, nullable=False, index=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    account_type: Mapped[str] = mapped_column("type", String(50), nullable=False)
    balance: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False)

    version: Mapped[int] = mapped_column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}  # NOQA: RUF012

    def __repr__(self) -> str:
        return f"<AccountModel(id={self.id}, name={self.name}, balance={self.balance})>"
