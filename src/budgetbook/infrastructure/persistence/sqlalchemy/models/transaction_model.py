"""SQLAlchemy model for transaction records."""

import datetime as dt
from decimal import Decimal
from typing import Optional
from uuid import UUID

from sqlalchemy import Date, DateTime, Index, Numeric, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from budgetbook.infrastructure.persistence.sqlalchemy.models.base import Base


class TransactionModel(Base):
    """
    Database model for transactions.

    Rows are inserted and deleted, never updated. ``account_id`` and
    ``to_account_id`` deliberately carry no foreign key: deleting an account
    leaves its history in place.
    """

    __tablename__ = "transactions"

    __table_args__ = (
        Index("ix_transactions_user_date", "user_id", "date"),
        Index("ix_transactions_user_account", "user_id", "account_id"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    user_id: Mapped[UUID] = mapped_column(Uuid, nullable=False, index=True)

    amount: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False)
    kind: Mapped[str] = mapped_column("type", String(10), nullable=False)
    category: Mapped[str] = mapped_column(String(50), nullable=False)

    account_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)
    to_account_id: Mapped[Optional[UUID]] = mapped_column(Uuid, nullable=True)

    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    description: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    service_fee: Mapped[Decimal] = mapped_column(
        Numeric(15, 2),
        nullable=False,
        default=Decimal("0"),
    )

    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<TransactionModel(id={self.id}, type={self.kind}, amount={self.amount})>"
