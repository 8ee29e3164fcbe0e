"""SQLAlchemy model for budgets."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import DateTime, Numeric, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from budgetbook.infrastructure.persistence.sqlalchemy.models.base import Base


class BudgetModel(Base):
    """Database model for budgets (insert/delete only)."""

    __tablename__ = "budgets"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    user_id: Mapped[UUID] = mapped_column(Uuid, nullable=False, index=True)

    category: Mapped[str] = mapped_column(String(50), nullable=False)
    limit_amount: Mapped[Decimal] = mapped_column("limit", Numeric(15, 2), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<BudgetModel(id={self.id}, category={self.category})>"
