"""Budget schemas for API request/response models."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field


class BudgetCreateRequest(BaseModel):
    category: str = Field(..., description="Category the limit applies to")
    limit: Decimal = Field(..., description="Monthly spending limit")

    model_config = {
        "json_schema_extra": {
            "example": {"category": "Food", "limit": "1000.00"},
        },
    }


class BudgetResponse(BaseModel):
    id: UUID
    category: str
    limit: Decimal
    created_at: datetime


class BudgetStatusResponse(BaseModel):
    """Spending of one budget in a month."""

    id: UUID
    category: str
    color: str = Field(..., description="Category display color")
    limit: Decimal
    spent: Decimal = Field(..., description="Expenses in the category this month")
    remaining: Decimal = Field(..., description="Limit minus spent, may be negative")
    percentage: Decimal = Field(..., description="Spent as percent of limit, capped at 100")
    is_over_budget: bool


class BudgetStatusListResponse(BaseModel):
    month: str = Field(..., description="Month in YYYY-MM format")
    budgets: list[BudgetStatusResponse]
