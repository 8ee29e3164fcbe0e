"""Account schemas for API request/response models."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field


class AccountCreateRequest(BaseModel):
    """Request schema for creating an account."""

    name: str = Field(..., max_length=100, description="Display name, e.g. 'Checking'")
    type: str = Field(
        default="Bank",
        max_length=50,
        description="Free-text type tag: Bank, Cash, Savings, Credit, ...",
    )
    balance: Decimal = Field(default=Decimal("0"), description="Initial balance")

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "Checking",
                "type": "Bank",
                "balance": "1000.00",
            },
        },
    }


class AccountResponse(BaseModel):
    """Response schema for account data."""

    id: UUID = Field(..., description="Account unique identifier")
    name: str = Field(..., description="Account display name")
    type: str = Field(..., description="Account type tag")
    balance: Decimal = Field(..., description="Current balance")
    created_at: datetime = Field(..., description="Creation timestamp")


class AccountListResponse(BaseModel):
    accounts: list[AccountResponse]
    total: int = Field(..., description="Number of accounts")
    net_worth: Decimal = Field(..., description="Sum of all account balances")
    currency: str = Field(..., description="Display currency symbol")
