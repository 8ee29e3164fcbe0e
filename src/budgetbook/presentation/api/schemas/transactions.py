"""Transaction schemas for API request/response models."""

import datetime as dt
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field


class TransactionCreateRequest(BaseModel):
    """
    Request schema for posting a transaction.

    Field rules beyond the basic types (positive amount, destination only
    for transfers, ...) are enforced by the ledger and reported with their
    error codes.
    """

    amount: Decimal = Field(..., description="Amount, always positive")
    type: str = Field(..., description="income, expense or transfer")
    category: Optional[str] = Field(
        None,
        description="Category name; ignored for transfers",
    )
    account_id: UUID = Field(..., description="Source account")
    to_account_id: Optional[UUID] = Field(
        None,
        description="Destination account (transfers only)",
    )
    date: Optional[dt.date] = Field(None, description="Occurrence date, defaults to today")
    description: Optional[str] = Field(None, max_length=500)
    service_fee: Optional[Decimal] = Field(
        None,
        description="Fee deducted from the source account (transfers only)",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "amount": "200.00",
                    "type": "expense",
                    "category": "Food",
                    "account_id": "550e8400-e29b-41d4-a716-446655440000",
                    "date": "2024-12-05",
                    "description": "Groceries",
                },
                {
                    "amount": "300.00",
                    "type": "transfer",
                    "account_id": "550e8400-e29b-41d4-a716-446655440000",
                    "to_account_id": "6ba7b810-9dad-11d1-80b4-00c04fd430c8",
                    "service_fee": "25.00",
                },
            ],
        },
    }


class TransactionResponse(BaseModel):
    """Response schema for a posted transaction."""

    id: UUID
    amount: Decimal
    type: str = Field(..., description="INCOME, EXPENSE or TRANSFER")
    category: str
    account_id: UUID
    account_name: Optional[str] = Field(
        None,
        description="Name of the source account, null if it was deleted",
    )
    to_account_id: Optional[UUID] = None
    to_account_name: Optional[str] = None
    date: dt.date
    description: str
    service_fee: Decimal
    created_at: dt.datetime


class TransactionListResponse(BaseModel):
    transactions: list[TransactionResponse]
    total: int
