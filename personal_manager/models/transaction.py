from pydantic import Field, field_validator
from typing import Optional
from enum import Enum

from personal_manager.config import DEFAULT_CURRENCY
from personal_manager.models.base import APIModel, UpdateModel, UtcDatetime, FlexibleDatetime

# ===== TRANSACTION PYDANTIC MODELS =====

class TransactionTypeEnum(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"
    TRANSFER = "transfer"


INCOME_CATEGORIES = ["Salary", "Business", "Investment", "Gift", "Other Income"]
EXPENSE_CATEGORIES = ["Food", "Transportation", "Shopping", "Entertainment", "Bills", "Medical", "Education", "Other Expense"]


class TransactionCreate(APIModel):
    id: Optional[str] = Field(None, min_length=1, max_length=64, description="Client-generated id; a UUID is generated when omitted")
    account_id: str = Field(..., min_length=1, description="Account this transaction belongs to")
    transaction_type: TransactionTypeEnum = Field(..., alias="type", description="income, expense or transfer")
    amount: float = Field(..., description="Transaction amount")
    currency: str = Field(default=DEFAULT_CURRENCY, min_length=1, max_length=10)
    category: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = Field(None, description="Transaction description")
    # ISO-8601, date-only, or epoch seconds/milliseconds; defaults to now when omitted
    date: FlexibleDatetime = None

    @field_validator('description', 'category')
    @classmethod
    def strip_text(cls, v: Optional[str]) -> Optional[str]:
        return v.strip() if v else v


class TransactionUpdate(UpdateModel):
    """Update transaction - all fields optional"""
    account_id: Optional[str] = Field(None, min_length=1)
    transaction_type: Optional[TransactionTypeEnum] = Field(None, alias="type")
    amount: Optional[float] = None
    currency: Optional[str] = Field(None, min_length=1, max_length=10)
    category: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = None
    date: FlexibleDatetime = None


class TransactionResponse(APIModel):
    id: str
    user_id: str
    account_id: str
    transaction_type: TransactionTypeEnum = Field(..., alias="type")
    amount: float
    currency: str
    category: Optional[str]
    description: Optional[str]
    date: UtcDatetime
    created_at: UtcDatetime
    updated_at: UtcDatetime
