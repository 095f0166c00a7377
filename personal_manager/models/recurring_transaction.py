from pydantic import Field
from typing import Optional

from personal_manager.config import DEFAULT_CURRENCY
from personal_manager.models.base import APIModel, UpdateModel, UtcDatetime
from personal_manager.models.transaction import TransactionTypeEnum


# ===== RECURRING TRANSACTION PYDANTIC MODELS =====

DEFAULT_FREQUENCY = "monthly"


class RecurringTransactionCreate(APIModel):
    id: Optional[str] = Field(None, min_length=1, max_length=64)
    account_id: str = Field(..., min_length=1)
    transaction_type: TransactionTypeEnum
    amount: float
    currency: str = Field(default=DEFAULT_CURRENCY, min_length=1, max_length=10)
    category: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = None
    frequency: str = Field(default=DEFAULT_FREQUENCY, min_length=1, max_length=20, description="e.g. daily, weekly, monthly, yearly")
    start_date: UtcDatetime
    end_date: Optional[UtcDatetime] = None
    next_due_date: UtcDatetime
    is_active: bool = True
    savings_goal_id: Optional[str] = Field(None, description="Goal this contribution feeds")


class RecurringTransactionUpdate(UpdateModel):
    account_id: Optional[str] = Field(None, min_length=1)
    transaction_type: Optional[TransactionTypeEnum] = None
    amount: Optional[float] = None
    currency: Optional[str] = Field(None, min_length=1, max_length=10)
    category: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = None
    frequency: Optional[str] = Field(None, min_length=1, max_length=20)
    start_date: Optional[UtcDatetime] = None
    end_date: Optional[UtcDatetime] = None
    next_due_date: Optional[UtcDatetime] = None
    is_active: Optional[bool] = None
    savings_goal_id: Optional[str] = None


class RecurringTransactionResponse(APIModel):
    id: str
    user_id: str
    account_id: str
    transaction_type: TransactionTypeEnum
    amount: float
    currency: str
    category: Optional[str]
    description: Optional[str]
    frequency: str
    start_date: UtcDatetime
    end_date: Optional[UtcDatetime]
    next_due_date: UtcDatetime
    is_active: bool
    savings_goal_id: Optional[str]
    created_at: UtcDatetime
    updated_at: UtcDatetime
