from pydantic import Field
from typing import Optional

from personal_manager.config import DEFAULT_CURRENCY
from personal_manager.models.base import APIModel, UpdateModel, UtcDatetime


# ===== LOAN PYDANTIC MODELS =====

class LoanCreate(APIModel):
    id: Optional[str] = Field(None, min_length=1, max_length=64)
    person_name: str = Field(..., min_length=1, max_length=255, description="Who the money was lent to")
    amount: float
    currency: str = Field(default=DEFAULT_CURRENCY, min_length=1, max_length=10)
    loan_date: UtcDatetime
    return_date: Optional[UtcDatetime] = None
    is_returned: bool = False
    description: Optional[str] = None
    is_historical_entry: bool = False
    account_id: Optional[str] = None
    transaction_id: Optional[str] = None


class LoanUpdate(UpdateModel):
    person_name: Optional[str] = Field(None, min_length=1, max_length=255)
    amount: Optional[float] = None
    currency: Optional[str] = Field(None, min_length=1, max_length=10)
    loan_date: Optional[UtcDatetime] = None
    return_date: Optional[UtcDatetime] = None
    is_returned: Optional[bool] = None
    description: Optional[str] = None
    is_historical_entry: Optional[bool] = None
    account_id: Optional[str] = None
    transaction_id: Optional[str] = None


class LoanResponse(APIModel):
    id: str
    user_id: str
    person_name: str
    amount: float
    currency: str
    loan_date: UtcDatetime
    return_date: Optional[UtcDatetime]
    is_returned: bool
    description: Optional[str]
    is_historical_entry: bool
    account_id: Optional[str]
    transaction_id: Optional[str]
    created_at: UtcDatetime
    updated_at: UtcDatetime
