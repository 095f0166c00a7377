from pydantic import Field, computed_field
from typing import Optional
from datetime import datetime, timezone

from personal_manager.config import DEFAULT_CURRENCY
from personal_manager.models.base import APIModel, UpdateModel, UtcDatetime


# ===== LIABILITY PYDANTIC MODELS =====

class LiabilityCreate(APIModel):
    id: Optional[str] = Field(None, min_length=1, max_length=64)
    person_name: str = Field(..., min_length=1, max_length=255, description="Who the money is owed to")
    amount: float
    currency: str = Field(default=DEFAULT_CURRENCY, min_length=1, max_length=10)
    due_date: UtcDatetime
    is_paid: bool = False
    description: Optional[str] = None
    is_historical_entry: bool = Field(default=False, description="Recorded after the fact; does not move account balances")
    account_id: Optional[str] = None
    transaction_id: Optional[str] = None


class LiabilityUpdate(UpdateModel):
    person_name: Optional[str] = Field(None, min_length=1, max_length=255)
    amount: Optional[float] = None
    currency: Optional[str] = Field(None, min_length=1, max_length=10)
    due_date: Optional[UtcDatetime] = None
    is_paid: Optional[bool] = None
    description: Optional[str] = None
    is_historical_entry: Optional[bool] = None
    account_id: Optional[str] = None
    transaction_id: Optional[str] = None


class LiabilityResponse(APIModel):
    id: str
    user_id: str
    person_name: str
    amount: float
    currency: str
    due_date: UtcDatetime
    is_paid: bool
    description: Optional[str]
    is_historical_entry: bool
    account_id: Optional[str]
    transaction_id: Optional[str]
    created_at: UtcDatetime
    updated_at: UtcDatetime

    @computed_field(alias="isOverdue")
    @property
    def is_overdue(self) -> bool:
        return not self.is_paid and self.due_date < _now()

    @computed_field(alias="daysUntilDue")
    @property
    def days_until_due(self) -> int:
        if self.is_paid:
            return 0
        # Whole days, truncated toward zero (negative once overdue)
        return int((self.due_date - _now()).total_seconds() / 86400)


def _now() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)
