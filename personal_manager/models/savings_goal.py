from pydantic import Field, computed_field
from typing import Optional
from enum import Enum

from personal_manager.config import DEFAULT_CURRENCY
from personal_manager.models.base import APIModel, UpdateModel, UtcDatetime


# ===== SAVINGS GOAL PYDANTIC MODELS =====

class GoalPriorityEnum(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class SavingsGoalCreate(APIModel):
    """New goals always start with nothing saved and not completed"""
    id: Optional[str] = Field(None, min_length=1, max_length=64)
    name: str = Field(..., min_length=1, max_length=255)
    target_amount: float
    currency: str = Field(default=DEFAULT_CURRENCY, min_length=1, max_length=10)
    target_date: UtcDatetime
    description: Optional[str] = None
    account_id: Optional[str] = None
    priority: GoalPriorityEnum = GoalPriorityEnum.MEDIUM


class SavingsGoalUpdate(UpdateModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    target_amount: Optional[float] = None
    current_amount: Optional[float] = None
    currency: Optional[str] = Field(None, min_length=1, max_length=10)
    target_date: Optional[UtcDatetime] = None
    description: Optional[str] = None
    account_id: Optional[str] = None
    priority: Optional[GoalPriorityEnum] = None
    is_completed: Optional[bool] = None


class SavingsGoalResponse(APIModel):
    id: str
    user_id: str
    name: str
    target_amount: float
    current_amount: float
    currency: str
    target_date: UtcDatetime
    description: Optional[str]
    account_id: Optional[str]
    priority: str
    is_completed: bool
    created_at: UtcDatetime
    updated_at: UtcDatetime

    @computed_field(alias="progressPercentage")
    @property
    def progress_percentage(self) -> float:
        if self.target_amount <= 0:
            return 0.0
        return round(self.current_amount / self.target_amount * 100, 2)
