from pydantic import Field, field_validator
from typing import Optional

from personal_manager.config import DEFAULT_CURRENCY
from personal_manager.models.base import APIModel, UpdateModel, UtcDatetime

# ===== BUDGET PYDANTIC MODELS =====

DEFAULT_BUDGET_PERIOD = "monthly"


class BudgetCreate(APIModel):
    id: Optional[str] = Field(None, min_length=1, max_length=64)
    category: str = Field(..., min_length=1, max_length=100, description="Category this budget caps")
    amount: float = Field(..., description="Allocated budget amount")
    currency: str = Field(default=DEFAULT_CURRENCY, min_length=1, max_length=10)
    period: str = Field(default=DEFAULT_BUDGET_PERIOD, min_length=1, max_length=20, description="e.g. weekly, monthly, yearly")

    @field_validator('category')
    @classmethod
    def validate_category(cls, v: str) -> str:
        return v.strip()


class BudgetUpdate(UpdateModel):
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    amount: Optional[float] = None
    currency: Optional[str] = Field(None, min_length=1, max_length=10)
    period: Optional[str] = Field(None, min_length=1, max_length=20)

    @field_validator('category')
    @classmethod
    def validate_category(cls, v: Optional[str]) -> Optional[str]:
        return v.strip() if v else v


class BudgetResponse(APIModel):
    id: str
    user_id: str
    category: str
    amount: float
    currency: str
    period: str
    created_at: UtcDatetime
    updated_at: UtcDatetime
