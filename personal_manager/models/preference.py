from pydantic import Field, field_validator
from typing import Optional

from personal_manager.models.base import APIModel, UpdateModel, UtcDatetime


class PreferenceUpdate(UpdateModel):
    """Accepts display_currency or displayCurrency"""
    display_currency: Optional[str] = Field(None, min_length=1, max_length=10)

    @field_validator('display_currency')
    @classmethod
    def validate_display_currency(cls, v: Optional[str]) -> Optional[str]:
        return v.strip() if v else v


class PreferenceResponse(APIModel):
    display_currency: str
    # None until the user saves preferences for the first time
    updated_at: Optional[UtcDatetime] = None
