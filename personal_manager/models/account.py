from pydantic import Field, field_validator, computed_field
from typing import Optional, Dict
from enum import Enum

from personal_manager.config import DEFAULT_CURRENCY
from personal_manager.models.base import APIModel, UpdateModel, UtcDatetime


# ===== ACCOUNT PYDANTIC MODELS =====

class AccountTypeEnum(str, Enum):
    WALLET = "wallet"
    BANK = "bank"
    MOBILE_BANKING = "mobile_banking"
    CASH = "cash"
    INVESTMENT = "investment"
    SAVINGS = "savings"
    CREDIT_CARD = "credit_card"


# Spellings sent by older mobile clients
ACCOUNT_TYPE_ALIASES = {
    "mobileBanking": AccountTypeEnum.MOBILE_BANKING.value,
    "creditCard": AccountTypeEnum.CREDIT_CARD.value,
}


def _normalize_account_type(v):
    if isinstance(v, str):
        return ACCOUNT_TYPE_ALIASES.get(v, v)
    return v


class AccountCreate(APIModel):
    id: Optional[str] = Field(None, min_length=1, max_length=64, description="Client-generated id; a UUID is generated when omitted")
    name: str = Field(..., min_length=1, max_length=255, description="Account name")
    account_type: AccountTypeEnum = Field(..., alias="type", description="Type of account")
    balance: float = Field(..., description="Current balance; negative for money owed on a credit card")
    currency: str = Field(default=DEFAULT_CURRENCY, min_length=1, max_length=10)
    credit_limit: Optional[float] = Field(None, description="Credit limit, credit cards only")

    @field_validator('account_type', mode='before')
    @classmethod
    def validate_account_type(cls, v):
        return _normalize_account_type(v)

    @field_validator('name', 'currency')
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip()


class AccountUpdate(UpdateModel):
    """Update account - all fields optional"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    account_type: Optional[AccountTypeEnum] = Field(None, alias="type")
    balance: Optional[float] = None
    currency: Optional[str] = Field(None, min_length=1, max_length=10)
    credit_limit: Optional[float] = None

    @field_validator('account_type', mode='before')
    @classmethod
    def validate_account_type(cls, v):
        return _normalize_account_type(v)

    @field_validator('name', 'currency')
    @classmethod
    def strip_text(cls, v: Optional[str]) -> Optional[str]:
        return v.strip() if v else v


class AccountResponse(APIModel):
    """Account data returned to client"""
    id: str
    user_id: str
    name: str
    account_type: AccountTypeEnum = Field(..., alias="type")
    balance: float
    currency: str
    credit_limit: Optional[float]
    created_at: UtcDatetime
    updated_at: UtcDatetime

    @computed_field(alias="isCreditCard")
    @property
    def is_credit_card(self) -> bool:
        return self.account_type == AccountTypeEnum.CREDIT_CARD

    @computed_field(alias="availableCredit")
    @property
    def available_credit(self) -> float:
        if self.is_credit_card and self.credit_limit is not None:
            return self.credit_limit + self.balance
        return 0.0

    @computed_field(alias="usedAmount")
    @property
    def used_amount(self) -> float:
        return -self.balance if self.is_credit_card else 0.0

    @computed_field(alias="displayBalance")
    @property
    def display_balance(self) -> float:
        return self.available_credit if self.is_credit_card else self.balance


class AccountStats(APIModel):
    """Account statistics"""
    total_accounts: int
    accounts_by_type: Dict[str, int]
    total_assets: float
    total_liabilities: float
    net_worth: float
