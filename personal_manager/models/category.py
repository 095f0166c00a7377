from pydantic import Field
from typing import Optional
from enum import Enum

from personal_manager.models.base import APIModel, UpdateModel, UtcDatetime

# ===== CATEGORY PYDANTIC MODELS =====

class CategoryTypeEnum(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


class CategoryBase(APIModel):
    name: str = Field(..., min_length=1, max_length=100, description="Category name")
    category_type: CategoryTypeEnum
    icon: str = Field(..., min_length=1, max_length=32)
    color: str = Field(..., min_length=1, max_length=16, description="Hex color code")


class CategoryCreate(CategoryBase):
    id: Optional[str] = Field(None, min_length=1, max_length=64)
    is_default: bool = False


class CategoryUpdate(UpdateModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    category_type: Optional[CategoryTypeEnum] = None
    icon: Optional[str] = Field(None, min_length=1, max_length=32)
    color: Optional[str] = Field(None, min_length=1, max_length=16)
    is_default: Optional[bool] = None


class CategoryResponse(CategoryBase):
    id: str
    is_default: bool
    created_at: UtcDatetime
    updated_at: UtcDatetime
