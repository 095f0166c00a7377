from sqlalchemy import func, select
from sqlalchemy.orm import Session
from uuid import uuid4

from personal_manager.crud.base import CRUDRepository
from personal_manager.db.core import CategoryDB, utc_now
from personal_manager.logging_config import get_logger

logger = get_logger(__name__)

# (name, type, icon, color)
DEFAULT_CATEGORIES = [
    ("Salary", "income", "💰", "#4CAF50"),
    ("Business", "income", "💼", "#2196F3"),
    ("Investment", "income", "📈", "#FF9800"),
    ("Gift", "income", "🎁", "#E91E63"),
    ("Food", "expense", "🍔", "#FF5722"),
    ("Transportation", "expense", "🚗", "#607D8B"),
    ("Shopping", "expense", "🛍️", "#9C27B0"),
    ("Entertainment", "expense", "🎬", "#673AB7"),
    ("Bills", "expense", "💡", "#795548"),
    ("Medical", "expense", "⚕️", "#F44336"),
]


# Categories are global: no owner column
category_repository = CRUDRepository(
    CategoryDB,
    "Category",
    order_by=(CategoryDB.is_default.desc(), CategoryDB.created_at.asc()),
    owner_column=None,
)


def seed_default_categories(db: Session) -> int:
    """Insert the default categories if the table is empty. Returns the number inserted."""

    existing = db.execute(select(func.count()).select_from(CategoryDB)).scalar_one()
    if existing:
        return 0

    now = utc_now()
    for name, category_type, icon, color in DEFAULT_CATEGORIES:
        db.add(CategoryDB(
            id=str(uuid4()),
            name=name,
            category_type=category_type,
            icon=icon,
            color=color,
            is_default=True,
            created_at=now,
            updated_at=now,
        ))
    db.commit()

    logger.info(f"Seeded {len(DEFAULT_CATEGORIES)} default categories")
    return len(DEFAULT_CATEGORIES)
