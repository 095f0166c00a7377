from sqlalchemy.orm import Session
from typing import Any, Optional

from personal_manager.crud.base import CRUDRepository
from personal_manager.db.core import TransactionDB, AccountDB, utc_now
from personal_manager.models.transaction import TransactionCreate


class TransactionRepository(CRUDRepository[TransactionDB]):

    def create(self, db: Session, user_id: Optional[str], data: TransactionCreate, **extra: Any) -> TransactionDB:
        # Transactions recorded without a date happened "now"
        if data.date is None:
            extra.setdefault("date", utc_now())
        return super().create(db, user_id, data, **extra)


transaction_repository = TransactionRepository(
    TransactionDB,
    "Transaction",
    order_by=(TransactionDB.date.desc(), TransactionDB.created_at.desc()),
    references={"account_id": AccountDB},
)
