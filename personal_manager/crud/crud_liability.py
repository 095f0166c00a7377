from personal_manager.crud.base import CRUDRepository
from personal_manager.db.core import LiabilityDB, AccountDB


# Soonest due first
liability_repository = CRUDRepository(
    LiabilityDB,
    "Liability",
    order_by=(LiabilityDB.due_date.asc(),),
    references={"account_id": AccountDB},
)
