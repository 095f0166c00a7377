from personal_manager.crud.base import CRUDRepository
from personal_manager.db.core import BudgetDB


budget_repository = CRUDRepository(
    BudgetDB,
    "Budget",
    order_by=(BudgetDB.created_at.desc(),),
)
