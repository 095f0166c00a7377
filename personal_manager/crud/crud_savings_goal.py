from personal_manager.crud.base import CRUDRepository
from personal_manager.db.core import SavingsGoalDB, AccountDB


savings_goal_repository = CRUDRepository(
    SavingsGoalDB,
    "Savings goal",
    order_by=(SavingsGoalDB.target_date.asc(),),
    references={"account_id": AccountDB},
)
