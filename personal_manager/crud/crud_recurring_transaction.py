from personal_manager.crud.base import CRUDRepository
from personal_manager.db.core import RecurringTransactionDB, AccountDB, SavingsGoalDB


recurring_transaction_repository = CRUDRepository(
    RecurringTransactionDB,
    "Recurring transaction",
    order_by=(RecurringTransactionDB.created_at.desc(),),
    references={"account_id": AccountDB, "savings_goal_id": SavingsGoalDB},
)
