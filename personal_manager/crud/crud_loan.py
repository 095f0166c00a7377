from personal_manager.crud.base import CRUDRepository
from personal_manager.db.core import LoanDB, AccountDB


loan_repository = CRUDRepository(
    LoanDB,
    "Loan",
    order_by=(LoanDB.loan_date.desc(),),
    references={"account_id": AccountDB},
)
