from sqlalchemy import select
from sqlalchemy.orm import Session
from typing import Dict

from personal_manager.crud.base import CRUDRepository
from personal_manager.db.core import AccountDB
from personal_manager.models.account import AccountResponse, AccountStats, AccountTypeEnum


account_repository = CRUDRepository(
    AccountDB,
    "Account",
    order_by=(AccountDB.created_at.desc(),),
)


def get_account_stats(db: Session, user_id: str) -> AccountStats:
    """Get account statistics for a user"""

    accounts = db.execute(select(AccountDB).where(AccountDB.user_id == user_id)).scalars().all()

    accounts_by_type: Dict[str, int] = {}
    total_assets = 0.0
    total_liabilities = 0.0

    for account in accounts:
        accounts_by_type[account.account_type] = accounts_by_type.get(account.account_type, 0) + 1

        if account.account_type == AccountTypeEnum.CREDIT_CARD.value:
            # Credit card balances are negative while money is owed
            total_liabilities += AccountResponse.model_validate(account).used_amount
        else:
            total_assets += account.balance

    return AccountStats(
        total_accounts=len(accounts),
        accounts_by_type=accounts_by_type,
        total_assets=total_assets,
        total_liabilities=total_liabilities,
        net_worth=total_assets - total_liabilities,
    )
