from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from personal_manager.auth.dependencies import get_current_user_id
from personal_manager.crud import crud_preference
from personal_manager.crud.crud_account import account_repository
from personal_manager.crud.crud_budget import budget_repository
from personal_manager.crud.crud_liability import liability_repository
from personal_manager.crud.crud_loan import loan_repository
from personal_manager.crud.crud_recurring_transaction import recurring_transaction_repository
from personal_manager.crud.crud_savings_goal import savings_goal_repository
from personal_manager.crud.crud_transaction import transaction_repository
from personal_manager.db.core import get_db
from personal_manager.models.account import AccountResponse
from personal_manager.models.base import APIModel
from personal_manager.models.budget import BudgetResponse
from personal_manager.models.liability import LiabilityResponse
from personal_manager.models.loan import LoanResponse
from personal_manager.models.preference import PreferenceResponse, PreferenceUpdate
from personal_manager.models.recurring_transaction import RecurringTransactionResponse
from personal_manager.models.savings_goal import SavingsGoalResponse
from personal_manager.models.transaction import TransactionResponse

# Bulk reads used by the mobile client to sync everything a user owns
router = APIRouter(
    prefix="/api",
    tags=["user data"],
)


class AccountList(APIModel):
    accounts: List[AccountResponse]


class TransactionList(APIModel):
    transactions: List[TransactionResponse]


class LoanList(APIModel):
    loans: List[LoanResponse]


class LiabilityList(APIModel):
    liabilities: List[LiabilityResponse]


class BudgetList(APIModel):
    budgets: List[BudgetResponse]


class RecurringTransactionList(APIModel):
    recurring_transactions: List[RecurringTransactionResponse]


class SavingsGoalList(APIModel):
    savings_goals: List[SavingsGoalResponse]


@router.get("/accounts", response_model=AccountList)
def get_user_accounts(db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    return {"accounts": account_repository.list(db, user_id)}


@router.get("/transactions", response_model=TransactionList)
def get_user_transactions(db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    return {"transactions": transaction_repository.list(db, user_id)}


@router.get("/loans", response_model=LoanList)
def get_user_loans(db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    return {"loans": loan_repository.list(db, user_id)}


@router.get("/liabilities", response_model=LiabilityList)
def get_user_liabilities(db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    return {"liabilities": liability_repository.list(db, user_id)}


@router.get("/budgets", response_model=BudgetList)
def get_user_budgets(db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    return {"budgets": budget_repository.list(db, user_id)}


@router.get("/recurring-transactions", response_model=RecurringTransactionList)
def get_user_recurring_transactions(db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    return {"recurring_transactions": recurring_transaction_repository.list(db, user_id)}


@router.get("/savings-goals", response_model=SavingsGoalList)
def get_user_savings_goals(db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    return {"savings_goals": savings_goal_repository.list(db, user_id)}


# ===== PREFERENCES =====

@router.get("/preferences", response_model=PreferenceResponse)
def get_preferences(db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    return crud_preference.read_db_preferences(db, user_id)


@router.put("/preferences", response_model=PreferenceResponse)
def update_preferences(
    preferences: PreferenceUpdate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    return crud_preference.upsert_db_preferences(db, user_id, preferences)
