from fastapi import APIRouter, Depends
from typing import Dict, List

from personal_manager.auth.dependencies import get_current_user_id
from personal_manager.crud import crud_transaction
from personal_manager.models import transaction as transaction_models
from personal_manager.models.base import DataEnvelope
from personal_manager.routers.resource import register_crud_routes

router = APIRouter(
    prefix="/transactions",
    tags=["transactions"],
)


@router.get("/categories", response_model=DataEnvelope[Dict[str, List[str]]])
def read_transaction_categories(user_id: str = Depends(get_current_user_id)):
    """
    Suggested category names for income and expense transactions.
    """
    return {
        "success": True,
        "data": {
            "income": transaction_models.INCOME_CATEGORIES,
            "expense": transaction_models.EXPENSE_CATEGORIES,
        },
    }


register_crud_routes(
    router,
    crud_transaction.transaction_repository,
    create_model=transaction_models.TransactionCreate,
    update_model=transaction_models.TransactionUpdate,
    response_model=transaction_models.TransactionResponse,
)
