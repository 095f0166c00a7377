from fastapi import APIRouter

from personal_manager.crud import crud_recurring_transaction
from personal_manager.models import recurring_transaction as recurring_transaction_models
from personal_manager.routers.resource import register_crud_routes

router = APIRouter(
    prefix="/recurring-transactions",
    tags=["recurring-transactions"],
)

register_crud_routes(
    router,
    crud_recurring_transaction.recurring_transaction_repository,
    create_model=recurring_transaction_models.RecurringTransactionCreate,
    update_model=recurring_transaction_models.RecurringTransactionUpdate,
    response_model=recurring_transaction_models.RecurringTransactionResponse,
)
