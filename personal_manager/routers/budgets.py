from fastapi import APIRouter

from personal_manager.crud import crud_budget
from personal_manager.models import budget as budget_models
from personal_manager.routers.resource import register_crud_routes

router = APIRouter(
    prefix="/budgets",
    tags=["budgets"],
)

register_crud_routes(
    router,
    crud_budget.budget_repository,
    create_model=budget_models.BudgetCreate,
    update_model=budget_models.BudgetUpdate,
    response_model=budget_models.BudgetResponse,
)
