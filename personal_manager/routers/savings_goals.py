from fastapi import APIRouter

from personal_manager.crud import crud_savings_goal
from personal_manager.models import savings_goal as savings_goal_models
from personal_manager.routers.resource import register_crud_routes

router = APIRouter(
    prefix="/savings-goals",
    tags=["savings-goals"],
)

register_crud_routes(
    router,
    crud_savings_goal.savings_goal_repository,
    create_model=savings_goal_models.SavingsGoalCreate,
    update_model=savings_goal_models.SavingsGoalUpdate,
    response_model=savings_goal_models.SavingsGoalResponse,
)
