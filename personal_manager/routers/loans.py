from fastapi import APIRouter

from personal_manager.crud import crud_loan
from personal_manager.models import loan as loan_models
from personal_manager.routers.resource import register_crud_routes

router = APIRouter(
    prefix="/loans",
    tags=["loans"],
)

register_crud_routes(
    router,
    crud_loan.loan_repository,
    create_model=loan_models.LoanCreate,
    update_model=loan_models.LoanUpdate,
    response_model=loan_models.LoanResponse,
)
