from fastapi import APIRouter

from personal_manager.crud import crud_liability
from personal_manager.models import liability as liability_models
from personal_manager.routers.resource import register_crud_routes

router = APIRouter(
    prefix="/liabilities",
    tags=["liabilities"],
)

register_crud_routes(
    router,
    crud_liability.liability_repository,
    create_model=liability_models.LiabilityCreate,
    update_model=liability_models.LiabilityUpdate,
    response_model=liability_models.LiabilityResponse,
)
