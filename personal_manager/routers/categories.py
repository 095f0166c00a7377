from fastapi import APIRouter

from personal_manager.auth.dependencies import get_admin_user_id
from personal_manager.crud import crud_category
from personal_manager.models import category as category_models
from personal_manager.routers.resource import register_crud_routes

router = APIRouter(
    prefix="/categories",
    tags=["categories"],
)

# Categories are shared by every user; only admins may change them
register_crud_routes(
    router,
    crud_category.category_repository,
    create_model=category_models.CategoryCreate,
    update_model=category_models.CategoryUpdate,
    response_model=category_models.CategoryResponse,
    write_user=get_admin_user_id,
)
