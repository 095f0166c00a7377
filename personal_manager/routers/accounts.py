from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from personal_manager.auth.dependencies import get_current_user_id
from personal_manager.crud import crud_account
from personal_manager.db.core import get_db
from personal_manager.models import account as account_models
from personal_manager.models.base import DataEnvelope
from personal_manager.routers.resource import register_crud_routes

router = APIRouter(
    prefix="/accounts",
    tags=["accounts"],
)


@router.get("/stats", response_model=DataEnvelope[account_models.AccountStats])
def get_account_statistics(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    """
    Get statistics for the current user's accounts (net worth, totals, etc.).
    """
    return {"success": True, "data": crud_account.get_account_stats(db=db, user_id=user_id)}


register_crud_routes(
    router,
    crud_account.account_repository,
    create_model=account_models.AccountCreate,
    update_model=account_models.AccountUpdate,
    response_model=account_models.AccountResponse,
)
