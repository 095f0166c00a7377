from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import Callable, Type

from personal_manager.auth.dependencies import get_current_user_id
from personal_manager.crud.base import CRUDRepository
from personal_manager.db.core import get_db, NotFoundError, ConflictError
from personal_manager.models.base import APIModel, DataEnvelope, ListEnvelope, MessageEnvelope, UpdateModel


def register_crud_routes(
    router: APIRouter,
    repository: CRUDRepository,
    create_model: Type[APIModel],
    update_model: Type[UpdateModel],
    response_model: Type[APIModel],
    read_user: Callable[..., str] = get_current_user_id,
    write_user: Callable[..., str] = get_current_user_id,
) -> APIRouter:
    """
    Attach create/list/get/update/delete routes for one repository to ``router``.

    Register any fixed sub-paths (``/stats``, ``/categories``) on the router
    before calling this, or ``/{entity_id}`` will capture them.
    """
    label = repository.label
    name = label.lower().replace(" ", "_")

    @router.post("", response_model=DataEnvelope[response_model], name=f"create_{name}")
    def create_entity(
        payload: create_model,
        db: Session = Depends(get_db),
        user_id: str = Depends(write_user),
    ):
        try:
            db_obj = repository.create(db, user_id, payload)
        except ConflictError as e:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
        except ValueError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
        return {"success": True, "data": db_obj}

    @router.get("", response_model=ListEnvelope[response_model], name=f"list_{name}")
    def list_entities(
        db: Session = Depends(get_db),
        user_id: str = Depends(read_user),
    ):
        return {"success": True, "data": repository.list(db, user_id)}

    @router.get("/{entity_id}", response_model=DataEnvelope[response_model], name=f"read_{name}")
    def read_entity(
        entity_id: str,
        db: Session = Depends(get_db),
        user_id: str = Depends(read_user),
    ):
        try:
            return {"success": True, "data": repository.get(db, user_id, entity_id)}
        except NotFoundError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    @router.put("/{entity_id}", response_model=MessageEnvelope, name=f"update_{name}")
    def update_entity(
        entity_id: str,
        payload: update_model,
        db: Session = Depends(get_db),
        user_id: str = Depends(write_user),
    ):
        try:
            repository.update(db, user_id, entity_id, payload)
        except NotFoundError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
        except ConflictError as e:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
        except ValueError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
        return MessageEnvelope(message=f"{label} updated successfully")

    @router.delete("/{entity_id}", response_model=MessageEnvelope, name=f"delete_{name}")
    def delete_entity(
        entity_id: str,
        db: Session = Depends(get_db),
        user_id: str = Depends(write_user),
    ):
        try:
            repository.delete(db, user_id, entity_id)
        except NotFoundError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
        except ConflictError as e:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
        except ValueError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
        return MessageEnvelope(message=f"{label} deleted successfully")

    return router
