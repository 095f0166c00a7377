from enum import Enum
import re
from typing import Any, Dict, Generic, List, Optional, Sequence, Type, TypeVar
from uuid import uuid4

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from personal_manager.db.core import Base, NotFoundError, ConflictError, utc_now
from personal_manager.logging_config import get_logger
from personal_manager.models.base import UpdateModel

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


def _column_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _model_label(model: Type[Base]) -> str:
    # SavingsGoalDB -> "Savings goal"
    name = model.__name__.removesuffix("DB")
    return re.sub(r"(?<!^)(?=[A-Z])", " ", name).capitalize()


def _is_foreign_key_violation(error: IntegrityError) -> bool:
    # 23503 is foreign_key_violation on PostgreSQL; SQLite only reports it in the message
    if getattr(error.orig, "pgcode", None) == "23503":
        return True
    return "foreign key" in str(error.orig).lower()


class CRUDRepository(Generic[ModelT]):
    """
    Create/list/get/update/delete for one table, scoped to the owning user.

    Every read and write filters on ``owner_column`` = the authenticated user id,
    so a row belonging to someone else behaves exactly like a missing row.
    Tables without an owner (``owner_column=None``) are shared by all users.

    ``references`` maps a foreign-key attribute on the payload (e.g. ``account_id``)
    to the model it points at; the referenced row must be owned by the same user.
    """

    def __init__(
        self,
        model: Type[ModelT],
        label: str,
        order_by: Sequence[Any] = (),
        owner_column: Optional[str] = "user_id",
        references: Optional[Dict[str, Type[Base]]] = None,
    ):
        self.model = model
        self.label = label
        self.order_by = tuple(order_by)
        self.owner_column = owner_column
        self.references = references or {}

    # ===== QUERY HELPERS =====

    def _scoped(self, user_id: Optional[str]):
        stmt = select(self.model)
        if self.owner_column is not None:
            stmt = stmt.where(getattr(self.model, self.owner_column) == user_id)
        return stmt

    def _find(self, db: Session, user_id: Optional[str], entity_id: str) -> Optional[ModelT]:
        stmt = self._scoped(user_id).where(self.model.id == entity_id)
        return db.execute(stmt).scalar_one_or_none()

    def _check_references(self, db: Session, user_id: Optional[str], values: Dict[str, Any]) -> None:
        for field, target in self.references.items():
            target_id = values.get(field)
            if target_id is None:
                continue
            stmt = select(target.id).where(target.id == target_id)
            if self.owner_column is not None:
                stmt = stmt.where(target.user_id == user_id)
            if db.execute(stmt).first() is None:
                # Same message whether the row is missing or owned by someone else
                raise ValueError(f"{_model_label(target)} not found")

    def _nullable(self, field: str) -> bool:
        column = self.model.__table__.columns.get(field)
        return column is None or column.nullable

    def _commit(self, db: Session, action: str, entity_id: str) -> None:
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            if _is_foreign_key_violation(e):
                logger.warning(f"{self.label} {action} refers to a missing row for id {entity_id}: {e.orig}")
                raise ValueError(f"{self.label} refers to a record that does not exist") from e
            logger.warning(f"{self.label} {action} rejected by constraint for id {entity_id}: {e.orig}")
            if action == "create":
                raise ConflictError(f"{self.label} with id {entity_id} already exists") from e
            raise ConflictError(f"{self.label} {action} conflicts with existing data") from e
        except SQLAlchemyError:
            db.rollback()
            logger.exception(f"Failed to {action} {self.label.lower()} {entity_id}")
            raise

    # ===== OPERATIONS =====

    def create(self, db: Session, user_id: Optional[str], data: BaseModel, **extra: Any) -> ModelT:
        """Persist a new row owned by ``user_id``; the id is generated unless the payload carries one"""
        values = {field: _column_value(value) for field, value in data.model_dump().items()}
        values.update(extra)
        entity_id = values.get("id") or str(uuid4())
        values["id"] = entity_id

        if db.get(self.model, entity_id) is not None:
            logger.warning(f"{self.label} with id {entity_id} already exists")
            raise ConflictError(f"{self.label} with id {entity_id} already exists")

        self._check_references(db, user_id, values)

        if self.owner_column is not None:
            values[self.owner_column] = user_id
        now = utc_now()
        values["created_at"] = now
        values["updated_at"] = now

        db_obj = self.model(**values)
        db.add(db_obj)
        self._commit(db, "create", entity_id)
        db.refresh(db_obj)
        logger.info(f"{self.label} created: {entity_id} (user {user_id})")
        return db_obj

    def list(self, db: Session, user_id: Optional[str]) -> List[ModelT]:
        stmt = self._scoped(user_id).order_by(*self.order_by)
        return list(db.execute(stmt).scalars().all())

    def get(self, db: Session, user_id: Optional[str], entity_id: str) -> ModelT:
        db_obj = self._find(db, user_id, entity_id)
        if db_obj is None:
            raise NotFoundError(f"{self.label} not found")
        return db_obj

    def update(self, db: Session, user_id: Optional[str], entity_id: str, updates: UpdateModel) -> ModelT:
        """
        Merge the fields present in ``updates`` into the stored row.

        Omitted fields keep their value. An explicit null clears a nullable column
        and is ignored for a required one. ``updated_at`` is refreshed even when
        nothing else changes.
        """
        db_obj = self.get(db, user_id, entity_id)

        changes = {
            field: _column_value(value)
            for field, value in updates.changes().items()
            if value is not None or self._nullable(field)
        }
        self._check_references(db, user_id, changes)

        for field, value in changes.items():
            setattr(db_obj, field, value)

        # Always update the updated_at timestamp
        db_obj.updated_at = utc_now()

        self._commit(db, "update", entity_id)
        db.refresh(db_obj)
        logger.info(f"{self.label} updated: {entity_id} fields={sorted(changes)} (user {user_id})")
        return db_obj

    def delete(self, db: Session, user_id: Optional[str], entity_id: str) -> None:
        db_obj = self.get(db, user_id, entity_id)
        db.delete(db_obj)
        self._commit(db, "delete", entity_id)
        logger.info(f"{self.label} deleted: {entity_id} (user {user_id})")
