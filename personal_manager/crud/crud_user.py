from sqlalchemy import select
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from pydantic import ValidationError
from typing import Optional
from uuid import uuid4

from personal_manager.auth.security import AuthenticationError, hash_password, verify_password
from personal_manager.db.core import UserDB, NotFoundError, ConflictError, utc_now
from personal_manager.logging_config import get_logger
from personal_manager.models.user import UserCreate, UserSignin, normalize_email

logger = get_logger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


# ===== DATABASE OPERATIONS =====

def read_db_user_by_email(db: Session, email: str) -> Optional[UserDB]:
    return db.execute(select(UserDB).where(UserDB.email == normalize_email(email))).scalar_one_or_none()


def read_db_user(db: Session, user_id: str) -> UserDB:
    db_user = db.get(UserDB, user_id)
    if db_user is None:
        raise NotFoundError("User not found")
    return db_user


def create_db_user(db: Session, user_data: UserCreate) -> UserDB:
    """Register a new user; emails are unique after trimming and lowercasing"""

    if read_db_user_by_email(db, user_data.email) is not None:
        logger.warning(f"Registration rejected, email already in use: {user_data.email}")
        raise ConflictError("User with this email already exists")

    now = utc_now()
    db_user = UserDB(
        id=str(uuid4()),
        name=user_data.name,
        email=user_data.email,
        password_hash=hash_password(user_data.password),
        created_at=now,
        updated_at=now,
    )

    try:
        db.add(db_user)
        db.commit()
        db.refresh(db_user)
    except IntegrityError as e:
        # Lost a race with a concurrent registration for the same email
        db.rollback()
        raise ConflictError("User with this email already exists") from e

    logger.info(f"User registered: {db_user.id}")
    return db_user


def authenticate_user(db: Session, email: str, password: str) -> UserDB:
    """Unknown email and wrong password fail with the same error"""

    db_user = read_db_user_by_email(db, email)
    if db_user is None or not verify_password(password, db_user.password_hash):
        logger.info(f"Failed login for {normalize_email(email)}")
        raise AuthenticationError(INVALID_CREDENTIALS)
    return db_user


def signin_user(db: Session, signin_data: UserSignin) -> UserDB:
    """Log in when the email is known, otherwise register a new account"""

    if read_db_user_by_email(db, signin_data.email) is not None:
        return authenticate_user(db, signin_data.email, signin_data.password)

    if not signin_data.name or not signin_data.name.strip():
        raise ValueError("Name is required for new user registration")

    try:
        user_data = signin_data.to_create()
    except ValidationError as e:
        raise ValueError(e.errors()[0]["msg"]) from e

    return create_db_user(db, user_data)
