from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session
from typing import Optional

from personal_manager.auth.security import AuthenticationError, verify_token
from personal_manager.config import settings
from personal_manager.db.core import UserDB, get_db
from personal_manager.logging_config import get_logger

logger = get_logger(__name__)

BEARER_FORMAT_MESSAGE = "Invalid Authorization header format. Expected: Bearer <token>"


def _unauthorized(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=message,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user_id(authorization: Optional[str] = Header(None)) -> str:
    """Resolve the authenticated user id from an ``Authorization: Bearer <token>`` header"""

    if authorization is None:
        raise _unauthorized("Missing Authorization header")

    scheme, _, token = authorization.strip().partition(" ")
    token = token.strip()
    if scheme != "Bearer" or not token:
        raise _unauthorized(BEARER_FORMAT_MESSAGE)

    try:
        return verify_token(token)
    except AuthenticationError as e:
        logger.info(f"Rejected bearer token: {e.__cause__ or e}")
        raise _unauthorized(str(e))


def get_admin_user_id(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> str:
    """Authenticated user whose email is listed in ADMIN_EMAILS"""

    db_user = db.get(UserDB, user_id)
    if db_user is None or db_user.email not in settings.admin_emails:
        logger.warning(f"Admin-only operation refused for user {user_id}")
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin privileges required")
    return user_id
