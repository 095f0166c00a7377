from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from personal_manager.config import DEFAULT_CURRENCY
from personal_manager.db.core import UserPreferenceDB, utc_now
from personal_manager.logging_config import get_logger
from personal_manager.models.preference import PreferenceResponse, PreferenceUpdate

logger = get_logger(__name__)


def read_db_preferences(db: Session, user_id: str) -> PreferenceResponse:
    """Stored preferences, or the defaults when the user has never saved any"""

    db_pref = db.get(UserPreferenceDB, user_id)
    if db_pref is None:
        return PreferenceResponse(display_currency=DEFAULT_CURRENCY, updated_at=None)
    return PreferenceResponse.model_validate(db_pref)


def upsert_db_preferences(db: Session, user_id: str, updates: PreferenceUpdate) -> PreferenceResponse:
    db_pref = db.get(UserPreferenceDB, user_id)
    if db_pref is None:
        db_pref = UserPreferenceDB(user_id=user_id, display_currency=DEFAULT_CURRENCY)
        db.add(db_pref)

    # display_currency is required, so an explicit null leaves it alone
    for field, value in updates.changes().items():
        if value is not None:
            setattr(db_pref, field, value)
    db_pref.updated_at = utc_now()

    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Failed to save preferences for user {user_id}")
        raise
    db.refresh(db_pref)

    logger.info(f"Preferences saved for user {user_id}")
    return PreferenceResponse.model_validate(db_pref)
