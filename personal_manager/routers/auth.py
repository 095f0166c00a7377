from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from personal_manager.auth.dependencies import get_current_user_id
from personal_manager.auth.security import AuthenticationError, issue_token
from personal_manager.crud import crud_user
from personal_manager.db.core import get_db, NotFoundError, ConflictError
from personal_manager.models import user as user_models

router = APIRouter(
    prefix="/auth",
    tags=["auth"],
)


def _auth_response(db_user) -> user_models.AuthResponse:
    return user_models.AuthResponse(
        token=issue_token(db_user.id),
        user=user_models.UserResponse.model_validate(db_user),
    )


@router.post("/signup", response_model=user_models.AuthResponse)
def signup(user: user_models.UserCreate, db: Session = Depends(get_db)):
    """
    Register a new user and return a session token.
    """
    try:
        db_user = crud_user.create_db_user(db=db, user_data=user)
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return _auth_response(db_user)


@router.post("/login", response_model=user_models.AuthResponse)
def login(user_login: user_models.UserLogin, db: Session = Depends(get_db)):
    """
    Authenticate with email and password.
    """
    try:
        db_user = crud_user.authenticate_user(db, user_login.email, user_login.password)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )
    return _auth_response(db_user)


@router.post("/signin", response_model=user_models.AuthResponse)
def signin(user_signin: user_models.UserSignin, db: Session = Depends(get_db)):
    """
    Log in when the email is already registered, otherwise create the account.
    """
    try:
        db_user = crud_user.signin_user(db, user_signin)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return _auth_response(db_user)


@router.get("/me", response_model=user_models.UserResponse)
def read_current_user(db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    try:
        return crud_user.read_db_user(db, user_id)
    except NotFoundError as e:
        # Token outlived its user
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
