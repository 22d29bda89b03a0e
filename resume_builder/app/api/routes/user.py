import logging
from datetime import datetime, timezone
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from resume_builder.app.api.routes.route_logic import user_crud
from resume_builder.app.api.routes.route_logic.store_errors import store_errors_as_500
from resume_builder.app.core.auth import get_current_user
from resume_builder.app.core.config import Settings, get_settings
from resume_builder.app.core.security import authenticate_user, create_access_token
from resume_builder.app.database.database import get_db
from resume_builder.app.models.user import User
from resume_builder.app.schemas.user import Token, UserCreate, UserResponse

log = logging.getLogger(__name__)

router = APIRouter(tags=["users"])


@router.post("/api/users/register")
def register_user(
    user: UserCreate,
    db: Annotated[Session, Depends(get_db)],
) -> UserResponse:
    """Register a new user with the provided credentials.

    Args:
        user (UserCreate): Email and password for the new account.
        db (Session): Database session dependency.

    Returns:
        UserResponse: The created user's data, excluding the password.

    Raises:
        HTTPException: 400 if the email is already registered.

    Notes:
        1. Check whether the email is already registered.
        2. Create the user with a hashed password.
        3. Database access: Performs read and write operations on the users table.

    """
    _msg = f"Starting register_user for email: {user.email}"
    log.debug(_msg)

    if user_crud.get_user_by_email(db, user.email):
        _msg = f"Email {user.email} already registered"
        log.debug(_msg)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered",
        )

    with store_errors_as_500(db, "Failed to create user"):
        db_user = user_crud.create_user(db, email=user.email, password=user.password)
    return db_user


@router.post("/api/users/login")
def login_for_access_token(
    form_data: Annotated[OAuth2PasswordRequestForm, Depends()],
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> Token:
    """Authenticate with email and password and issue a bearer token.

    Args:
        form_data (OAuth2PasswordRequestForm): The login form; `username` carries the email.
        db (Session): Database session dependency.
        settings (Settings): Settings holding the token signing parameters.

    Returns:
        Token: The JWT access token, whose subject is the user id.

    Raises:
        HTTPException: 401 if the credentials are wrong or the account is inactive.

    Notes:
        1. Authenticate the user.
        2. Record the login time.
        3. Create a token signed with the configured key.
        4. Database access: Performs read and write operations on the users table.

    """
    user = authenticate_user(db, form_data.username, form_data.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user.last_login_at = datetime.now(timezone.utc)
    db.commit()

    access_token = create_access_token(data={"sub": user.id}, settings=settings)
    return Token(access_token=access_token, token_type="bearer")


@router.post("/api/delete-account")
def delete_account(
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> dict:
    """Delete the current user's account while preserving their resumes.

    Args:
        db (Session): Database session dependency.
        current_user (User): The authenticated user.
        settings (Settings): Provides the email of the anonymous sentinel account.

    Returns:
        dict: `{"success": True, "message": ...}`.

    Raises:
        HTTPException: 500 "Failed to migrate resumes" if the resumes could not be
            reassigned to the anonymous sentinel.

    Notes:
        1. Reassign every resume to the anonymous sentinel.
        2. Delete the account; its life data goes with it.
        3. Report success even if only the first step completed.

    """
    _msg = f"Deleting account {current_user.id}"
    log.info(_msg)
    user_crud.delete_account(db, current_user, settings.anonymous_user_email)
    return {
        "success": True,
        "message": "Account deleted successfully. Resumes have been anonymized.",
    }
