import logging
from typing import Annotated

from fastapi import Depends, HTTPException, status
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from resume_builder.app.core.config import Settings, get_settings
from resume_builder.app.core.security import oauth2_scheme
from resume_builder.app.database.database import get_db
from resume_builder.app.models.user import User

log = logging.getLogger(__name__)


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized",
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_user_from_token(token: str, db: Session, settings: Settings) -> User | None:
    """Resolve a bearer token to an active user.

    Args:
        token (str): The raw JWT taken from the `Authorization` header.
        db (Session): Database session used to load the user.
        settings (Settings): Settings holding the signing key and algorithm.

    Returns:
        User | None: The active user named by the token subject, or None when the
            token is malformed, expired, has no subject, or names an unknown or
            inactive account.

    Notes:
        1. Decode the JWT with the configured key and algorithm.
        2. Read the `sub` claim as the user id.
        3. Load the user and reject inactive accounts.
        4. Database access: Performs a read operation on the users table.

    """
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError:
        _msg = "Rejected bearer token that failed to decode"
        log.debug(_msg)
        return None

    user_id = payload.get("sub")
    if not user_id:
        return None

    user = db.query(User).filter(User.id == user_id).first()
    if user is None or not user.is_active:
        return None
    return user


def get_current_user(
    token: Annotated[str | None, Depends(oauth2_scheme)],
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> User:
    """Retrieve the authenticated user from the bearer token.

    Args:
        token (str | None): Bearer token extracted from the `Authorization` header.
        db (Session): Database session dependency.
        settings (Settings): Settings dependency.

    Returns:
        User: The authenticated user.

    Raises:
        HTTPException: 401 "Unauthorized" when the header is missing or the token
            does not resolve to an active user.

    """
    if not token:
        raise _unauthorized()

    user = get_user_from_token(token=token, db=db, settings=settings)
    if user is None:
        raise _unauthorized()
    return user


def get_optional_current_user(
    token: Annotated[str | None, Depends(oauth2_scheme)],
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> User | None:
    """Retrieve the user behind an optional bearer token.

    Used by endpoints that serve anonymous visitors too. An absent or invalid
    token makes the request anonymous instead of failing it.

    Args:
        token (str | None): Bearer token extracted from the `Authorization` header.
        db (Session): Database session dependency.
        settings (Settings): Settings dependency.

    Returns:
        User | None: The authenticated user, or None for anonymous requests.

    """
    if not token:
        return None
    return get_user_from_token(token=token, db=db, settings=settings)
