import logging
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Optional

import bcrypt
from fastapi.security import OAuth2PasswordBearer
from jose import jwt
from sqlalchemy.orm import Session

from resume_builder.app.core.config import Settings

if TYPE_CHECKING:
    from resume_builder.app.models.user import User

log = logging.getLogger(__name__)

# Missing tokens are handled by get_current_user and get_optional_current_user.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/users/login", auto_error=False)


def create_access_token(
    data: dict,
    settings: Settings,
    expires_delta: timedelta | None = None,
) -> str:
    """Sign a bearer token for the API.

    Args:
        data (dict): Claims to sign. Login puts the user id in `sub`.
        settings (Settings): Supplies the signing key, algorithm and default lifetime.
        expires_delta (timedelta | None): Lifetime of the token. Defaults to
            `access_token_expire_minutes`.

    Returns:
        str: The signed JWT.

    Notes:
        1. The caller's dict is not modified; `exp` is added to a copy.
        2. No database or network access in this function.

    """
    lifetime = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    claims = {**data, "exp": datetime.now(UTC) + lifetime}
    _msg = f"Signing access token for subject {claims.get('sub')}"
    log.debug(_msg)
    return jwt.encode(claims, settings.secret_key, algorithm=settings.algorithm)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a login password against the stored bcrypt hash.

    A stored value that is not a bcrypt hash never matches.
    """
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        _msg = "Stored password hash is not a valid bcrypt hash"
        log.warning(_msg)
        return False


def get_password_hash(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def authenticate_user(db: Session, email: str, password: str) -> Optional["User"]:
    """Look up an account by email and check its password.

    Args:
        db (Session): Database session.
        email (str): The login name.
        password (str): The submitted password.

    Returns:
        Optional[User]: The user when the account exists, is active and the
            password matches; otherwise None. The three failures are not
            distinguished.

    Notes:
        1. Database access: Performs a read operation on the users table.

    """
    from resume_builder.app.models.user import User

    user = db.query(User).filter(User.email == email).first()
    if user is None or not user.is_active:
        _msg = f"Login rejected for {email}: unknown or inactive account"
        log.debug(_msg)
        return None
    if not verify_password(password, user.hashed_password):
        _msg = f"Login rejected for {email}: wrong password"
        log.debug(_msg)
        return None
    return user
