"""Administrative operations of the auth provider.

These run with full database access and bypass per-row ownership checks. They
back registration, account deletion and the management CLI.
"""

import logging
import secrets

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from resume_builder.app.core.security import get_password_hash
from resume_builder.app.models.resume_model import Resume
from resume_builder.app.models.user import ANONYMOUS_USER_ID, User

log = logging.getLogger(__name__)


def get_user_by_email(db: Session, email: str) -> User | None:
    """Retrieve a user by email address, or None."""
    return db.query(User).filter(User.email == email).first()


def get_user_by_id(db: Session, user_id: str) -> User | None:
    """Retrieve a user by id, or None."""
    return db.query(User).filter(User.id == user_id).first()


def list_users(db: Session) -> list[User]:
    """Return every account, including the anonymous sentinel."""
    return db.query(User).order_by(User.created_at.asc()).all()


def create_user(
    db: Session,
    email: str,
    password: str,
    is_active: bool = True,
    user_id: str | None = None,
) -> User:
    """Create an account with a bcrypt-hashed password.

    Args:
        db (Session): The database session.
        email (str): Unique email address.
        password (str): Plain text password; only its hash is stored.
        is_active (bool): Whether the account may authenticate.
        user_id (str | None): Explicit id, used for the anonymous sentinel.

    Returns:
        User: The persisted user.

    Notes:
        1. Hash the password.
        2. Add, commit and refresh the user.
        3. Database access: Performs a write operation on the users table.

    """
    _msg = f"Creating user {email}"
    log.debug(_msg)
    user = User(
        email=email,
        hashed_password=get_password_hash(password),
        is_active=is_active,
        id=user_id,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def delete_user(db: Session, user_id: str) -> None:
    """Delete an account by id. Life-data rows are removed by the database cascade."""
    db.query(User).filter(User.id == user_id).delete(synchronize_session=False)
    db.commit()


def get_or_create_anonymous_user(db: Session, email: str) -> User:
    """Return the sentinel account that owns anonymized resumes, creating it on first use.

    Args:
        db (Session): The database session.
        email (str): Email to give the sentinel if it has to be created.

    Returns:
        User: The sentinel account. It is inactive and has a random, discarded
            password, so it can never log in.

    """
    user = get_user_by_id(db, ANONYMOUS_USER_ID)
    if user is not None:
        return user

    _msg = "Creating anonymous sentinel user"
    log.info(_msg)
    return create_user(
        db,
        email=email,
        password=secrets.token_urlsafe(32),
        is_active=False,
        user_id=ANONYMOUS_USER_ID,
    )


def delete_account(db: Session, user: User, anonymous_email: str) -> None:
    """Delete an account while keeping its resumes as anonymous records.

    Args:
        db (Session): The database session.
        user (User): The account being deleted.
        anonymous_email (str): Email for the sentinel account if it must be created.

    Raises:
        HTTPException: 500 "Failed to migrate resumes" if the resumes could not be
            reassigned. The account is left untouched in that case.

    Notes:
        1. Ensure the anonymous sentinel exists.
        2. Reassign every resume owned by `user` to the sentinel.
        3. Delete the account. A failure here is logged only, because the
           resumes are already preserved.
        4. Database access: Performs write operations on the resumes and users tables.

    """
    user_id = user.id
    try:
        anonymous = get_or_create_anonymous_user(db, anonymous_email)
        db.query(Resume).filter(Resume.user_id == user_id).update(
            {Resume.user_id: anonymous.id},
            synchronize_session=False,
        )
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        _msg = f"Error migrating resumes for user {user_id}"
        log.exception(_msg)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to migrate resumes",
        ) from e

    try:
        delete_user(db, user_id)
    except SQLAlchemyError:
        db.rollback()
        _msg = f"Error deleting user {user_id}; resumes were already anonymized"
        log.exception(_msg)
