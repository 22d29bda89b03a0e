import logging
import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, String
from sqlalchemy.orm import relationship

from resume_builder.app.models import Base

log = logging.getLogger(__name__)

ANONYMOUS_USER_ID = "00000000-0000-0000-0000-000000000000"


def _new_user_id() -> str:
    return str(uuid.uuid4())


class User(Base):
    """
    Account known to the auth provider.

    Attributes:
        id (str): UUID string identifying the user; used as the JWT subject.
        email (str): Unique email address, also the login name.
        hashed_password (str): bcrypt hash of the user's password.
        is_active (bool): Whether the account may authenticate. The anonymous
            sentinel account is always inactive.
        created_at (datetime): Timestamp when the account was created.
        last_login_at (datetime | None): Timestamp of the last successful login.
        resumes (list[Resume]): Resumes currently owned by the user.

    """

    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=_new_user_id)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(
        DateTime,
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    last_login_at = Column(DateTime, nullable=True)

    resumes = relationship("Resume", back_populates="user")

    def __init__(
        self,
        email: str,
        hashed_password: str,
        is_active: bool = True,
        id: str | None = None,
    ):
        """
        Initialize a User instance.

        Args:
            email (str): Unique email address for the user. Must be a non-empty string.
            hashed_password (str): Hashed password for the user. Must be a non-empty string.
            is_active (bool): Whether the user account is active.
            id (str | None): Explicit user id; a random UUID is generated when omitted.

        Raises:
            ValueError: If email or hashed_password is empty.

        Notes:
            1. Validate that email and hashed_password are non-empty strings.
            2. Assign all values to instance attributes, generating an id when none is given.
            3. This operation does not involve network, disk, or database access.

        """
        _msg = f"Initializing User with email: {email}"
        log.debug(_msg)

        if not isinstance(email, str) or not email.strip():
            raise ValueError("Email must be a non-empty string")
        if not isinstance(hashed_password, str) or not hashed_password:
            raise ValueError("Hashed password must be a non-empty string")

        self.id = id or _new_user_id()
        self.email = email.strip()
        self.hashed_password = hashed_password
        self.is_active = is_active
