import logging
from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

log = logging.getLogger(__name__)


class UserCreate(BaseModel):
    """User registration schema.

    This schema is used when a visitor signs up. The password is accepted in
    plain text only long enough to be hashed.

    Args:
        email (EmailStr): Unique email address, also used as the login name.
        password (str): Plain text password provided during registration.

    Attributes:
        email (EmailStr): Unique email address, also used as the login name.
        password (str): Plain text password provided during registration.

    Notes:
        1. The password is never returned in any response.
        2. Empty passwords are rejected by validation.

    """

    email: EmailStr
    password: str = Field(min_length=1)


class UserResponse(BaseModel):
    """User response schema without password.

    Attributes:
        id (str): UUID of the user, also the subject of issued tokens.
        email (str): The user's email address.
        is_active (bool): Whether the account may authenticate.
        created_at (datetime): When the account was created.

    Notes:
        1. The model uses ConfigDict(from_attributes=True) to support ORM attribute mapping.

    """

    id: str
    email: str
    is_active: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class Token(BaseModel):
    """Token response schema.

    Args:
        access_token (str): The JWT access token used as the bearer credential.
        token_type (str): The type of token, which is always "bearer".

    Attributes:
        access_token (str): The JWT access token used as the bearer credential.
        token_type (str): The type of token, which is always "bearer".

    """

    access_token: str
    token_type: str
