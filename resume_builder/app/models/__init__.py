import logging

from sqlalchemy.orm import declarative_base

log = logging.getLogger(__name__)

# Base model that other models will inherit from
Base = declarative_base()

# Import all models here to ensure they are registered with SQLAlchemy's metadata
from .anonymous_prompt import AnonymousPrompt  # noqa
from .life_data import (  # noqa
    Certification,
    Education,
    Experience,
    Hobby,
    Skill,
)
from .resume_model import Resume  # noqa
from .user import ANONYMOUS_USER_ID, User  # noqa
