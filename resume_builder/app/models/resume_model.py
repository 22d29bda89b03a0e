import logging
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship

from resume_builder.app.models import Base

log = logging.getLogger(__name__)


class Resume(Base):
    """A generated resume, stored as the JSON document returned by generation.

    Attributes:
        id (int): Unique identifier for the resume.
        user_id (str | None): Owner of the resume. Cleared on soft delete and
            reassigned to the anonymous sentinel when the owner deletes their account.
        prompt (str | None): The free-text description the resume was generated from.
        resume (dict): The structured resume document.
        is_public (bool): Whether the resume can be read through its public share link.
        created_at (datetime): Timestamp when the resume was created.
        updated_at (datetime): Timestamp when the resume was last updated.

    """

    __tablename__ = "resumes"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        String(36),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    prompt = Column(Text, nullable=True)
    resume = Column(JSONB().with_variant(JSON, "sqlite"), nullable=False)
    is_public = Column(Boolean, default=False, nullable=False)
    created_at = Column(
        DateTime,
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at = Column(
        DateTime,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    user = relationship("User", back_populates="resumes")

    def __init__(
        self,
        user_id: str | None,
        resume: dict[str, Any],
        prompt: str | None = None,
        is_public: bool = False,
    ):
        """Initialize a Resume instance.

        Args:
            user_id (str | None): Owner of the resume.
            resume (dict[str, Any]): The structured resume document.
            prompt (str | None): The text the resume was generated from.
            is_public (bool): Initial visibility of the resume.

        Notes:
            1. Assigns the arguments to the instance attributes.
            2. This constructor does not perform validation.
            3. This function does not perform disk, network, or database access.

        """
        _msg = f"Initializing Resume for user_id: {user_id}"
        log.debug(_msg)

        self.user_id = user_id
        self.resume = resume
        self.prompt = prompt
        self.is_public = is_public
