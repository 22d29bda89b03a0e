"""Life-data models: the per-user profile that accumulates across sessions.

Every table is owned by a single user through `user_id`. Ownership is checked
by the route logic, not by the database.
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import declared_attr

from resume_builder.app.models import Base

log = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OwnedRecordMixin:
    """Columns shared by every life-data table.

    Attributes:
        id (int): Unique identifier for the record.
        user_id (str): The owning user. Rows are removed with the owning account.
        created_at (datetime): Creation timestamp, used for newest-first listing.

    """

    editable_fields: tuple[str, ...] = ()

    id = Column(Integer, primary_key=True, index=True)
    created_at = Column(DateTime, default=_utcnow, nullable=False)

    @declared_attr
    def user_id(cls):
        return Column(
            String(36),
            ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )

    def __init__(self, user_id: str, **fields: str | None):
        """Initialize an owned record.

        Args:
            user_id (str): The owning user.
            **fields: Values for the model's `editable_fields`. Unknown keys are ignored
                and missing or empty values are stored as None.

        Notes:
            1. Assign the owner.
            2. Copy every editable field, normalizing empty strings to None.
            3. This function does not perform disk, network, or database access.

        """
        self.user_id = user_id
        for name in self.editable_fields:
            setattr(self, name, fields.get(name) or None)


class TimestampedRecordMixin(OwnedRecordMixin):
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow, nullable=False)


class Experience(TimestampedRecordMixin, Base):
    """A work experience entry, entered directly or extracted from free text."""

    __tablename__ = "user_experiences"
    editable_fields = ("title", "company", "period", "description")

    title = Column(String, nullable=True)
    company = Column(String, nullable=True)
    period = Column(String, nullable=True)
    description = Column(Text, nullable=True)


class Education(TimestampedRecordMixin, Base):
    """A degree or course of study."""

    __tablename__ = "user_education"
    editable_fields = ("degree", "institution", "period", "description")

    degree = Column(String, nullable=True)
    institution = Column(String, nullable=True)
    period = Column(String, nullable=True)
    description = Column(Text, nullable=True)


class Certification(TimestampedRecordMixin, Base):
    """A professional certification."""

    __tablename__ = "user_certifications"
    editable_fields = ("name", "issuer", "date", "description")

    name = Column(String, nullable=True)
    issuer = Column(String, nullable=True)
    date = Column(String, nullable=True)
    description = Column(Text, nullable=True)


class Skill(OwnedRecordMixin, Base):
    """A single skill string; unique per user by a pre-insert check."""

    __tablename__ = "user_skills"
    editable_fields = ("skill",)

    skill = Column(String, nullable=False)


class Hobby(OwnedRecordMixin, Base):
    """A single hobby string; unique per user by a pre-insert check."""

    __tablename__ = "user_hobbies"
    editable_fields = ("hobby",)

    hobby = Column(String, nullable=False)
