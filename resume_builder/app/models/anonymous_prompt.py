import logging
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, Text

from resume_builder.app.models import Base

log = logging.getLogger(__name__)


class AnonymousPrompt(Base):
    """Raw generation prompt submitted by an unauthenticated visitor.

    The table is a capped log; see `route_logic.anonymous_prompts` for eviction.

    Attributes:
        id (int): Unique identifier, also the tiebreaker for eviction order.
        prompt (str): The trimmed prompt text.
        created_at (datetime): Insertion time, the primary eviction order.

    """

    __tablename__ = "anonymous_prompts"

    id = Column(Integer, primary_key=True, index=True)
    prompt = Column(Text, nullable=False)
    created_at = Column(
        DateTime,
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
        index=True,
    )

    def __init__(self, prompt: str):
        self.prompt = prompt
