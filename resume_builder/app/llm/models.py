import logging
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

log = logging.getLogger(__name__)


class Language(str, Enum):
    """Output languages supported by resume generation."""

    ENGLISH = "en"
    FRENCH = "fr"


def normalize_language(lang: str | None) -> Language:
    """Map a requested language code to a supported language, defaulting to English."""
    if isinstance(lang, str) and lang.strip().lower() == Language.FRENCH.value:
        return Language.FRENCH
    return Language.ENGLISH


class FallbackReason(str, Enum):
    """Why a generation request was answered with canned content."""

    SUSPICIOUS_INPUT = "suspicious_input"
    REJECTED_RESPONSE = "rejected_response"
    PROVIDER_UNAVAILABLE = "provider_unavailable"
    UNPARSEABLE_RESPONSE = "unparseable_response"


class LLMConfig(BaseModel):
    """Configuration for LLM client initialization."""

    llm_endpoint: str | None = None
    api_key: str | None = None
    llm_model_name: str | None = None


class GenerationResult(BaseModel):
    """Outcome of a resume generation request.

    Attributes:
        resume (dict[str, Any]): The resume document returned to the caller. Every
            field is optional when it comes from the model.
        fallback (bool): True when `resume` is canned content rather than model output.
        reason (FallbackReason | None): Why the fallback was used; logged, never returned.

    """

    resume: dict[str, Any]
    fallback: bool
    reason: FallbackReason | None = None


class ExtractedExperience(BaseModel):
    """A work experience entry extracted from free text by the model."""

    title: str | None = Field(default=None)
    company: str | None = Field(default=None)
    period: str | None = Field(default=None)
    description: str | None = Field(default=None)
