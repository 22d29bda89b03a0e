import logging
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool

log = logging.getLogger(__name__)


# Request/Response models
class GenerateResumeRequest(BaseModel):
    """Request model for resume generation.

    Attributes:
        experience (str | None): Free text describing the visitor's background.
        lang (str | None): Requested output language; anything other than "fr" means English.
        user_id (str | None): Client-supplied user id. Only honored when it matches
            the authenticated bearer token.

    """

    model_config = ConfigDict(populate_by_name=True)

    experience: str | None = None
    lang: str | None = None
    user_id: str | None = Field(default=None, alias="userId")


class GenerateResumeResponse(BaseModel):
    """Response model for resume generation.

    Attributes:
        resume (dict[str, Any]): The generated resume, or canned content.
        fallback (bool): True when `resume` is canned content.

    """

    resume: dict[str, Any]
    fallback: bool


class ExperienceFields(BaseModel):
    title: str | None = None
    company: str | None = None
    period: str | None = None
    description: str | None = None


class ExperienceCreateRequest(BaseModel):
    """Request model for adding experiences.

    Attributes:
        text (str | None): Free text to extract experiences from with the model.
        experience (ExperienceFields | None): A single experience entered directly.
            Used when `text` is absent or yields nothing.

    """

    text: str | None = None
    experience: ExperienceFields | None = None


class ExperienceResponse(ExperienceFields):
    id: int
    user_id: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class EducationFields(BaseModel):
    degree: str | None = None
    institution: str | None = None
    period: str | None = None
    description: str | None = None


class EducationCreateRequest(BaseModel):
    education: EducationFields | None = None


class EducationResponse(EducationFields):
    id: int
    user_id: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CertificationFields(BaseModel):
    name: str | None = None
    issuer: str | None = None
    date: str | None = None
    description: str | None = None


class CertificationCreateRequest(BaseModel):
    certification: CertificationFields | None = None


class CertificationResponse(CertificationFields):
    id: int
    user_id: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class SkillRequest(BaseModel):
    skill: str | None = None


class SkillResponse(BaseModel):
    id: int
    user_id: str
    skill: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class HobbyRequest(BaseModel):
    hobby: str | None = None


class HobbyResponse(BaseModel):
    id: int
    user_id: str
    hobby: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class DeleteResumeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    resume_id: int | None = Field(default=None, alias="resumeId")


class ToggleResumePublicRequest(BaseModel):
    """Request model for changing a resume's visibility.

    Attributes:
        resume_id (int | None): The resume to change.
        is_public (bool | None): The new visibility. Must be a JSON boolean.

    """

    model_config = ConfigDict(populate_by_name=True)

    resume_id: int | None = Field(default=None, alias="resumeId")
    is_public: StrictBool | None = Field(default=None, alias="isPublic")


class ResumeCountResponse(BaseModel):
    count: int


class ResumeCreateRequest(BaseModel):
    """Request model for saving a generated resume.

    Attributes:
        prompt (str | None): The prompt the resume was generated from.
        resume (dict[str, Any]): The resume document.

    """

    prompt: str | None = None
    resume: dict[str, Any]


class ResumeUpdateRequest(BaseModel):
    resume: dict[str, Any]


class ResumeResponse(BaseModel):
    """Response model for a saved resume.

    Attributes:
        id (int): The unique identifier for the resume.
        prompt (str | None): The prompt the resume was generated from.
        resume (dict[str, Any]): The resume document.
        is_public (bool): Whether the resume can be read without authentication.
        created_at (datetime): Creation timestamp.
        updated_at (datetime): Last modification timestamp.

    """

    id: int
    prompt: str | None = None
    resume: dict[str, Any]
    is_public: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
