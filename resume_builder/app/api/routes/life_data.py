"""Life-data endpoints: education, certifications, skills and hobbies.

Every endpoint requires a bearer token and only ever touches the caller's rows.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from resume_builder.app.api.routes.route_logic.life_data_crud import (
    add_unique_value,
    create_record,
    delete_owned_record,
    delete_value,
    list_records,
    list_values,
    update_owned_record,
)
from resume_builder.app.api.routes.route_logic.store_errors import store_errors_as_500
from resume_builder.app.api.routes.route_models import (
    CertificationCreateRequest,
    CertificationFields,
    CertificationResponse,
    EducationCreateRequest,
    EducationFields,
    EducationResponse,
    HobbyRequest,
    HobbyResponse,
    SkillRequest,
    SkillResponse,
)
from resume_builder.app.core.auth import get_current_user
from resume_builder.app.database.database import get_db
from resume_builder.app.models.life_data import Certification, Education, Hobby, Skill
from resume_builder.app.models.user import User

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/life-data", tags=["life-data"])


def _required_value(value: str | None, label: str) -> str:
    if not value or not value.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{label} is required",
        )
    return value.strip()


# Education
@router.get("/education")
def list_education(
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> dict[str, list[EducationResponse]]:
    with store_errors_as_500(db, "Failed to fetch education"):
        records = list_records(db, Education, current_user.id)
    return {"education": [EducationResponse.model_validate(r) for r in records]}


@router.post("/education")
def create_education(
    request: EducationCreateRequest,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> dict[str, EducationResponse]:
    """Add an education entry for the current user.

    Raises:
        HTTPException: 400 if the `education` object is missing, 500 if the write fails.

    """
    if request.education is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Education is required",
        )
    with store_errors_as_500(db, "Failed to save education"):
        record = create_record(db, Education, current_user.id, request.education.model_dump())
    return {"education": EducationResponse.model_validate(record)}


@router.put("/education/{education_id}")
def update_education(
    education_id: int,
    request: EducationFields,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> dict[str, EducationResponse]:
    with store_errors_as_500(db, "Failed to update education"):
        record = update_owned_record(
            db,
            Education,
            education_id,
            current_user.id,
            request.model_dump(),
            "Education",
        )
    return {"education": EducationResponse.model_validate(record)}


@router.delete("/education/{education_id}")
def delete_education(
    education_id: int,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> dict[str, bool]:
    with store_errors_as_500(db, "Failed to delete education"):
        delete_owned_record(db, Education, education_id, current_user.id, "Education")
    return {"success": True}


# Certifications
@router.get("/certifications")
def list_certifications(
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> dict[str, list[CertificationResponse]]:
    with store_errors_as_500(db, "Failed to fetch certifications"):
        records = list_records(db, Certification, current_user.id)
    return {"certifications": [CertificationResponse.model_validate(r) for r in records]}


@router.post("/certifications")
def create_certification(
    request: CertificationCreateRequest,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> dict[str, CertificationResponse]:
    if request.certification is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Certification is required",
        )
    with store_errors_as_500(db, "Failed to save certification"):
        record = create_record(
            db,
            Certification,
            current_user.id,
            request.certification.model_dump(),
        )
    return {"certification": CertificationResponse.model_validate(record)}


@router.put("/certifications/{certification_id}")
def update_certification(
    certification_id: int,
    request: CertificationFields,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> dict[str, CertificationResponse]:
    with store_errors_as_500(db, "Failed to update certification"):
        record = update_owned_record(
            db,
            Certification,
            certification_id,
            current_user.id,
            request.model_dump(),
            "Certification",
        )
    return {"certification": CertificationResponse.model_validate(record)}


@router.delete("/certifications/{certification_id}")
def delete_certification(
    certification_id: int,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> dict[str, bool]:
    with store_errors_as_500(db, "Failed to delete certification"):
        delete_owned_record(
            db,
            Certification,
            certification_id,
            current_user.id,
            "Certification",
        )
    return {"success": True}


# Skills
@router.get("/skills")
def list_skills(
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> dict[str, list[str]]:
    with store_errors_as_500(db, "Failed to fetch skills"):
        skills = list_values(db, Skill, "skill", current_user.id)
    return {"skills": skills}


@router.post("/skills")
def add_skill(
    request: SkillRequest,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> dict[str, SkillResponse]:
    """Add a skill unless the current user already has it.

    Raises:
        HTTPException: 400 "Skill is required" or "Skill already exists", 500 if
            the write fails.

    """
    skill = _required_value(request.skill, "Skill")
    with store_errors_as_500(db, "Failed to save skill"):
        record = add_unique_value(db, Skill, "skill", current_user.id, skill, "Skill")
    return {"skill": SkillResponse.model_validate(record)}


@router.delete("/skills")
def remove_skill(
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
    skill: Annotated[str | None, Query()] = None,
) -> dict[str, bool]:
    skill = _required_value(skill, "Skill")
    with store_errors_as_500(db, "Failed to delete skill"):
        delete_value(db, Skill, "skill", current_user.id, skill)
    return {"success": True}


# Hobbies
@router.get("/hobbies")
def list_hobbies(
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> dict[str, list[str]]:
    with store_errors_as_500(db, "Failed to fetch hobbies"):
        hobbies = list_values(db, Hobby, "hobby", current_user.id)
    return {"hobbies": hobbies}


@router.post("/hobbies")
def add_hobby(
    request: HobbyRequest,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> dict[str, HobbyResponse]:
    hobby = _required_value(request.hobby, "Hobby")
    with store_errors_as_500(db, "Failed to save hobby"):
        record = add_unique_value(db, Hobby, "hobby", current_user.id, hobby, "Hobby")
    return {"hobby": HobbyResponse.model_validate(record)}


@router.delete("/hobbies")
def remove_hobby(
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
    hobby: Annotated[str | None, Query()] = None,
) -> dict[str, bool]:
    hobby = _required_value(hobby, "Hobby")
    with store_errors_as_500(db, "Failed to delete hobby"):
        delete_value(db, Hobby, "hobby", current_user.id, hobby)
    return {"success": True}
