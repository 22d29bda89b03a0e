import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from resume_builder.app.api.dependencies import get_resume_count_cache
from resume_builder.app.api.routes.route_logic.resume_crud import (
    count_resumes,
    create_resume,
    get_public_resume,
    get_user_resumes,
    set_resume_public,
    soft_delete_resume,
    update_resume_content,
)
from resume_builder.app.api.routes.route_logic.store_errors import store_errors_as_500
from resume_builder.app.api.routes.route_models import (
    DeleteResumeRequest,
    ResumeCountResponse,
    ResumeCreateRequest,
    ResumeResponse,
    ResumeUpdateRequest,
    ToggleResumePublicRequest,
)
from resume_builder.app.core.auth import get_current_user
from resume_builder.app.core.cache import ResumeCountCache
from resume_builder.app.database.database import get_db
from resume_builder.app.models.user import User

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["resumes"])


@router.post("/delete-resume")
def delete_resume(
    request: DeleteResumeRequest,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> dict[str, bool]:
    """Soft-delete a resume owned by the current user.

    Args:
        request (DeleteResumeRequest): Carries the `resumeId` to delete.
        db (Session): The database session.
        current_user (User): The authenticated user.

    Returns:
        dict[str, bool]: `{"success": True}`.

    Raises:
        HTTPException: 400 without a resume id, 404 if the resume does not exist,
            403 if it belongs to another user, 500 if the write fails.

    Notes:
        1. The row is kept with its owner cleared, so it still counts toward the
           public resume count.

    """
    if request.resume_id is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Resume ID is required",
        )
    with store_errors_as_500(db, "Failed to delete resume"):
        soft_delete_resume(db, request.resume_id, current_user.id)
    return {"success": True}


@router.post("/toggle-resume-public")
def toggle_resume_public(
    request: ToggleResumePublicRequest,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> dict[str, bool]:
    """Make a resume public or private.

    Raises:
        HTTPException: 400 if `resumeId` or a boolean `isPublic` is missing, 404 if
            the resume does not exist, 403 if it belongs to another user.

    """
    if request.resume_id is None or request.is_public is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Resume ID and public status are required",
        )
    with store_errors_as_500(db, "Failed to update resume"):
        set_resume_public(db, request.resume_id, current_user.id, request.is_public)
    return {"success": True, "is_public": request.is_public}


@router.get("/resume-count")
def resume_count(
    db: Annotated[Session, Depends(get_db)],
    cache: Annotated[ResumeCountCache, Depends(get_resume_count_cache)],
) -> ResumeCountResponse:
    """Return the number of resumes ever generated, for the landing page.

    Notes:
        1. Serve a fresh cached count without touching the database.
        2. Otherwise count every row, including soft-deleted and anonymized resumes,
           and cache the result.
        3. A database failure answers with the last cached count, or 0, and is never
           reported to the client.

    """
    cached = cache.get_fresh()
    if cached is not None:
        return ResumeCountResponse(count=cached)

    try:
        count = count_resumes(db)
    except SQLAlchemyError:
        _msg = "Error counting resumes; serving last known count"
        log.exception(_msg)
        return ResumeCountResponse(count=cache.last_known())

    cache.store(count)
    return ResumeCountResponse(count=count)


@router.get("/resumes")
def list_resumes(
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> dict[str, list[ResumeResponse]]:
    with store_errors_as_500(db, "Failed to fetch resumes"):
        resumes = get_user_resumes(db, current_user.id)
    return {"resumes": [ResumeResponse.model_validate(r) for r in resumes]}


@router.post("/resumes")
def save_resume(
    request: ResumeCreateRequest,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> dict[str, ResumeResponse]:
    """Save a generated resume for the current user."""
    with store_errors_as_500(db, "Failed to save resume"):
        resume = create_resume(
            db,
            current_user.id,
            request.resume,
            prompt=request.prompt,
        )
    return {"resume": ResumeResponse.model_validate(resume)}


@router.put("/resumes/{resume_id}")
def update_resume(
    resume_id: int,
    request: ResumeUpdateRequest,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> dict[str, ResumeResponse]:
    """Replace the document of a resume after the user edited it; 404/403 like delete."""
    with store_errors_as_500(db, "Failed to update resume"):
        resume = update_resume_content(db, resume_id, current_user.id, request.resume)
    return {"resume": ResumeResponse.model_validate(resume)}


@router.get("/resumes/{resume_id}/public")
def read_public_resume(
    resume_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> dict[str, ResumeResponse]:
    """Return a shared resume without authentication; private resumes are 404."""
    resume = get_public_resume(db, resume_id)
    return {"resume": ResumeResponse.model_validate(resume)}
