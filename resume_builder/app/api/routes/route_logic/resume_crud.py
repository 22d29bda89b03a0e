import logging
from typing import Any

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from resume_builder.app.models.resume_model import Resume

log = logging.getLogger(__name__)


def get_owned_resume(db: Session, resume_id: int, user_id: str) -> Resume:
    """Retrieve a resume and verify it belongs to the specified user.

    Args:
        db (Session): The database session.
        resume_id (int): The resume to fetch.
        user_id (str): The authenticated caller.

    Returns:
        Resume: The resume, owned by `user_id`.

    Raises:
        HTTPException: 404 "Resume not found" when the row does not exist, 403 when
            it exists but belongs to someone else.

    Notes:
        1. Fetch the resume by id only, so ownership can be reported separately.
        2. Compare the owner with the caller.
        3. This function performs a single database read.

    """
    resume = db.query(Resume).filter(Resume.id == resume_id).first()
    if resume is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Resume not found",
        )
    if resume.user_id != user_id:
        _msg = f"User {user_id} attempted to modify resume {resume_id} they do not own"
        log.warning(_msg)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Unauthorized - resume does not belong to user",
        )
    return resume


def _update_owned_resume(
    db: Session,
    resume_id: int,
    user_id: str,
    values: dict[str, Any],
) -> int:
    updated = (
        db.query(Resume)
        .filter(Resume.id == resume_id, Resume.user_id == user_id)
        .update(values, synchronize_session=False)
    )
    db.commit()
    return updated


def soft_delete_resume(db: Session, resume_id: int, user_id: str) -> None:
    """Detach a resume from its owner instead of deleting the row.

    Args:
        db (Session): The database session.
        resume_id (int): The resume to delete.
        user_id (str): The authenticated caller.

    Raises:
        HTTPException: 404 or 403 from `get_owned_resume`.

    Notes:
        1. Verify ownership.
        2. Clear `user_id` with a write filtered by id and owner.
        3. The row stays in the table and still counts toward the public resume count.

    """
    get_owned_resume(db, resume_id, user_id)
    _update_owned_resume(db, resume_id, user_id, {Resume.user_id: None})


def set_resume_public(db: Session, resume_id: int, user_id: str, is_public: bool) -> None:
    """Set the visibility of a resume after verifying ownership."""
    get_owned_resume(db, resume_id, user_id)
    _update_owned_resume(db, resume_id, user_id, {Resume.is_public: is_public})


def update_resume_content(
    db: Session,
    resume_id: int,
    user_id: str,
    content: dict[str, Any],
) -> Resume:
    """Replace the resume document after the user edited it."""
    resume = get_owned_resume(db, resume_id, user_id)
    _update_owned_resume(db, resume_id, user_id, {Resume.resume: content})
    db.refresh(resume)
    return resume


def create_resume(
    db: Session,
    user_id: str,
    content: dict[str, Any],
    prompt: str | None = None,
) -> Resume:
    """Save a generated resume for `user_id` and return the persisted row."""
    resume = Resume(user_id=user_id, resume=content, prompt=prompt)
    db.add(resume)
    db.commit()
    db.refresh(resume)
    return resume


def get_user_resumes(db: Session, user_id: str) -> list[Resume]:
    """Return the resumes owned by `user_id`, newest first."""
    return (
        db.query(Resume)
        .filter(Resume.user_id == user_id)
        .order_by(Resume.created_at.desc(), Resume.id.desc())
        .all()
    )


def get_public_resume(db: Session, resume_id: int) -> Resume:
    """Return a resume that has been shared publicly.

    Raises:
        HTTPException: 404 when the resume does not exist or is private; the two
            cases are not distinguished.

    """
    resume = (
        db.query(Resume)
        .filter(Resume.id == resume_id, Resume.is_public.is_(True))
        .first()
    )
    if resume is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Resume not found",
        )
    return resume


def count_resumes(db: Session) -> int:
    """Count every resume ever saved, including soft-deleted and anonymized ones."""
    return db.query(Resume).count()
