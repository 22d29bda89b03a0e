import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from resume_builder.app.api.dependencies import get_llm_config
from resume_builder.app.api.routes.route_logic.experience_extraction import (
    extract_and_store_experiences,
)
from resume_builder.app.api.routes.route_logic.life_data_crud import (
    create_record,
    delete_owned_record,
    list_records,
    update_owned_record,
)
from resume_builder.app.api.routes.route_logic.store_errors import store_errors_as_500
from resume_builder.app.api.routes.route_models import (
    ExperienceCreateRequest,
    ExperienceFields,
    ExperienceResponse,
)
from resume_builder.app.core.auth import get_current_user
from resume_builder.app.database.database import get_db
from resume_builder.app.llm.models import LLMConfig
from resume_builder.app.models.life_data import Experience
from resume_builder.app.models.user import User

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/experiences", tags=["experiences"])

LABEL = "Experience"


@router.get("")
def list_experiences(
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> dict[str, list[ExperienceResponse]]:
    """List the current user's experiences, newest first."""
    with store_errors_as_500(db, "Failed to fetch experiences"):
        records = list_records(db, Experience, current_user.id)
    return {"experiences": [ExperienceResponse.model_validate(r) for r in records]}


@router.post("")
async def create_experiences(
    request: ExperienceCreateRequest,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
    llm_config: Annotated[LLMConfig, Depends(get_llm_config)],
) -> dict:
    """Add experiences from free text or from a single structured entry.

    Args:
        request (ExperienceCreateRequest): Either `text` to extract from, or an `experience`.
        db (Session): The database session.
        current_user (User): The authenticated user.
        llm_config (LLMConfig): Configuration for the generative-AI endpoint.

    Returns:
        dict: `{"experiences": [...]}` when extraction found entries, otherwise
            `{"experience": {...}}` for a directly entered experience.

    Raises:
        HTTPException: 400 if neither input produced anything to store, 500 if the
            store write fails.

    Notes:
        1. If `text` is given, extract experiences with the model and bulk-insert them.
        2. If extraction found nothing and `experience` is given, insert it directly.
        3. Otherwise reject the request.

    Network access:
        - One request to the LLM endpoint when `text` is given.

    """
    if request.text:
        with store_errors_as_500(db, "Failed to save experiences"):
            inserted = await extract_and_store_experiences(
                db,
                request.text,
                current_user.id,
                llm_config,
            )
        if inserted:
            return {"experiences": [ExperienceResponse.model_validate(r) for r in inserted]}

    if request.experience is not None:
        with store_errors_as_500(db, "Failed to save experience"):
            record = create_record(
                db,
                Experience,
                current_user.id,
                request.experience.model_dump(),
            )
        return {"experience": ExperienceResponse.model_validate(record)}

    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail="Either 'text' or 'experience' must be provided",
    )


@router.put("/{experience_id}")
def update_experience(
    experience_id: int,
    request: ExperienceFields,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> dict[str, ExperienceResponse]:
    """Replace an experience owned by the current user; 404 if it is not theirs."""
    with store_errors_as_500(db, "Failed to update experience"):
        record = update_owned_record(
            db,
            Experience,
            experience_id,
            current_user.id,
            request.model_dump(),
            LABEL,
        )
    return {"experience": ExperienceResponse.model_validate(record)}


@router.delete("/{experience_id}")
def delete_experience(
    experience_id: int,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> dict[str, bool]:
    """Delete an experience owned by the current user; 404 if it is not theirs."""
    with store_errors_as_500(db, "Failed to delete experience"):
        delete_owned_record(db, Experience, experience_id, current_user.id, LABEL)
    return {"success": True}
