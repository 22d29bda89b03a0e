import logging

from sqlalchemy.orm import Session

from resume_builder.app.api.routes.route_logic.life_data_crud import create_records
from resume_builder.app.database.database import get_session_local
from resume_builder.app.llm.models import LLMConfig
from resume_builder.app.llm.orchestration import extract_experiences
from resume_builder.app.models.life_data import Experience

log = logging.getLogger(__name__)


async def extract_and_store_experiences(
    db: Session,
    text: str,
    user_id: str,
    llm_config: LLMConfig,
) -> list[Experience]:
    """Extract experiences from free text and save them for `user_id`.

    Args:
        db (Session): The database session.
        text (str): Free text describing the user's work history.
        user_id (str): The owner of the new records.
        llm_config (LLMConfig): Endpoint, API key and model name.

    Returns:
        list[Experience]: The inserted records; empty when nothing was extracted.

    Network access:
        - One request to the LLM endpoint unless the input is blocked or no key is set.

    """
    extracted = await extract_experiences(text, llm_config)
    if not extracted:
        return []

    return create_records(
        db,
        Experience,
        user_id,
        [entry.model_dump() for entry in extracted],
    )


async def store_extracted_experiences(text: str, user_id: str, llm_config: LLMConfig) -> None:
    """Background task: grow the user's experience profile from a generation prompt.

    Opens its own session and discards every failure after logging it.
    """
    try:
        SessionLocal = get_session_local()
        with SessionLocal() as db:
            stored = await extract_and_store_experiences(db, text, user_id, llm_config)
        _msg = f"Stored {len(stored)} extracted experiences for user {user_id}"
        log.debug(_msg)
    except Exception:
        _msg = f"Failed to store extracted experiences for user {user_id}"
        log.exception(_msg)
