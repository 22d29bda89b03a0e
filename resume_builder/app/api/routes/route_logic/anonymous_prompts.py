import logging

from sqlalchemy.orm import Session

from resume_builder.app.database.database import get_session_local
from resume_builder.app.models.anonymous_prompt import AnonymousPrompt

log = logging.getLogger(__name__)


def prune_anonymous_prompts(db: Session, max_entries: int) -> int:
    """Delete the oldest anonymous prompts beyond `max_entries`.

    Args:
        db (Session): The database session.
        max_entries (int): Number of most recent prompts to keep.

    Returns:
        int: The number of rows deleted.

    Notes:
        1. Read the ids of the whole log, oldest first by creation time then id.
        2. Compute how many rows exceed the cap.
        3. Delete exactly those ids.
        4. The read and the delete are separate statements without a lock, so
           concurrent callers may each prune against a slightly stale view.
           Deletes are by id, so rows are never deleted twice.

    """
    rows = (
        db.query(AnonymousPrompt.id)
        .order_by(AnonymousPrompt.created_at.asc(), AnonymousPrompt.id.asc())
        .all()
    )
    excess = len(rows) - max_entries
    if excess <= 0:
        return 0

    stale_ids = [row.id for row in rows[:excess]]
    db.query(AnonymousPrompt).filter(AnonymousPrompt.id.in_(stale_ids)).delete(
        synchronize_session=False,
    )
    db.commit()

    _msg = f"Pruned {len(stale_ids)} anonymous prompts"
    log.debug(_msg)
    return len(stale_ids)


def log_anonymous_prompt(db: Session, prompt: str, max_entries: int) -> AnonymousPrompt:
    """Append a prompt to the anonymous usage log, then enforce the cap.

    Args:
        db (Session): The database session.
        prompt (str): The trimmed prompt text.
        max_entries (int): Number of most recent prompts to keep.

    Returns:
        AnonymousPrompt: The inserted row.

    """
    entry = AnonymousPrompt(prompt=prompt)
    db.add(entry)
    db.commit()
    db.refresh(entry)

    prune_anonymous_prompts(db, max_entries)
    return entry


def record_anonymous_prompt(prompt: str, max_entries: int) -> None:
    """Background task: log an anonymous prompt without affecting the request.

    Opens its own session because the request session is closed by the time
    background tasks run. Every failure is logged and discarded.
    """
    try:
        SessionLocal = get_session_local()
        with SessionLocal() as db:
            log_anonymous_prompt(db, prompt, max_entries)
    except Exception:
        _msg = "Failed to record anonymous prompt"
        log.exception(_msg)
