import logging
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

log = logging.getLogger(__name__)


@contextmanager
def store_errors_as_500(db: Session, detail: str) -> Iterator[None]:
    """Turn database failures inside the block into a generic 500 response.

    Args:
        db (Session): The session used inside the block; rolled back on failure.
        detail (str): The client-facing message, e.g. "Failed to save experience".

    Raises:
        HTTPException: 500 with `detail` when the block raises `SQLAlchemyError`.
            The database error itself is only logged.

    """
    try:
        yield
    except SQLAlchemyError as e:
        db.rollback()
        _msg = f"{detail}: {e!s}"
        log.exception(_msg)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
        ) from e
