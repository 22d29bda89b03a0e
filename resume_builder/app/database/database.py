import logging
from collections.abc import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from resume_builder.app.core.config import get_settings

log = logging.getLogger(__name__)

# Created on first use so that importing the app never opens a connection.
_engine: Engine | None = None
_SessionLocal: sessionmaker | None = None


def get_engine() -> Engine:
    """Return the process-wide engine for the resume store.

    Returns:
        Engine: Engine bound to the PostgreSQL URL assembled by `Settings`.

    Notes:
        1. Built lazily from settings on the first call and reused afterwards.
        2. Connections are pinged before checkout, so a restarted database does not
           fail the first request after it comes back.
        3. Network access: the first connection is opened on first use, not here.

    """
    global _engine
    if _engine is None:
        settings = get_settings()
        _msg = f"Creating database engine for {settings.db_host}:{settings.db_port}/{settings.db_name}"
        log.debug(_msg)
        _engine = create_engine(
            str(settings.database_url),
            echo=settings.db_echo,
            pool_pre_ping=True,
        )
    return _engine


def get_session_local() -> sessionmaker:
    """Return the session factory.

    Request handlers get sessions through `get_db`. Background tasks (the
    anonymous prompt log and experience extraction) and the management CLI call
    this factory directly, since they run outside any request.
    """
    global _SessionLocal
    if _SessionLocal is None:
        _msg = "Creating session factory"
        log.debug(_msg)
        _SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=get_engine(),
        )
    return _SessionLocal


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency yielding one session per request.

    Yields:
        Session: A session that is closed once the response has been produced.

    """
    db = get_session_local()()
    try:
        yield db
    finally:
        _msg = "Closing request session"
        log.debug(_msg)
        db.close()
