"""Database configuration and session management.

Functions:
    get_engine: Returns the lazily created SQLAlchemy engine.
    get_session_local: Returns the session factory bound to that engine.
    get_db: FastAPI dependency yielding a session per request.

"""

from .database import get_db, get_engine, get_session_local

__all__ = ["get_db", "get_engine", "get_session_local"]
