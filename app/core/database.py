"""
Database engine construction and connectivity checks.

The engine is built once by the composition root and handed to
repositories explicitly. Nothing here keeps a process-wide handle.
"""

import logging

from sqlalchemy import create_engine
from sqlalchemy import text as sql_text
from sqlalchemy.engine import Engine
from sqlalchemy.engine.url import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)


def build_engine(url: str, ssl_required: bool = False) -> Engine:
    """Build a SQLAlchemy engine for the given URL.

    In-memory SQLite databases share a single connection so that every
    request sees the same data.

    Args:
        url: SQLAlchemy database URL.
        ssl_required: Require TLS on PostgreSQL connections.

    Returns:
        A lazily-connecting Engine.
    """
    parsed = make_url(url)

    if parsed.get_backend_name() == "sqlite":
        kwargs = {"connect_args": {"check_same_thread": False}}
        if parsed.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, **kwargs)

    connect_args = {"sslmode": "require"} if ssl_required else {}
    return create_engine(url, pool_pre_ping=True, connect_args=connect_args)


def describe_engine(engine: Engine) -> str:
    """Render the engine URL for logs, password hidden."""
    return engine.url.render_as_string(hide_password=True)


def verify_connection(engine: Engine) -> bool:
    """Check that the store answers a trivial query.

    Failures are logged and reported, never raised.

    Returns:
        True when the store is reachable.
    """
    try:
        with engine.connect() as conn:
            conn.execute(sql_text("SELECT 1"))
    except SQLAlchemyError:
        logger.error(
            "Could not connect to the database at %s",
            describe_engine(engine),
            exc_info=True,
        )
        return False

    logger.debug("Database reachable: %s", describe_engine(engine))
    return True
