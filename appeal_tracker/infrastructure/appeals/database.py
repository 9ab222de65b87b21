"""
Database engine construction.

Builds the single SQLAlchemy engine shared by every repository.
"""

import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """Build a SQLAlchemy engine for the given URL.

    SQLite connections are shared across the request threadpool, and an
    in-memory SQLite database is pinned to one connection so that every
    caller sees the same data.

    Args:
        database_url: Any SQLAlchemy database URL.
        echo: Log every SQL statement (debug only).

    Returns:
        A configured Engine.
    """
    url = make_url(database_url)

    if url.get_backend_name() != "sqlite":
        logger.info("Using database backend: %s", url.get_backend_name())
        return create_engine(url, echo=echo, pool_pre_ping=True)

    kwargs = {"connect_args": {"check_same_thread": False}}
    if url.database in (None, "", ":memory:"):
        kwargs["poolclass"] = StaticPool

    logger.info("Using SQLite database: %s", url.database or ":memory:")
    return create_engine(url, echo=echo, **kwargs)
