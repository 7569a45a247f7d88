"""
Database engine and session management.

Builds the SQLAlchemy engine from environment configuration and exposes the
session-factory plumbing used by the FastAPI dependency layer. Nothing here
is a process-wide singleton: callers build an engine, wrap it in a session
factory and hand that factory to the application.
"""
import os
import logging
from typing import Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

SQLITE_MEMORY_URL = "sqlite+pysqlite:///:memory:"


def get_database_url() -> str:
    """Resolve the database URL from the environment.

    ``INVENTORY_TEST_DB`` wins, then ``DATABASE_URL``; otherwise the URL is
    assembled from the individual ``POSTGRES_*`` components, all of which
    must be set.
    """
    explicit_test_db = os.getenv("INVENTORY_TEST_DB")
    if explicit_test_db:
        return explicit_test_db
    if os.getenv("DATABASE_URL"):
        return os.getenv("DATABASE_URL")

    db_user = os.getenv("POSTGRES_USER")
    db_password = os.getenv("POSTGRES_PASSWORD")
    db_host = os.getenv("POSTGRES_HOST")
    db_port = os.getenv("POSTGRES_PORT")
    db_name = os.getenv("POSTGRES_DB")

    if not all([db_user, db_password, db_host, db_port, db_name]):
        missing = []
        if not db_user: missing.append("POSTGRES_USER")
        if not db_password: missing.append("POSTGRES_PASSWORD")
        if not db_host: missing.append("POSTGRES_HOST")
        if not db_port: missing.append("POSTGRES_PORT")
        if not db_name: missing.append("POSTGRES_DB")
        raise ValueError(f"Missing required database environment variables: {', '.join(missing)}")

    return f"postgresql://{db_user}:{db_password}@{db_host}:{db_port}/{db_name}"


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):  # pragma: no cover - driver hook
    # SQLite ships with FK enforcement off; every connection has to opt in.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: Optional[str] = None, **kwargs) -> Engine:
    """Create an engine for ``url`` (resolved from the environment when omitted).

    In-memory SQLite gets a ``StaticPool`` so the schema survives across
    sessions, and every SQLite engine enforces foreign keys.
    """
    url = url or get_database_url()
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
        if ":memory:" in url:
            kwargs.setdefault("poolclass", StaticPool)
    else:
        kwargs.setdefault("pool_pre_ping", True)
    engine = create_engine(url, **kwargs)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    logger.info("database_engine: dialect=%s", engine.dialect.name)
    return engine


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(engine: Engine) -> None:
    """Create all tables directly from the ORM metadata.

    Production schemas are managed by Alembic; this is for SQLite test and
    local runs.
    """
    from inventory.db import models  # local import to avoid circular import at module load

    models.Base.metadata.create_all(bind=engine)

