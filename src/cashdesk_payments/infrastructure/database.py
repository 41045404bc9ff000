"""
Database engine and session factory creation.

The engine is built from the configured URL; SQLite URLs get the
connection arguments needed to be shared across request threads.
"""

from __future__ import annotations

import logging

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from cashdesk_payments.infrastructure.orm.models import Base

logger = logging.getLogger(__name__)


def _safe_url(db_url: str) -> str:
    if "@" in db_url:
        return db_url.split("@")[0].rsplit(":", 1)[0] + ":***@..."
    return db_url


def create_db_engine(db_url: str, echo: bool = False) -> Engine:
    """
    Create an engine for the given URL.

    In-memory SQLite uses a StaticPool so every session sees the same
    database. That single connection cannot hold two transactions at
    once, so concurrent units of work need a file database.
    """
    kwargs: dict = {"echo": echo}
    if db_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if db_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True

    logger.info("Using database: %s", _safe_url(db_url))
    engine = create_engine(db_url, **kwargs)
    if engine.dialect.name == "sqlite":
        _configure_sqlite(engine)
    return engine


def _configure_sqlite(engine: Engine) -> None:
    """
    Enforce foreign keys and take the write lock when a transaction begins.

    pysqlite defers BEGIN until the first write, so two units of work
    could both read a payment as open before either writes. Emitting
    BEGIN IMMEDIATE ourselves serializes them for their whole duration.
    """

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        # Hand transaction control to the "begin" listener below.
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def init_db(engine: Engine) -> None:
    """Create all tables that do not exist yet."""
    logger.info("Initializing database tables...")
    Base.metadata.create_all(bind=engine, checkfirst=True)
    logger.info("Database initialized")
