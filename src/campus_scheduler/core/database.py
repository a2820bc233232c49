"""Database connection and session management.

This module handles the database connection using SQLAlchemy. SQLite
connections get foreign-key enforcement switched on so that ON DELETE
CASCADE behaves the same as on PostgreSQL.
"""

import logging
import sqlite3

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from campus_scheduler.config import DATA_DIR, DATABASE_URL
from campus_scheduler.models import Base
# Import triggers to ensure the mapper event handlers are registered
from campus_scheduler.core import triggers  # noqa: F401

logger = logging.getLogger(__name__)


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, connect_args=connect_args)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind=None) -> None:
    """Create tables (and the data directory for the default SQLite file)."""
    bind = bind or engine
    if bind.url.get_backend_name() == "sqlite":
        DATA_DIR.mkdir(parents=True, exist_ok=True)
    Base.metadata.create_all(bind=bind)
    logger.info("Database schema ready on %s", bind.url.render_as_string(hide_password=True))


def get_db():
    """Dependency for getting a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
