"""
Database engine, session factory and declarative base
"""

import sqlite3
from datetime import datetime, timezone

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker, declarative_base

from app.core.config import settings
from app.core.errors import DatabaseError

# SQLite requires check_same_thread=False; PostgreSQL doesn't need it
connect_args = {}
if settings.DATABASE_URL.startswith("sqlite"):
    connect_args["check_same_thread"] = False

engine = create_engine(
    settings.DATABASE_URL,
    connect_args=connect_args,
    pool_pre_ping=True,
    echo=False,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """Turn on ON DELETE CASCADE enforcement for SQLite connections"""
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def utcnow() -> datetime:
    """Naive UTC timestamp, matching how DateTime columns are stored"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def commit_or_rollback(db: Session, action: str) -> None:
    """Commit the current transaction; on failure roll back and raise DatabaseError"""
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        raise DatabaseError(f"Failed to {action}: {exc}") from exc


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
