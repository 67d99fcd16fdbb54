"""
Database setup with SQLAlchemy 2.0.
Provides the engine, session management, the atomic unit of work and the base model.
"""
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator, Optional

from sqlalchemy import DateTime, Engine, MetaData, create_engine, event, func, text
from sqlalchemy.engine import make_url
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, sessionmaker
from sqlalchemy.pool import NullPool, StaticPool

from foodconnect.core.config import settings
from foodconnect.logging_config import get_logger

logger = get_logger("database")


# Naming convention for constraints
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s"
}

metadata = MetaData(naming_convention=NAMING_CONVENTION)


class Base(DeclarativeBase):
    """Base class for all ledger tables."""
    metadata = metadata


def utcnow() -> datetime:
    """Naive UTC timestamp, matching SQLite's CURRENT_TIMESTAMP."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class TimestampMixin:
    """Adds the created_at column shared by users, food items, requests and transactions."""

    created_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime,
        default=utcnow,
        server_default=func.current_timestamp(),
        nullable=True
    )


def _enable_sqlite_transactions(engine: Engine) -> None:
    """
    Turn foreign keys on and make every transaction a BEGIN IMMEDIATE.

    pysqlite's own transaction handling is switched off so the write lock is
    taken when the unit of work starts, before any read-then-check validation.
    """

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys = ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine for the given URL with ledger connection settings."""
    url = make_url(database_url)

    if url.get_backend_name() == "sqlite":
        in_memory = url.database in (None, "", ":memory:")
        if not in_memory:
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)

        engine = create_engine(
            url,
            echo=echo,
            # An in-memory database lives only as long as its single connection
            poolclass=StaticPool if in_memory else NullPool,
            connect_args={
                "check_same_thread": False,
                "timeout": settings.db_busy_timeout,
            }
        )
        _enable_sqlite_transactions(engine)
    else:
        engine = create_engine(
            url,
            echo=echo,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=True,
            pool_recycle=3600,
            isolation_level="SERIALIZABLE",
        )

    return engine


# Global engine and session factory
engine: Engine | None = None
SessionLocal: sessionmaker[Session] | None = None


def get_engine() -> Engine:
    """Get or create the database engine."""
    global engine

    if engine is None:
        engine = build_engine(settings.database_url, echo=settings.db_echo)
        logger.info(f"[DB] Engine created for {engine.url.render_as_string(hide_password=True)}")

    return engine


def build_session_factory(bind: Engine) -> sessionmaker[Session]:
    """Session factory used by the ledger and by tests."""
    return sessionmaker(
        bind=bind,
        class_=Session,
        expire_on_commit=False,
        autoflush=False
    )


def get_session_factory() -> sessionmaker[Session]:
    """Get or create the session factory."""
    global SessionLocal

    if SessionLocal is None:
        SessionLocal = build_session_factory(get_engine())

    return SessionLocal


@contextmanager
def get_db_context() -> Iterator[Session]:
    """
    Context manager for database sessions.

    Usage:
        with get_db_context() as db:
            item = get_food_item(db, 3)
    """
    session_factory = get_session_factory()
    with session_factory() as db:
        yield db


@contextmanager
def atomic(db: Session) -> Iterator[Session]:
    """
    Run a block as one ledger operation.

    Commits when the block finishes and rolls back every change made in it
    when anything is raised.
    """
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise


def init_db(bind: Engine | None = None) -> None:
    """Create all ledger tables. Use Alembic for managed databases."""
    bind = bind or get_engine()

    # Import all models to ensure they're registered
    from foodconnect import models  # noqa: F401

    Base.metadata.create_all(bind=bind)
    logger.info("[DB] All tables created (or already exist)")


def drop_db(bind: Engine | None = None) -> None:
    """Drop all ledger tables."""
    bind = bind or get_engine()

    from foodconnect import models  # noqa: F401

    Base.metadata.drop_all(bind=bind)
    logger.info("[DB] All tables dropped")


def check_db_connection() -> bool:
    """Health check for database connection."""
    try:
        with get_engine().connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except Exception:
        logger.exception("[DB] Connection check failed")
        return False
