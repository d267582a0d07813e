"""Database engine, session factory and transaction helpers."""

from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from app.config import get_settings


def create_db_engine():
    """Create the SQLAlchemy engine for the configured database."""
    settings = get_settings()

    kwargs = {"echo": settings.sql_echo}
    if settings.is_sqlite:
        # Requests are served from a thread pool
        kwargs["connect_args"] = {"check_same_thread": False}
    if settings.is_in_memory:
        # One shared connection, otherwise every thread sees an empty database
        kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True

    return create_engine(settings.database_url, **kwargs)


engine = create_db_engine()
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """Dependency for FastAPI endpoints that need a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(db: Session) -> Generator[Session, None, None]:
    """Run a unit of work: commit on success, roll back on any error.

    Usage:
        with transaction(self.db):
            self.recipes.save(recipe)
    """
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise


def init_db() -> None:
    """Create all tables that do not exist yet."""
    # Register the entity tables on Base.metadata
    import app.models.entities  # noqa: F401

    Base.metadata.create_all(bind=engine)


def dispose_engine() -> None:
    """Dispose of the engine and all connections.

    Call this during graceful shutdown.
    """
    engine.dispose()
