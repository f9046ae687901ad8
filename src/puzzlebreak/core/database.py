"""
Database Connection and Session Management

SQLAlchemy engine, session management and schema creation for the
question/answer store.
"""

from pathlib import Path
from typing import Optional, Generator
from contextlib import contextmanager
from sqlalchemy import create_engine, Engine, inspect
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool

from .config import get_config
from .exceptions import DatabaseError, PuzzleBreakException
from puzzlebreak.utils.logging import get_logger

logger = get_logger(__name__)

# SQLAlchemy declarative base for ORM models
Base = declarative_base()

# Global engine and session factory
_engine: Optional[Engine] = None
SessionFactory: Optional[sessionmaker] = None


def get_engine() -> Engine:
    """Get or create the SQLAlchemy engine."""
    global _engine

    if _engine is None:
        config = get_config()
        logger.info(f"Creating database engine with URL: {config.database.url}")

        try:
            if config.database.url.startswith('sqlite:'):
                _engine = _create_sqlite_engine(config)
            else:
                _engine = create_engine(config.database.url, echo=config.database.echo)
        except Exception as e:
            raise DatabaseError(
                f"Failed to create database engine: {str(e)}",
                operation="create_engine",
                url=config.database.url
            ) from e

    return _engine


def _create_sqlite_engine(config) -> Engine:
    """Create a SQLAlchemy engine for SQLite databases."""
    database = make_url(config.database.url).database
    if database and database != ':memory:':
        Path(database).parent.mkdir(parents=True, exist_ok=True)

    return create_engine(
        config.database.url,
        echo=config.database.echo,
        poolclass=StaticPool,
        connect_args={
            'check_same_thread': False,  # Allow SQLite to be used across threads
            'timeout': 20,
        }
    )


def get_session_factory() -> sessionmaker:
    """Get or create the SQLAlchemy session factory."""
    global SessionFactory

    if SessionFactory is None:
        SessionFactory = sessionmaker(bind=get_engine())

    return SessionFactory


def create_tables() -> None:
    """Create all database tables."""
    # Import models to register them with Base metadata
    from puzzlebreak.storage.models import Question, Answer  # noqa: F401

    try:
        engine = get_engine()
        Base.metadata.create_all(engine)
        tables = inspect(engine).get_table_names()
        logger.info(f"Tables found in database: {tables}")
    except Exception as e:
        raise DatabaseError(
            f"Failed to create database tables: {str(e)}",
            operation="create_tables"
        ) from e


def drop_tables() -> None:
    """Drop all database tables (useful for testing)."""
    try:
        Base.metadata.drop_all(get_engine())
    except Exception as e:
        raise DatabaseError(
            f"Failed to drop database tables: {str(e)}",
            operation="drop_tables"
        ) from e


@contextmanager
def get_db_session() -> Generator[Session, None, None]:
    """Context manager for database sessions with automatic cleanup."""
    session = get_session_factory()()

    try:
        yield session
        session.commit()
    except PuzzleBreakException:
        session.rollback()
        raise
    except Exception as e:
        session.rollback()
        raise DatabaseError(
            f"Database session error: {str(e)}",
            operation="session_transaction"
        ) from e
    finally:
        session.close()


def init_database() -> None:
    """Initialize the database with tables."""
    create_tables()


def close_connections() -> None:
    """Close all database connections (useful for testing and cleanup)."""
    global _engine, SessionFactory

    if _engine:
        _engine.dispose()
        _engine = None

    SessionFactory = None
