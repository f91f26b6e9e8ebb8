"""Database connection and session management."""
import logging
from contextlib import contextmanager
from typing import Generator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from config.settings import settings
from talentmatch.persistence.models import Base

logger = logging.getLogger(__name__)


def build_engine(url: Optional[str] = None) -> Engine:
    """Create SQLAlchemy engine with appropriate settings for the database backend."""
    url = url or settings.database_url

    if url.startswith("sqlite"):
        return create_engine(
            url,
            echo=False,
            connect_args={"check_same_thread": False},
        )

    # PostgreSQL (or other server-based databases)
    return create_engine(
        url,
        echo=False,
        pool_size=5,
        max_overflow=10,
        pool_pre_ping=True,  # Verify connections before use
    )


class Database:
    """Owns the engine and session factory for one registry store.

    The hosting service creates one instance at startup and hands sessions
    to the services; nothing here is process-global.
    """

    def __init__(self, url: Optional[str] = None, engine: Optional[Engine] = None):
        self.engine = engine or build_engine(url)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def init_db(self) -> None:
        """Create all registry tables."""
        Base.metadata.create_all(bind=self.engine)
        logger.info("Registry tables ready on %s", self.engine.url)

    def drop_db(self) -> None:
        """Drop all tables (use with caution)."""
        Base.metadata.drop_all(bind=self.engine)

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """Get a database session with automatic cleanup."""
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def session_direct(self) -> Session:
        """Get a database session directly (caller responsible for cleanup)."""
        return self.SessionLocal()

    def dispose(self) -> None:
        """Release pooled connections."""
        self.engine.dispose()
