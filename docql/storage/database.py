"""Database connection and transaction management."""

import logging
import threading
from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from docql.config import get_settings
from docql.models.base import Base
from docql.models.document import Document
from docql.storage.repositories import DocumentRepository

logger = logging.getLogger(__name__)

SEED_FILE = "a23hkjhl03209n2lh34sd009f92h3h4120098fwejk13h342h..."

SEED_DOCUMENTS = [
    {"id": 1, "name": "Document one", "file": SEED_FILE},
    {"id": 2, "name": "Document 2", "file": SEED_FILE},
    {"id": 3, "name": "Document 3", "file": SEED_FILE},
]


class Database:
    """Store connection manager with serialized transaction handling."""

    def __init__(self, database_url: str | None = None, echo: bool | None = None):
        """
        Initialize database connection.

        Args:
            database_url: Database connection URL. If None, reads from settings.
                         The default ``sqlite://`` keeps the whole store in memory.
            echo: Log every SQL statement. If None, uses settings.
        """
        settings = get_settings()

        if database_url is None:
            database_url = settings.get_database_url()

        if echo is None:
            echo = settings.sql_echo

        engine_kwargs = {}
        if database_url.startswith("sqlite"):
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if database_url in ("sqlite://", "sqlite:///:memory:"):
                # Every session must see the same in-memory database
                engine_kwargs["poolclass"] = StaticPool

        self.database_url = database_url
        self.engine = create_engine(database_url, echo=echo, **engine_kwargs)

        # Loaded attributes survive commit so resolvers can read deleted rows
        self.SessionLocal = sessionmaker(
            autocommit=False, autoflush=False, expire_on_commit=False, bind=self.engine
        )
        self._lock = threading.RLock()

    def create_tables(self) -> None:
        """Create all database tables."""
        Base.metadata.create_all(bind=self.engine)

    def drop_tables(self) -> None:
        """Drop all database tables."""
        Base.metadata.drop_all(bind=self.engine)

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """
        Context manager for database sessions with automatic transaction handling.

        Sessions are serialized: the store lock is held until the session closes,
        so a read-modify-write never interleaves with another request.

        Usage:
            with db.session() as session:
                # Use session here
                session.commit()
        """
        with self._lock:
            session = self.SessionLocal()
            try:
                yield session
                session.commit()
            except Exception:
                session.rollback()
                raise
            finally:
                session.close()

    def dispose(self) -> None:
        """Release the engine and its connections."""
        self.engine.dispose()


def seed_documents(db: Database) -> int:
    """
    Load the sample documents into an empty store.

    Returns:
        Number of documents inserted (0 if the store already had data)
    """
    with db.session() as session:
        if DocumentRepository(session).count():
            return 0
        session.add_all(Document(**data) for data in SEED_DOCUMENTS)
    logger.info("Seeded %d documents", len(SEED_DOCUMENTS))
    return len(SEED_DOCUMENTS)


def init_db(db: Database, seed: bool | None = None) -> Database:
    """Create tables and optionally seed them."""
    if seed is None:
        seed = get_settings().seed_documents
    db.create_tables()
    if seed:
        seed_documents(db)
    return db


# Global database instance
_db: Database | None = None


def get_db(database_url: str | None = None) -> Database:
    """
    Get or create the global database instance.

    Args:
        database_url: Database connection URL. Only used on first call.

    Returns:
        Database instance
    """
    global _db
    if _db is None:
        _db = Database(database_url)
    return _db


def reset_db() -> None:
    """Reset the global database instance (useful for testing)."""
    global _db
    if _db is not None:
        _db.dispose()
    _db = None
