"""
Database configuration and session management.

The store handle is an explicit ``Database`` value: it is constructed once by
the application lifespan (or by a test fixture), injected into request
handlers, and disposed on shutdown.
"""

import logging
from contextlib import contextmanager
from typing import Any, Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

logger = logging.getLogger("mealtrack.database")

# Create SQLAlchemy Base
Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores REFERENCES clauses unless this pragma is on per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Engine plus session factory for one database URL."""

    def __init__(self, url: str, echo: bool = False, **engine_kwargs: Any):
        self.url = url
        self.engine: Engine = create_engine(url, echo=echo, future=True, **engine_kwargs)
        if self.engine.dialect.name == "sqlite":
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)
        self.session_factory = sessionmaker(
            bind=self.engine, autoflush=False, expire_on_commit=False, future=True
        )

    def init_schema(self) -> None:
        """Create all tables that do not exist yet"""
        # Model modules register their tables on Base when imported
        import domain.models  # noqa: F401

        with self.engine.begin() as conn:
            Base.metadata.create_all(bind=conn)
        logger.info("Database tables created successfully")

    def drop_schema(self) -> None:
        """Drop all tables (used by tests and the reset script)"""
        with self.engine.begin() as conn:
            Base.metadata.drop_all(bind=conn)
        logger.info("Database tables dropped")

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """Session scoped to a ``with`` block; always closed on exit"""
        db = self.session_factory()
        try:
            yield db
        finally:
            db.close()

    def dispose(self) -> None:
        """Release every pooled connection"""
        self.engine.dispose()
        logger.info("Database engine disposed")
