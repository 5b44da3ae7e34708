"""
Database configuration and session management.

The engine and session factory live on an explicit ``Database`` handle that the
application opens at startup and closes at shutdown (see ``main.py``).
"""

import logging
from typing import Generator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

logger = logging.getLogger("recipebox.database")

# Create SQLAlchemy Base
Base = declarative_base()


class Database:
    """Owns one SQLAlchemy engine and the session factory bound to it."""

    def __init__(self, url: str, echo: bool = False, **engine_kwargs):
        self.url = url
        self.echo = echo
        self.engine_kwargs = engine_kwargs
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise RuntimeError("Database is not open. Call open() on startup.")
        return self._engine

    def open(self) -> "Database":
        if self._engine is not None:
            return self
        self._engine = create_engine(
            self.url, echo=self.echo, future=True, **self.engine_kwargs
        )
        self._session_factory = sessionmaker(
            bind=self._engine, autoflush=False, expire_on_commit=False, future=True
        )
        logger.info("database_opened dialect=%s", self._engine.dialect.name)
        return self

    def close(self) -> None:
        if self._engine is None:
            return
        self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info("database_closed")

    def init_schema(self) -> None:
        """Create all tables that do not exist yet."""
        # Model modules register their tables on Base when imported.
        import domain.models  # noqa: F401

        with self.engine.begin() as conn:
            Base.metadata.create_all(bind=conn)
        logger.info("Database tables created successfully")

    def session(self) -> Session:
        if self._session_factory is None:
            raise RuntimeError("Database is not open. Call open() on startup.")
        return self._session_factory()

    def get_session(self) -> Generator[Session, None, None]:
        """Yield a session and make sure it is closed after use."""
        db = self.session()
        try:
            yield db
        finally:
            db.close()
