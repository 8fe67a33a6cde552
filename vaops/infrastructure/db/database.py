"""
Database configuration and session management.
"""

import logging
from typing import Generator

from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import NullPool, StaticPool

logger = logging.getLogger(__name__)

# Create declarative base
Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """
    Owns the engine and session factory.
    Created once at application startup and disposed at shutdown.
    """

    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url
        self.engine = self._create_engine(database_url, echo)
        self.session_factory = sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=self.engine,
        )

    @staticmethod
    def _create_engine(database_url: str, echo: bool) -> Engine:
        if database_url.startswith("sqlite"):
            in_memory = ":memory:" in database_url or database_url.rstrip("/") == "sqlite:"
            engine = create_engine(
                database_url,
                echo=echo,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool if in_memory else NullPool,
            )
            event.listen(engine, "connect", _enable_sqlite_foreign_keys)
            return engine

        # Supabase pools connections itself
        return create_engine(database_url, echo=echo, poolclass=NullPool)

    def session(self) -> Session:
        return self.session_factory()

    def create_all(self) -> None:
        """Create all tables known to the metadata."""
        from vaops.infrastructure.db import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def drop_all(self) -> None:
        from vaops.infrastructure.db import models  # noqa: F401

        Base.metadata.drop_all(bind=self.engine)

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info("Database engine disposed")


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Dependency function to get a request-scoped database session.
    """
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
