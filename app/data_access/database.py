import logging
from collections.abc import Generator

from sqlmodel import Session, SQLModel, create_engine

from app.core.config import settings

# Registers the table models on SQLModel.metadata
from app.data_access import models  # noqa: F401


logger = logging.getLogger(__name__)


def build_engine(database_url: str):
    """Creates the SQLAlchemy engine for the given URL.

    SQLite connections are shared with FastAPI's threadpool, so the
    same-thread check is switched off for them.
    """
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(database_url, connect_args=connect_args)


engine = build_engine(settings.DATABASE_URL)


def create_db_and_tables() -> None:
    """Creates the physical customer table if it does not exist yet."""
    SQLModel.metadata.create_all(engine)
    logger.info("Database tables created successfully.")


def get_session() -> Generator[Session, None, None]:
    """FastAPI dependency to provide a database session."""
    with Session(engine) as session:
        yield session
