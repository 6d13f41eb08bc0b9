# 1. Standard Library
from collections.abc import Generator
from typing import Any

# 2. Third-Party Libraries
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

# 3. Application Layers
from app.api.main import app
from app.data_access.database import get_session
from app.data_access.models import Customer  # noqa: F401  (registers the table)


@pytest.fixture(name="engine")
def engine_fixture() -> Generator[Engine, Any, None]:
    """
    Creates a clean, in-memory SQLite database for every test.
    StaticPool keeps the single in-memory connection alive across the
    threads TestClient uses to run sync endpoints.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture(name="session")
def session_fixture(engine: Engine) -> Generator[Session, Any, None]:
    with Session(engine) as session:
        yield session


@pytest.fixture(name="client")
def client_fixture(engine: Engine) -> Generator[TestClient, Any, None]:
    """TestClient bound to the test database; the lifespan is not entered."""
    def get_session_override() -> Generator[Session, Any, None]:
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = get_session_override
    yield TestClient(app)
    app.dependency_overrides.clear()
