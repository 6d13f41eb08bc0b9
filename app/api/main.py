import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.errors import register_exception_handlers
from app.api.routes import router
from app.core.config import settings
from app.data_access.database import create_db_and_tables


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handles system startup and shutdown events.

    Initializes logging and creates the customer table if it is missing.
    """
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler()] # This sends it to the Terminal
    )

    # Create database tables on startup
    create_db_and_tables()

    yield

# Define the FastAPI app with metadata for Swagger UI
app = FastAPI(
    title=settings.API_TITLE,
    description="CRUD API over customer records with field-level validation messages",
    version="0.1.0",
    lifespan=lifespan
)

register_exception_handlers(app)

# Include our routes
app.include_router(router)

@app.get("/")
def read_root() -> dict[str, str]:
    """Landing endpoint for the API.

    Returns:
        Dict[str, str]: A welcome message.
    """
    return {"message": f"Welcome to the {settings.API_TITLE}"}
