# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.error_handlers import register_exception_handlers
from .api.v1 import payment_router, user_router
from .core.config import STORE_MONGO, get_settings
from .infrastructure.db.mongo_connection import (
    close_database,
    ensure_indexes,
    get_payment_collection,
    get_user_collection,
)
from .infrastructure.http_client_factory import close_shared_http_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Creates MongoDB indexes for the stores that use MongoDB, and closes the
    shared HTTP client and the MongoDB client on shutdown.
    """
    settings = get_settings()
    uses_mongo = STORE_MONGO in (settings.user_store, settings.payment_store)

    if uses_mongo:
        try:
            await ensure_indexes(
                user_collection=get_user_collection() if settings.user_store == STORE_MONGO else None,
                payment_collection=get_payment_collection() if settings.payment_store == STORE_MONGO else None,
            )
        except Exception as e:
            # Don't fail app startup if MongoDB is temporarily unavailable
            logger.error(f"Failed to ensure MongoDB indexes: {e}", exc_info=True)

    logger.info(
        f"Application started (users: {settings.user_store}, payments: {settings.payment_store}, "
        f"user port: {settings.user_port_adapter})"
    )

    yield

    await close_shared_http_client()
    if uses_mongo:
        close_database()

    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - Exception handlers and API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    application = FastAPI(
        title="User & Payment API",
        version="1.0.0",
        description="User and Payment service with a swappable external user port",
        lifespan=lifespan,
    )

    allow_all = settings.allowed_origins == ["*"]
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=not allow_all,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)

    # Register API routers
    application.include_router(user_router, prefix="/users")
    application.include_router(payment_router, prefix="/payments")

    return application


# Create application instance
app = create_application()
