"""
Main FastAPI application for the projecthub backend
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..database import init_database
from ..database.connection import check_database_connection, dispose_database
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

# Configure logging before creating logger
configure_logging(debug=settings.debug)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting projecthub API...")
    init_database()

    ok, error = await check_database_connection()
    if ok:
        logger.info("Database connection verified")
    else:
        logger.error("Database connection check failed", error=error)
        if settings.environment.lower() in ("production", "prod"):
            raise RuntimeError(error)

    yield

    logger.info("Shutting down projecthub API...")
    await dispose_database()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="projecthub API",
        description="GraphQL API for projects and the clients that own them",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        logger.info("Validating GraphQL schema...")
        validate_schema()

        app.include_router(create_graphql_router(), prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "projecthub.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
