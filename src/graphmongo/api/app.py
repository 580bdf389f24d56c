"""
Main FastAPI application for the graphmongo backend
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import Settings
from ..config import settings as default_settings
from ..database import DatabaseHandle
from ..logging import get_logger
from ..middleware import LoggingContextMiddleware

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager.

    The database is already connected when the app is built; shutdown
    releases it.
    """
    database: DatabaseHandle = app.state.database
    logger.info("Starting graphmongo API...", database_host=database.host)

    yield

    logger.info("Shutting down graphmongo API...")
    await database.close()


def create_app(database: DatabaseHandle, settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application around a connected database."""
    settings = settings or default_settings

    app = FastAPI(
        title="graphmongo API",
        description="GraphQL API over MongoDB",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.database = database

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
        """Health check endpoint; pings the database."""
        if await database.ping():
            return {
                "status": "healthy",
                "version": __version__,
                "database": "connected",
                "host": database.host,
            }
        return JSONResponse(
            status_code=503,
            content={
                "status": "unhealthy",
                "version": __version__,
                "database": "unavailable",
            },
        )

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        validate_schema()
        app.include_router(create_graphql_router(graphiql=settings.graphiql), prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    return app
