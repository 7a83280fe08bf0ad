"""FastAPI application entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storefront.config import configure_logging, get_settings
from storefront.database import create_tables, dispose_engine, initialize_database
from storefront.exceptions import StorefrontError
from storefront.routers import orders, products, roles, users

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Set up the database on startup and release it on shutdown."""
    settings = get_settings()
    initialize_database(settings)
    if settings.CREATE_TABLES:
        await create_tables()
    logger.info("application_started", environment=settings.ENVIRONMENT)

    yield

    await dispose_engine()
    logger.info("application_stopped")


async def storefront_error_handler(request: Request, exc: StorefrontError) -> JSONResponse:
    """Translate domain errors into JSON responses carrying their status code."""
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("request_failed", path=request.url.path, error=exc.message)
    else:
        logger.info("request_rejected", path=request.url.path, error=exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    settings = get_settings()
    configure_logging(settings.ENVIRONMENT)

    app = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StorefrontError, storefront_error_handler)  # type: ignore[arg-type]

    for router in (roles.router, users.router, products.router, orders.router):
        app.include_router(router, prefix=settings.API_V1_PREFIX)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Liveness probe."""
        return {"status": "ok"}

    return app


app = create_app()


def run() -> None:
    """Run the API server with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "storefront.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.ENVIRONMENT == "development",
    )


if __name__ == "__main__":
    run()
