"""FastAPI application entry point.

Business Site API - appointments, contact messages, blog, opening hours,
image uploads and spreadsheet exports.
"""

from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from site_api.errors import register_exception_handlers
from site_api.routes import api_router
from site_api.settings import Settings, get_settings
from site_api.stores import RecordStore, UploadStorage

logger = logging.getLogger("uvicorn.error")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Opens the record store on startup and closes it on shutdown.
    """
    settings: Settings = app.state.settings
    store: RecordStore = app.state.store

    app.state.uploads.ensure_dir()

    try:
        await store.open()
        await store.ping()
        if settings.create_tables:
            await store.create_tables()
        logger.info("Database connected")
    except Exception:
        logger.exception("Database init failed")

    yield

    await store.close()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        settings: Explicit configuration; defaults to environment settings.
    """
    settings = settings or get_settings()
    logger.setLevel(settings.log_level.upper())

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Bookings, messages, blog and opening hours for the business site",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # Long-lived collaborators, handed to routes via site_api.routes.deps
    app.state.settings = settings
    app.state.store = RecordStore(settings.async_database_url, echo=settings.debug)
    app.state.uploads = UploadStorage(settings.upload_dir)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app, debug=settings.debug)

    # Health check endpoint
    @app.get("/health", tags=["health"])
    async def health_check() -> dict[str, bool]:
        """Health check endpoint."""
        return {"ok": True}

    app.include_router(api_router)

    # Uploaded files; the directory is created on startup or on first upload.
    app.mount(
        "/uploads",
        StaticFiles(directory=settings.upload_dir, check_dir=False),
        name="uploads",
    )

    return app


# Application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "site_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
