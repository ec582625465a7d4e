import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import IntegrityError

from fintrack import __version__
from fintrack.api.middleware.error_handler import (
    handle_generic_error,
    handle_integrity_error,
    handle_ledger_error,
    handle_validation_error,
)
from fintrack.api.middleware.logging import RequestLoggingMiddleware, configure_logging
from fintrack.api.v1 import router as v1_router
from fintrack.config import settings
from fintrack.core.exceptions import LedgerError
from fintrack.db.session import async_engine, create_schema

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    configure_logging(settings.log_level)
    if settings.create_schema_on_startup:
        await create_schema()
        logger.info("Database schema ensured")
    yield
    # Shutdown
    await async_engine.dispose()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Personal Finance Tracker API",
        description="Accounts, transactions, budgets and bills with a consistent ledger",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Add request logging middleware
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    # Register exception handlers (order matters - most specific first)
    app.add_exception_handler(LedgerError, handle_ledger_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(IntegrityError, handle_integrity_error)
    app.add_exception_handler(Exception, handle_generic_error)

    # Register routers
    app.include_router(v1_router)

    # Serve a built front end when configured. Must follow the API routes.
    if settings.static_dir:
        static_dir = Path(settings.static_dir)
        if static_dir.exists():
            app.mount("/", StaticFiles(directory=str(static_dir), html=True), name="static")

    return app


app = create_app()
