"""Expense Tracker API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ExpenseTrackerError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Session manager and store built in the lifespan and kept on app.state;
      routes receive the store through the get_store dependency

Design Decisions:
    - create_app(settings) builds the app; module-level app uses get_settings()
    - Startup and shutdown live in one lifespan context manager
    - Schema auto-creation at startup is on by default, switchable off when
      alembic owns migrations
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from expense_tracker import __version__
from expense_tracker.api.error_handlers import register_error_handlers
from expense_tracker.api.routes import expenses, health
from expense_tracker.config import Settings, get_settings
from expense_tracker.infrastructure.database import DatabaseSessionManager
from expense_tracker.infrastructure.expense_store import ExpenseStore
from expense_tracker.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        db_manager = DatabaseSessionManager(
            settings.resolved_database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        if settings.database_auto_migrate:
            await db_manager.create_schema()
        app.state.db_manager = db_manager
        app.state.store = ExpenseStore(
            db_manager, date_default=settings.expense_date_default,
        )
        logger.info(
            f"Expense Tracker API started (date default: "
            f"{settings.expense_date_default.value})",
        )
        yield
        logger.info("Expense Tracker API shutting down")
        await db_manager.dispose()

    app = FastAPI(
        title="Expense Tracker API", version=__version__, lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "Authorization"],
    )

    app.include_router(health.router)
    app.include_router(expenses.router)

    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    """Console entry point - serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "expense_tracker.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
