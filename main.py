"""
MealTrack FastAPI Application
Main entry point: application factory, lifespan, middleware and configuration
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
import uvicorn
from contextlib import asynccontextmanager
import anyio
from typing import Optional

from api.routes import foods, categories, meals, health
from api.middleware import RequestLoggingMiddleware, register_exception_handlers
from app.config import Settings, settings as default_settings
from domain.models import Database
from services.category_service import CategoryService

_logger = logging.getLogger("mealtrack.main")


def configure_logging(config: Settings) -> None:
    """Setup logging with configured level and format"""
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper()), format=config.log_format
    )


def _prepare_database(database: Database, config: Settings) -> None:
    database.init_schema()
    if config.seed_default_categories and config.default_categories:
        with database.session() as db:
            CategoryService.ensure_defaults(db, config.default_categories)


async def _startup(app: FastAPI, config: Settings) -> None:
    """Create the schema with retries, then seed default categories"""
    last_exc: Optional[Exception] = None
    database: Database = app.state.database

    for attempt in range(1, config.db_init_attempts + 1):
        try:
            # Blocking DB work runs in a thread to keep the event loop free
            await anyio.to_thread.run_sync(_prepare_database, database, config)
            _logger.info("Database initialization succeeded")
            return
        except Exception as exc:
            last_exc = exc
            _logger.warning(
                "Database init attempt %d/%d failed: %s",
                attempt,
                config.db_init_attempts,
                exc,
            )
            if attempt < config.db_init_attempts:
                await anyio.sleep(config.db_init_delay_sec)

    _logger.error("Database initialization failed after %d attempts", config.db_init_attempts)
    raise last_exc


def create_app(database: Optional[Database] = None, config: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        database: store client to serve from; when omitted one is created from
            ``config.database_url`` at startup and disposed at shutdown
        config: settings to use (defaults to the environment-loaded settings)
    """
    config = config or default_settings
    owns_database = database is None

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        _logger.info(f"Starting {config.app_name} in {config.environment.value} mode")
        if app.state.database is None:
            app.state.database = Database(config.database_url, echo=config.db_echo)
        await _startup(app, config)
        try:
            yield
        finally:
            _logger.info(f"Shutting down {config.app_name}")
            if owns_database and app.state.database is not None:
                app.state.database.dispose()
                app.state.database = None

    app = FastAPI(
        title=config.api_title,
        version=config.app_version,
        description=config.api_description,
        lifespan=lifespan,
        debug=config.debug,
        openapi_url=(
            f"{config.api_prefix}/openapi.json" if not config.is_production() else None
        ),
        docs_url=f"{config.api_prefix}/docs" if not config.is_production() else None,
        redoc_url=f"{config.api_prefix}/redoc" if not config.is_production() else None,
    )
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=config.cors_allow_credentials,
        allow_methods=config.cors_allow_methods,
        allow_headers=config.cors_allow_headers,
    )
    app.add_middleware(RequestLoggingMiddleware)

    register_exception_handlers(app)

    app.include_router(foods.router, prefix=config.api_prefix)
    app.include_router(categories.router, prefix=config.api_prefix)
    app.include_router(meals.router, prefix=config.api_prefix)
    app.include_router(health.router)

    return app


configure_logging(default_settings)
app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.is_development(),
        log_level=default_settings.log_level.lower(),
    )
