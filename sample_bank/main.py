import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sample_bank.config import Settings, settings as default_settings
from sample_bank.database import Database
from sample_bank.exceptions import register_exception_handlers
from sample_bank.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Settings = default_settings) -> FastAPI:
    setup_logging(settings.LOG_LEVEL, sql_echo=settings.SQL_ECHO)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Welcome to %s", settings.PROJECT_NAME)
        database = Database(settings.SQLALCHEMY_DATABASE_URI)
        try:
            if settings.AUTO_CREATE_SCHEMA:
                await database.create_all()
            app.state.database = database
            yield
        finally:
            await database.dispose()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    # Routers
    from sample_bank.routes.api import api_router

    app.include_router(api_router)

    register_exception_handlers(app)

    # Cross-origin requests only from the configured front end
    if settings.BACKEND_CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[str(origin) for origin in settings.BACKEND_CORS_ORIGINS],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # Health Check
    @app.get("/health")
    def health_check():
        return {"status": "ok", "version": settings.VERSION}

    return app

app = create_app()
