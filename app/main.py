import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.api.errors import register_exception_handlers
from app.api.router import admin_router, public_router
from app.core.config import Settings
from app.core.db import create_engine, create_session_factory
from app.core.logging import configure_logging
from app.db.base import Base
from app.domains.assets.storage import ensure_upload_dir
from app.domains.webhooks.notifier import WebhookNotifier

# Импорт моделей для регистрации таблиц в метаданных
from app.db import models  # noqa: F401

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings

    upload_dir = ensure_upload_dir(settings.upload_dir)
    logger.info(f"Upload directory: {upload_dir}")

    if settings.auto_create_tables:
        async with app.state.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    logger.info(f"CMS started in {settings.environment} mode")
    yield

    await app.state.engine.dispose()
    logger.info("CMS stopped")


def create_app(
    settings: Optional[Settings] = None,
    notifier: Optional[WebhookNotifier] = None
) -> FastAPI:
    """Сборка приложения: настройки, БД, вебхуки и роутеры"""
    settings = settings or Settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Headless CMS",
        description="Типизированное хранилище контента: типы контента, слайсы, документы и файлы",
        version="1.0.0",
        lifespan=lifespan
    )

    engine = create_engine(settings)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    app.state.notifier = notifier or WebhookNotifier(
        urls=settings.webhook_urls,
        secret=settings.webhook_secret,
        timeout=settings.webhook_timeout
    )
    app.state.started_at = time.monotonic()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - started) * 1000

        # Ответы API не кэшируются
        if request.url.path.startswith("/api"):
            response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate, private"
            response.headers["Pragma"] = "no-cache"
            response.headers["Expires"] = "0"

        logger.info(
            f"{request.method} {request.url.path} {response.status_code} {duration_ms:.1f}ms"
        )
        return response

    register_exception_handlers(app)

    app.include_router(public_router, prefix="/api")
    app.include_router(admin_router, prefix="/api")

    @app.get("/")
    async def root():
        """Корневой эндпоинт"""
        return {
            "service": "Headless CMS",
            "version": "1.0.0",
            "endpoints": {
                "api": "/api",
                "apiHealth": "/api/health",
                "adminApi": "/api/admin",
                "uploads": "/uploads/{filename}",
            },
            "environment": settings.environment,
        }

    app.mount("/uploads", StaticFiles(directory=settings.upload_dir, check_dir=False), name="uploads")

    return app


app = create_app()
