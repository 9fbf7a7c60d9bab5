from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from app.core.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Асинхронный движок по настройкам приложения"""
    return create_async_engine(settings.database_url, future=True, echo=settings.database_echo)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    """Фабрика сессий для запросов"""
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


# Функция для dependency injection в FastAPI
async def get_db(request: Request):
    async with request.app.state.session_factory() as session:
        yield session
