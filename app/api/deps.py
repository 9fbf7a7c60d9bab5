from fastapi import BackgroundTasks, Request

from app.core.config import Settings
from app.domains.webhooks.events import BackgroundEventPublisher, EventPublisher


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_event_publisher(request: Request, background_tasks: BackgroundTasks) -> EventPublisher:
    """Публикатор событий, доставляющий вебхуки после отправки ответа"""
    return BackgroundEventPublisher(request.app.state.notifier, background_tasks)
