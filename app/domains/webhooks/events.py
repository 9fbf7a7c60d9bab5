from enum import Enum
from typing import Any, Dict

from fastapi import BackgroundTasks

from app.domains.webhooks.notifier import WebhookNotifier


class SliceEvent(str, Enum):
    CREATED = "slice.created"
    UPDATED = "slice.updated"
    DELETED = "slice.deleted"


class EventPublisher:
    """Публикация доменных событий сервисами"""

    def publish(self, event: SliceEvent, data: Dict[str, Any]) -> None:
        raise NotImplementedError


class BackgroundEventPublisher(EventPublisher):
    """Доставка событий через фоновые задачи FastAPI.

    Ответ на запрос отправляется сразу после записи в БД, вебхуки
    рассылаются уже после него.
    """

    def __init__(self, notifier: WebhookNotifier, background_tasks: BackgroundTasks):
        self.notifier = notifier
        self.background_tasks = background_tasks

    def publish(self, event: SliceEvent, data: Dict[str, Any]) -> None:
        self.background_tasks.add_task(self.notifier.notify, event.value, data)
