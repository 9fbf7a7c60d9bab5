from app.domains.webhooks.notifier import WebhookNotifier, WebhookDelivery
from app.domains.webhooks.events import SliceEvent, EventPublisher, BackgroundEventPublisher

__all__ = [
    "WebhookNotifier", "WebhookDelivery",
    "SliceEvent", "EventPublisher", "BackgroundEventPublisher"
]
