import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)


@dataclass
class WebhookDelivery:
    """Результат отправки одного вебхука"""
    url: str
    event: str
    ok: bool
    status_code: Optional[int] = None
    error: Optional[str] = None


class WebhookNotifier:
    """Рассылка уведомлений о событиях по списку URL.

    Каждый URL обслуживается независимо: ошибка одного не мешает остальным
    и никогда не пробрасывается вызывающему коду. Повторных попыток нет,
    неудачная доставка теряется и видна только в логах.
    """

    def __init__(
        self,
        urls: List[str],
        secret: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.urls = list(urls)
        self.secret = secret
        self.timeout = timeout
        self.transport = transport

    async def notify(self, event: str, data: Dict[str, Any]) -> List[WebhookDelivery]:
        """Отправка события на все адреса, ждём завершения всех отправок"""
        if not self.urls:
            return []

        payload = {
            "event": event,
            "data": data,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            results = await asyncio.gather(
                *(self._send(client, url, payload) for url in self.urls),
                return_exceptions=True
            )

        deliveries = []
        for url, result in zip(self.urls, results):
            if isinstance(result, Exception):
                logger.error(f"Webhook failed for {url}: {event} (unexpected error {result!r})")
                result = WebhookDelivery(url, event, ok=False, error=str(result))
            deliveries.append(result)
        return deliveries

    async def _send(self, client: httpx.AsyncClient, url: str, payload: Dict[str, Any]) -> WebhookDelivery:
        event = payload["event"]
        try:
            response = await client.post(
                url,
                json=payload,
                headers={"x-webhook-secret": self.secret}
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Webhook failed for {url}: {event} "
                f"(status {e.response.status_code}, body {e.response.text[:500]!r})"
            )
            return WebhookDelivery(url, event, ok=False, status_code=e.response.status_code, error=str(e))
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Webhook failed for {url}: {event} ({e!r})")
            return WebhookDelivery(url, event, ok=False, error=str(e))

        logger.info(f"Webhook sent to {url}: {event}")
        return WebhookDelivery(url, event, ok=True, status_code=response.status_code)
