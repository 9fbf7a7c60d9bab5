"""Общие фикстуры: приложение на временной SQLite и перехват вебхуков."""

import json
from pathlib import Path
from typing import List

import httpx
import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.domains.webhooks.notifier import WebhookNotifier
from app.main import create_app

WEBHOOK_URLS = ["http://hooks.test/one", "http://hooks.test/two"]
WEBHOOK_SECRET = "test-secret"


class WebhookRecorder:
    """Обработчик для httpx.MockTransport, запоминающий запросы"""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.status_code = 200

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code)

    @property
    def payloads(self) -> List[dict]:
        return [json.loads(request.content) for request in self.requests]

    @property
    def events(self) -> List[str]:
        return [payload["event"] for payload in self.payloads]


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'cms.db'}",
        auto_create_tables=True,
        environment="test",
        api_url="http://cms.test",
        upload_dir=str(tmp_path / "uploads"),
        slice_webhook_urls=",".join(WEBHOOK_URLS),
        webhook_secret=WEBHOOK_SECRET,
    )


@pytest.fixture
def webhooks() -> WebhookRecorder:
    return WebhookRecorder()


@pytest.fixture
def notifier(settings: Settings, webhooks: WebhookRecorder) -> WebhookNotifier:
    return WebhookNotifier(
        urls=settings.webhook_urls,
        secret=settings.webhook_secret,
        timeout=settings.webhook_timeout,
        transport=httpx.MockTransport(webhooks),
    )


@pytest.fixture
def client(settings: Settings, notifier: WebhookNotifier) -> TestClient:
    app = create_app(settings, notifier)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def page_content_type(client: TestClient) -> dict:
    resp = client.post("/api/admin/content-types", json={
        "name": "page",
        "description": "Landing pages",
        "schema": {"fields": [
            {"id": "uid", "type": "uid", "label": "UID", "required": True},
            {"id": "title", "type": "text", "label": "Title", "required": True},
        ]},
    })
    assert resp.status_code == 201
    return resp.json()["data"]


@pytest.fixture
def hero_slice(client: TestClient) -> dict:
    resp = client.post("/api/admin/slices", json={
        "sliceType": "hero",
        "name": "Hero",
        "schema": {"primary": [
            {"id": "title", "type": "text", "label": "Title", "required": True},
            {"id": "subtitle", "type": "rich_text", "label": "Subtitle"},
        ]},
        "itemsSchema": {"primary": [
            {"id": "label", "type": "text", "label": "Label", "required": True},
        ]},
    })
    assert resp.status_code == 201
    return resp.json()["data"]


def make_document(uid: str, title: str = "Home", content_type: str = "page", status: str = "draft") -> dict:
    return {
        "uid": uid,
        "title": title,
        "contentType": content_type,
        "status": status,
        "data": {
            "title": title,
            "uid": uid,
            "body": [
                {"slice_type": "hero", "primary": {"title": "Welcome"}, "items": [{"label": "Go"}]},
            ],
        },
    }
