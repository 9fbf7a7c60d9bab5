import asyncio
import json

import httpx

from app.domains.webhooks.notifier import WebhookNotifier


def _notifier(handler, urls=("http://hooks.test/a", "http://hooks.test/b")):
    return WebhookNotifier(
        urls=list(urls),
        secret="s3cret",
        timeout=1.0,
        transport=httpx.MockTransport(handler),
    )


def test_notify_posts_payload_to_every_url():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200)

    deliveries = asyncio.run(_notifier(handler).notify("slice.created", {"sliceType": "hero"}))

    assert sorted(str(request.url) for request in seen) == ["http://hooks.test/a", "http://hooks.test/b"]
    assert all(delivery.ok for delivery in deliveries)
    for request in seen:
        body = json.loads(request.content)
        assert request.headers["x-webhook-secret"] == "s3cret"
        assert body["event"] == "slice.created"
        assert body["data"] == {"sliceType": "hero"}
        assert "timestamp" in body


def test_one_failing_url_does_not_affect_others():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/a":
            return httpx.Response(500, text="boom")
        return httpx.Response(204)

    deliveries = asyncio.run(_notifier(handler).notify("slice.deleted", {"sliceType": "hero"}))
    by_url = {delivery.url: delivery for delivery in deliveries}

    assert not by_url["http://hooks.test/a"].ok
    assert by_url["http://hooks.test/a"].status_code == 500
    assert by_url["http://hooks.test/b"].ok


def test_transport_errors_are_reported_not_raised():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    deliveries = asyncio.run(_notifier(handler).notify("slice.updated", {}))

    assert [delivery.ok for delivery in deliveries] == [False, False]
    assert all(delivery.error for delivery in deliveries)


def test_timeouts_are_reported_not_raised():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    deliveries = asyncio.run(_notifier(handler, urls=["http://hooks.test/a"]).notify("slice.updated", {}))

    assert len(deliveries) == 1
    assert not deliveries[0].ok


def test_no_urls_means_no_requests():
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    assert asyncio.run(_notifier(handler, urls=[]).notify("slice.created", {})) == []


def test_unexpected_errors_become_failed_deliveries():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/a":
            raise ValueError("broken handler")
        return httpx.Response(200)

    deliveries = asyncio.run(_notifier(handler).notify("slice.created", {}))
    by_url = {delivery.url: delivery for delivery in deliveries}

    assert not by_url["http://hooks.test/a"].ok
    assert "broken handler" in by_url["http://hooks.test/a"].error
    assert by_url["http://hooks.test/b"].ok
