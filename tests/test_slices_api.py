from fastapi.testclient import TestClient

from conftest import WEBHOOK_SECRET, WEBHOOK_URLS


def test_create_slice_sends_created_webhook(client: TestClient, hero_slice: dict, webhooks):
    assert hero_slice["sliceType"] == "hero"
    assert hero_slice["itemsSchema"]["primary"][0]["id"] == "label"

    assert webhooks.events == ["slice.created", "slice.created"]
    assert sorted(str(request.url) for request in webhooks.requests) == sorted(WEBHOOK_URLS)
    assert all(request.headers["x-webhook-secret"] == WEBHOOK_SECRET for request in webhooks.requests)
    assert webhooks.payloads[0]["data"]["sliceType"] == "hero"


def test_duplicate_slice_is_conflict_without_webhook(client: TestClient, hero_slice: dict, webhooks):
    webhooks.requests.clear()

    resp = client.post("/api/admin/slices", json={
        "sliceType": "hero",
        "name": "Hero again",
        "schema": {"primary": []},
    })

    assert resp.status_code == 409
    assert webhooks.requests == []


def test_invalid_slice_schema_is_rejected(client: TestClient, webhooks):
    resp = client.post("/api/admin/slices", json={
        "sliceType": "cta",
        "name": "CTA",
        "schema": {"primary": [{"id": "link", "type": "uid", "label": "Link"}]},
    })

    assert resp.status_code == 400
    assert webhooks.requests == []
    assert client.get("/api/slices/cta").status_code == 404


def test_public_slice_reads(client: TestClient, hero_slice: dict):
    listed = client.get("/api/slices")
    by_content_type = client.get("/api/slices?contentType=page")
    single = client.get("/api/slices/hero")

    assert [s["sliceType"] for s in listed.json()["data"]] == ["hero"]
    assert [s["sliceType"] for s in by_content_type.json()["data"]] == ["hero"]
    assert single.json()["data"]["name"] == "Hero"


def test_update_slice_sends_updated_webhook(client: TestClient, hero_slice: dict, webhooks):
    webhooks.requests.clear()

    resp = client.put("/api/admin/slices/hero", json={"name": "Big hero"})

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["name"] == "Big hero"
    assert data["schema"] == hero_slice["schema"]
    assert webhooks.events == ["slice.updated", "slice.updated"]
    assert webhooks.payloads[0]["data"]["name"] == "Big hero"


def test_update_missing_slice_is_not_found(client: TestClient, webhooks):
    resp = client.put("/api/admin/slices/ghost", json={"name": "Ghost"})

    assert resp.status_code == 404
    assert webhooks.requests == []


def test_delete_slice_sends_one_deleted_event_per_url(client: TestClient, hero_slice: dict, webhooks):
    webhooks.requests.clear()
    webhooks.status_code = 500

    resp = client.delete("/api/admin/slices/hero")

    assert resp.status_code == 204
    assert webhooks.events == ["slice.deleted", "slice.deleted"]
    assert sorted(str(request.url) for request in webhooks.requests) == sorted(WEBHOOK_URLS)
    assert all(payload["data"] == {"sliceType": "hero"} for payload in webhooks.payloads)
    # Неудачная доставка не откатывает удаление
    assert client.get("/api/admin/slices/hero").status_code == 404


def test_delete_missing_slice_sends_nothing(client: TestClient, webhooks):
    resp = client.delete("/api/admin/slices/ghost")

    assert resp.status_code == 404
    assert webhooks.requests == []


def test_validate_slice_data(client: TestClient, hero_slice: dict):
    valid = client.post("/api/admin/slices/hero/validate", json={
        "data": {"primary": {"title": "Hello"}, "items": [{"label": "One"}]},
    })
    missing_title = client.post("/api/admin/slices/hero/validate", json={
        "data": {"primary": {"title": ""}},
    })
    bad_item = client.post("/api/admin/slices/hero/validate", json={
        "data": {"primary": {"title": "Hello"}, "items": [{"label": "One"}, {}]},
    })

    assert valid.json() == {"success": True, "valid": True}
    assert missing_title.json()["valid"] is False
    assert bad_item.json()["valid"] is False


def test_validate_accepts_bare_slice_data(client: TestClient, hero_slice: dict):
    resp = client.post("/api/admin/slices/hero/validate", json={"primary": {"title": "Hello"}})

    assert resp.status_code == 200
    assert resp.json()["valid"] is True


def test_validate_unknown_slice_is_not_found(client: TestClient):
    resp = client.post("/api/admin/slices/ghost/validate", json={"data": {"primary": {}}})

    assert resp.status_code == 404


def test_create_rejects_empty_items_schema(client: TestClient, webhooks):
    resp = client.post("/api/admin/slices", json={
        "sliceType": "cta",
        "name": "CTA",
        "schema": {"primary": []},
        "itemsSchema": {},
    })

    assert resp.status_code == 400
    assert webhooks.requests == []
    assert client.get("/api/slices/cta").status_code == 404


def test_update_rejects_empty_schema(client: TestClient, hero_slice: dict, webhooks):
    webhooks.requests.clear()

    resp = client.put("/api/admin/slices/hero", json={"schema": {}})

    assert resp.status_code == 400
    assert webhooks.requests == []
    assert client.get("/api/slices/hero").json()["data"]["schema"] == hero_slice["schema"]


def test_update_rejects_malformed_schemas(client: TestClient, hero_slice: dict, webhooks):
    webhooks.requests.clear()

    bad_type = client.put("/api/admin/slices/hero", json={
        "schema": {"primary": [{"id": "title", "type": "uid", "label": "Title"}]},
    })
    bad_items = client.put("/api/admin/slices/hero", json={"itemsSchema": {"items": []}})
    empty_items = client.put("/api/admin/slices/hero", json={"itemsSchema": {}})

    assert bad_type.status_code == 400
    assert bad_items.status_code == 400
    assert empty_items.status_code == 400
    assert webhooks.requests == []
    stored = client.get("/api/slices/hero").json()["data"]
    assert stored["itemsSchema"] == hero_slice["itemsSchema"]


def test_update_with_null_items_schema_clears_it(client: TestClient, hero_slice: dict):
    resp = client.put("/api/admin/slices/hero", json={"itemsSchema": None})

    assert resp.status_code == 200
    assert resp.json()["data"]["itemsSchema"] is None
