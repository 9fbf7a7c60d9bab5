from fastapi.testclient import TestClient


def test_draft_document_is_only_visible_to_admin(client: TestClient):
    resp = client.post("/api/admin/content-types", json={
        "name": "page",
        "schema": {"fields": [{"id": "title", "type": "text", "label": "Title", "required": True}]},
    })
    assert resp.status_code == 201

    resp = client.post("/api/admin/documents", json={
        "uid": "home",
        "title": "Home",
        "contentType": "page",
        "data": {"title": "Home", "uid": "home", "body": []},
        "status": "draft",
    })
    assert resp.status_code == 201

    admin = client.get("/api/admin/documents/home?draft=true")
    assert admin.status_code == 200
    assert admin.json()["data"]["status"] == "draft"
    assert admin.json()["data"]["publishedAt"] is None

    public = client.get("/api/documents/home?draft=true")
    assert public.status_code == 404
    assert public.json()["error"]["message"] == "Document not found"


def test_slice_validation_round(client: TestClient):
    resp = client.post("/api/admin/slices", json={
        "sliceType": "hero",
        "name": "Hero",
        "schema": {"primary": [{"id": "title", "type": "text", "label": "Title", "required": True}]},
    })
    assert resp.status_code == 201

    empty = client.post("/api/admin/slices/hero/validate", json={"data": {"primary": {}}})
    filled = client.post("/api/admin/slices/hero/validate", json={"data": {"primary": {"title": "X"}}})

    assert empty.json()["valid"] is False
    assert filled.json()["valid"] is True
