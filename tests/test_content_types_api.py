from fastapi.testclient import TestClient

from conftest import make_document


def test_create_and_get_content_type(client: TestClient, page_content_type: dict):
    assert page_content_type["name"] == "page"
    assert page_content_type["schema"]["fields"][0]["type"] == "uid"

    resp = client.get("/api/admin/content-types/page")
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["description"] == "Landing pages"
    assert data["documents"] == []


def test_duplicate_name_is_conflict(client: TestClient, page_content_type: dict):
    resp = client.post("/api/admin/content-types", json={
        "name": "page",
        "schema": {"fields": []},
    })

    assert resp.status_code == 409
    assert resp.json()["error"]["status"] == 409


def test_invalid_schema_is_rejected(client: TestClient):
    resp = client.post("/api/admin/content-types", json={
        "name": "article",
        "schema": {"fields": [{"id": "cover", "type": "image", "label": "Cover"}]},
    })

    assert resp.status_code == 400
    assert "Invalid content_type schema" in resp.json()["error"]["message"]
    assert client.get("/api/admin/content-types/article").status_code == 404


def test_missing_request_fields_report_details(client: TestClient):
    resp = client.post("/api/admin/content-types", json={"description": "no name"})

    assert resp.status_code == 400
    error = resp.json()["error"]
    assert error["message"] == "Validation failed"
    assert error["details"]


def test_list_includes_document_counts(client: TestClient, page_content_type: dict):
    client.post("/api/admin/documents", json=make_document("home"))
    client.post("/api/admin/documents", json=make_document("about", title="About"))

    resp = client.get("/api/content-types")

    assert resp.status_code == 200
    counts = {ct["name"]: ct["documentCount"] for ct in resp.json()["data"]}
    assert counts == {"page": 2}


def test_update_content_type(client: TestClient, page_content_type: dict):
    resp = client.put("/api/admin/content-types/page", json={"description": "Pages"})

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["description"] == "Pages"
    assert data["schema"] == page_content_type["schema"]


def test_update_rejects_invalid_schema(client: TestClient, page_content_type: dict):
    resp = client.put("/api/admin/content-types/page", json={"schema": {"fields": "nope"}})

    assert resp.status_code == 400


def test_update_missing_content_type(client: TestClient):
    resp = client.put("/api/admin/content-types/ghost", json={"description": "x"})

    assert resp.status_code == 404


def test_delete_leaves_documents(client: TestClient, page_content_type: dict):
    client.post("/api/admin/documents", json=make_document("home"))

    resp = client.delete("/api/admin/content-types/page")
    assert resp.status_code == 204
    assert client.get("/api/admin/content-types/page").status_code == 404
    assert client.get("/api/admin/documents/home?draft=true").status_code == 200

    assert client.delete("/api/admin/content-types/page").status_code == 404


def test_with_documents_returns_published_page(client: TestClient, page_content_type: dict):
    client.post("/api/admin/documents", json=make_document("draft-page", title="Draft"))
    for uid in ("one", "two", "three"):
        client.post("/api/admin/documents", json=make_document(uid, title=uid, status="published"))

    resp = client.get("/api/content-types/page?withDocuments=true&page=1&limit=2")

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["contentType"]["name"] == "page"
    assert len(body["documents"]) == 2
    assert all(doc["status"] == "published" for doc in body["documents"])
    assert body["meta"] == {"page": 1, "limit": 2, "total": 3, "pages": 2}


def test_public_detail_hides_drafts(client: TestClient, page_content_type: dict):
    client.post("/api/admin/documents", json=make_document("draft-page", title="Draft"))
    client.post("/api/admin/documents", json=make_document("live", title="Live", status="published"))

    public_docs = client.get("/api/content-types/page").json()["data"]["documents"]
    admin_docs = client.get("/api/admin/content-types/page").json()["data"]["documents"]

    assert [doc["uid"] for doc in public_docs] == ["live"]
    assert sorted(doc["uid"] for doc in admin_docs) == ["draft-page", "live"]


def test_public_surface_is_read_only(client: TestClient):
    resp = client.post("/api/content-types", json={"name": "x", "schema": {"fields": []}})

    assert resp.status_code == 405


def test_update_rejects_empty_schema(client: TestClient, page_content_type: dict):
    resp = client.put("/api/admin/content-types/page", json={"schema": {}})

    assert resp.status_code == 400
    stored = client.get("/api/admin/content-types/page").json()["data"]
    assert stored["schema"] == page_content_type["schema"]
