from fastapi.testclient import TestClient

from conftest import make_document


def test_create_document_and_read_through_both_surfaces(client: TestClient, page_content_type: dict, hero_slice: dict):
    resp = client.post("/api/admin/documents", json=make_document("home"))

    assert resp.status_code == 201
    created = resp.json()["data"]
    assert created["status"] == "draft"
    assert created["publishedAt"] is None
    assert created["data"]["body"][0]["slice_type"] == "hero"

    assert client.get("/api/documents/home").status_code == 404
    assert client.get("/api/admin/documents/home").status_code == 404
    assert client.get("/api/admin/documents/home?draft=true").status_code == 200

    published = client.post("/api/admin/documents/home/publish").json()["data"]
    assert published["status"] == "published"
    assert published["publishedAt"] is not None

    public = client.get("/api/documents/home")
    assert public.status_code == 200
    assert public.json()["data"]["data"]["body"][0]["primary"] == {"title": "Welcome"}


def test_publish_timestamps(client: TestClient, page_content_type: dict):
    client.post("/api/admin/documents", json=make_document("home"))

    first = client.post("/api/admin/documents/home/publish").json()["data"]["publishedAt"]
    again = client.post("/api/admin/documents/home/publish").json()["data"]["publishedAt"]
    assert again == first

    unpublished = client.post("/api/admin/documents/home/unpublish").json()["data"]
    assert unpublished["status"] == "draft"
    assert unpublished["publishedAt"] is None

    republished = client.post("/api/admin/documents/home/publish").json()["data"]["publishedAt"]
    assert republished is not None


def test_created_published_has_timestamp(client: TestClient, page_content_type: dict):
    resp = client.post("/api/admin/documents", json=make_document("live", status="published"))

    assert resp.json()["data"]["publishedAt"] is not None


def test_duplicate_uid_is_conflict(client: TestClient, page_content_type: dict):
    client.post("/api/admin/documents", json=make_document("home"))

    resp = client.post("/api/admin/documents", json=make_document("home", title="Other"))

    assert resp.status_code == 409
    stored = client.get("/api/admin/documents/home?draft=true").json()["data"]
    assert stored["title"] == "Home"


def test_missing_content_type_is_rejected_without_write(client: TestClient):
    resp = client.post("/api/admin/documents", json=make_document("home", content_type="nope"))

    assert resp.status_code == 400
    assert resp.json()["error"]["message"] == 'Content type "nope" does not exist'
    assert client.get("/api/admin/documents/home?draft=true").status_code == 404


def test_malformed_body_is_rejected(client: TestClient, page_content_type: dict):
    payload = make_document("home")
    payload["data"]["body"] = [{"slice_type": "hero", "primary": "text"}]

    resp = client.post("/api/admin/documents", json=payload)

    assert resp.status_code == 400
    assert client.get("/api/admin/documents/home?draft=true").status_code == 404


def test_list_filters_and_pagination(client: TestClient, page_content_type: dict):
    client.post("/api/admin/documents", json=make_document("home", title="Home", status="published"))
    client.post("/api/admin/documents", json=make_document("about", title="About us", status="published"))
    client.post("/api/admin/documents", json=make_document("draft", title="About draft"))

    public = client.get("/api/documents?type=page").json()
    assert public["meta"]["total"] == 2
    assert all(doc["status"] == "published" for doc in public["data"])

    # Публичный API игнорирует draft=true
    forced = client.get("/api/documents?draft=true").json()
    assert forced["meta"]["total"] == 2

    admin = client.get("/api/admin/documents?draft=true").json()
    assert admin["meta"]["total"] == 3

    searched = client.get("/api/admin/documents?draft=true&search=ABOUT").json()
    assert sorted(doc["uid"] for doc in searched["data"]) == ["about", "draft"]

    paged = client.get("/api/admin/documents?draft=true&page=2&limit=2").json()
    assert len(paged["data"]) == 1
    assert paged["meta"] == {"page": 2, "limit": 2, "total": 3, "pages": 2}

    other_type = client.get("/api/documents?type=article").json()
    assert other_type["data"] == []
    assert other_type["meta"]["pages"] == 0


def test_update_document(client: TestClient, page_content_type: dict):
    client.post("/api/admin/documents", json=make_document("home"))

    resp = client.put("/api/admin/documents/home", json={
        "title": "New home",
        "contentType": "landing",
        "status": "published",
    })

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["title"] == "New home"
    assert data["contentType"] == "landing"
    assert data["publishedAt"] is not None


def test_update_validates_data(client: TestClient, page_content_type: dict):
    client.post("/api/admin/documents", json=make_document("home"))

    resp = client.put("/api/admin/documents/home", json={"data": {"title": "Home", "uid": "home"}})

    assert resp.status_code == 400


def test_delete_document(client: TestClient, page_content_type: dict):
    client.post("/api/admin/documents", json=make_document("home"))

    assert client.delete("/api/admin/documents/home").status_code == 204
    assert client.get("/api/admin/documents/home?draft=true").status_code == 404
    assert client.delete("/api/admin/documents/home").status_code == 404


def test_missing_document_actions_are_not_found(client: TestClient):
    assert client.post("/api/admin/documents/ghost/publish").status_code == 404
    assert client.put("/api/admin/documents/ghost", json={"title": "x"}).status_code == 404
