"""HTTP-level tests for the /api blueprint."""
from datetime import datetime

import pytest


def test_create_then_get_end_to_end(client, article_payload):
    r = client.post("/api/articles", json=article_payload)
    assert r.status_code == 201
    created = r.get_json()
    assert isinstance(created["id"], int)
    datetime.fromisoformat(created["createdAt"])
    assert "category" not in created

    r = client.get("/api/articles/t")
    assert r.status_code == 200
    got = r.get_json()
    assert {k: got[k] for k in created} == created
    assert got["category"] == {"id": 1, "name": "Technology", "slug": "technology"}


def test_get_missing_article(client):
    r = client.get("/api/articles/does-not-exist")
    assert r.status_code == 404
    assert r.get_json() == {"message": "Article not found"}


def test_list_articles_newest_first(client, article_payload):
    client.post("/api/articles", json=article_payload)
    items = client.get("/api/articles").get_json()
    assert items[0]["slug"] == "t"
    stamps = [i["createdAt"] for i in items]
    assert stamps == sorted(stamps, reverse=True)
    assert all("category" in i for i in items)


def test_list_articles_by_category(client):
    items = client.get("/api/articles?category=travel").get_json()
    assert [i["slug"] for i in items] == ["hidden-gems-kyoto"]
    assert client.get("/api/articles?category=missing").get_json() == []


def test_empty_category_param_lists_everything(client):
    assert len(client.get("/api/articles?category=").get_json()) == 4


def test_create_with_empty_title(client, article_payload):
    article_payload["title"] = ""
    r = client.post("/api/articles", json=article_payload)
    assert r.status_code == 400
    body = r.get_json()
    assert body["field"] == "title"
    assert body["message"]


def test_create_with_bad_category_id(client, article_payload):
    article_payload["categoryId"] = "first"
    r = client.post("/api/articles", json=article_payload)
    assert r.status_code == 400
    assert r.get_json()["field"] == "categoryId"


def test_create_with_malformed_body(client):
    r = client.post("/api/articles", data="{not json", content_type="application/json")
    assert r.status_code == 400
    assert r.get_json() == {"message": "Expected a JSON object"}


def test_create_with_dangling_category_is_500(client, article_payload):
    article_payload["categoryId"] = 999
    r = client.post("/api/articles", json=article_payload)
    assert r.status_code == 500
    assert r.get_json() == {"message": "Internal Server Error"}
    # later requests are unaffected
    assert client.get("/api/categories").status_code == 200


def test_create_with_duplicate_slug_is_500(client, article_payload):
    assert client.post("/api/articles", json=article_payload).status_code == 201
    assert client.post("/api/articles", json=article_payload).status_code == 500


def test_update_partial(client, article_payload):
    created = client.post("/api/articles", json=article_payload).get_json()
    r = client.put(f"/api/articles/{created['id']}", json={"description": "new"})
    assert r.status_code == 200
    updated = r.get_json()
    assert updated["description"] == "new"
    assert {k: v for k, v in updated.items() if k != "description"} == \
        {k: v for k, v in created.items() if k != "description"}


def test_update_missing_article(client):
    r = client.put("/api/articles/99999", json={"title": "x"})
    assert r.status_code == 404
    assert r.get_json() == {"message": "Article not found"}


def test_update_validation_failure(client):
    r = client.put("/api/articles/1", json={"title": ""})
    assert r.status_code == 400
    assert r.get_json()["field"] == "title"


def test_update_moves_category(client):
    first = client.get("/api/articles/future-of-ai-publishing").get_json()
    client.put(f"/api/articles/{first['id']}", json={"categoryId": 2})
    got = client.get("/api/articles/future-of-ai-publishing").get_json()
    assert got["category"]["slug"] == "design"


def test_delete_article(client, article_payload):
    created = client.post("/api/articles", json=article_payload).get_json()
    r = client.delete(f"/api/articles/{created['id']}")
    assert r.status_code == 204
    assert r.data == b""

    assert client.get("/api/articles/t").status_code == 404
    assert client.delete(f"/api/articles/{created['id']}").status_code == 404
    assert client.put(f"/api/articles/{created['id']}", json={"title": "x"}).status_code == 404


def test_get_by_id(client):
    first = client.get("/api/articles").get_json()[0]
    r = client.get(f"/api/articles/by-id/{first['id']}")
    assert r.status_code == 200
    assert r.get_json() == first
    assert client.get("/api/articles/by-id/99999").status_code == 404


def test_non_integer_id_is_json_404(client):
    r = client.delete("/api/articles/abc")
    assert r.status_code in (404, 405)
    assert "message" in r.get_json()


def test_categories_and_events(client):
    cats = client.get("/api/categories").get_json()
    assert [c["slug"] for c in cats] == ["technology", "design", "culture", "travel"]
    events = client.get("/api/events").get_json()
    assert events[0] == {"id": 1, "title": "Tech Summit 2024", "date": "Oct 15, 2024",
                         "location": "San Francisco, CA"}


def test_healthz(client):
    assert client.get("/healthz").get_json() == {"ok": True}


@pytest.mark.parametrize("category_id", ["--5", "²", "1-2"])
def test_create_with_malformed_category_id_string(client, article_payload, category_id):
    article_payload["categoryId"] = category_id
    r = client.post("/api/articles", json=article_payload)
    assert r.status_code == 400
    assert r.get_json() == {"message": "categoryId must be an integer", "field": "categoryId"}


def test_update_with_malformed_category_id_string(client):
    r = client.put("/api/articles/1", json={"categoryId": "--1"})
    assert r.status_code == 400
    assert r.get_json()["field"] == "categoryId"


def test_slug_round_trips_unchanged(client, article_payload):
    article_payload["slug"] = " t "
    r = client.post("/api/articles", json=article_payload)
    assert r.status_code == 400
    assert r.get_json()["field"] == "slug"

    article_payload["slug"] = "t-2"
    created = client.post("/api/articles", json=article_payload).get_json()
    assert created["slug"] == "t-2"
    assert client.get("/api/articles/t-2").get_json()["slug"] == "t-2"
