"""HTTP tests for the /posts routes."""

import pytest


# --- GET /posts ---

def test_list_posts_empty(client):
    resp = client.get("/posts/")
    assert resp.status_code == 200
    assert resp.json() == []


def test_list_posts_without_trailing_slash(client, created_post):
    resp = client.get("/posts", follow_redirects=False)
    assert resp.status_code == 200
    assert resp.json() == [created_post]


def test_list_posts_keeps_insertion_order(client, sample_post):
    for title in ("first", "second", "third"):
        client.post("/posts/", json={**sample_post, "title": title})
    resp = client.get("/posts/")
    assert resp.status_code == 200
    assert [p["title"] for p in resp.json()] == ["first", "second", "third"]


# --- GET /posts/category/{category} ---

def test_list_by_category_exact_match(client, sample_post):
    client.post("/posts/", json={**sample_post, "title": "news-1", "category": "news"})
    client.post("/posts/", json={**sample_post, "title": "sport", "category": "sport"})
    client.post("/posts/", json={**sample_post, "title": "News", "category": "News"})
    client.post("/posts/", json={**sample_post, "title": "news-2", "category": "news"})

    resp = client.get("/posts/category/news")
    assert resp.status_code == 200
    posts = resp.json()
    assert [p["title"] for p in posts] == ["news-1", "news-2"]
    assert all(p["category"] == "news" for p in posts)


def test_list_by_unknown_category_is_empty(client, created_post):
    resp = client.get("/posts/category/nothing-here")
    assert resp.status_code == 200
    assert resp.json() == []


# --- GET /posts/{id} ---

def test_get_post_after_create(client, created_post):
    resp = client.get(f"/posts/{created_post['id']}")
    assert resp.status_code == 200
    assert resp.json() == created_post


def test_get_post_not_found(client):
    resp = client.get("/posts/nonexistent-id")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Post not found"}


# --- POST /posts ---

def test_create_post(client, sample_post):
    resp = client.post("/posts/", json=sample_post)
    assert resp.status_code == 201
    body = resp.json()
    post_id = body.pop("id")
    assert isinstance(post_id, str) and post_id
    assert body == sample_post


def test_create_post_with_comments(client, sample_post):
    payload = {**sample_post, "comments": [{"author": "X", "content": "Y"}]}
    resp = client.post("/posts/", json=payload)
    assert resp.status_code == 201
    assert resp.json()["comments"] == [{"author": "X", "content": "Y"}]


def test_create_posts_get_distinct_ids(client, sample_post):
    ids = {client.post("/posts/", json=sample_post).json()["id"] for _ in range(5)}
    assert len(ids) == 5


def test_create_post_missing_fields(client):
    resp = client.post("/posts/", json={"title": "A"})
    assert resp.status_code == 400
    assert resp.json() == {"message": "Missing field."}
    assert client.get("/posts/").json() == []


def test_create_post_empty_string_counts_as_missing(client, sample_post):
    resp = client.post("/posts/", json={**sample_post, "image": ""})
    assert resp.status_code == 400
    assert resp.json() == {"message": "Missing field."}


def test_create_post_null_comments_counts_as_missing(client, sample_post):
    resp = client.post("/posts/", json={**sample_post, "comments": None})
    assert resp.status_code == 400


def test_create_post_without_body(client):
    resp = client.post("/posts/")
    assert resp.status_code == 400
    assert resp.json() == {"message": "Missing field."}


@pytest.mark.parametrize(
    "field, value",
    [("title", 0), ("title", False), ("category", ""), ("comments", ""), ("comments", 0)],
)
def test_create_post_falsy_values_count_as_missing(client, sample_post, field, value):
    resp = client.post("/posts/", json={**sample_post, field: value})
    assert resp.status_code == 400
    assert resp.json() == {"message": "Missing field."}
    assert client.get("/posts/").json() == []


def test_create_post_without_trailing_slash(client, sample_post):
    resp = client.post("/posts", json=sample_post, follow_redirects=False)
    assert resp.status_code == 201
    assert resp.json()["title"] == "A"
    assert len(client.get("/posts", follow_redirects=False).json()) == 1


def test_create_post_wrong_type_is_framework_error(client, sample_post):
    resp = client.post("/posts/", json={**sample_post, "comments": "not a list"})
    assert resp.status_code == 422


# --- POST /posts/{id}/comments ---

def test_add_comment(client, created_post):
    post_id = created_post["id"]
    resp = client.post(f"/posts/{post_id}/comments", json={"author": "X", "content": "Y"})
    assert resp.status_code == 201
    assert resp.json() == {"author": "X", "content": "Y"}

    post = client.get(f"/posts/{post_id}").json()
    assert post["comments"] == [{"author": "X", "content": "Y"}]


def test_add_comment_leaves_other_posts_alone(client, sample_post):
    first = client.post("/posts/", json=sample_post).json()
    second = client.post("/posts/", json=sample_post).json()

    client.post(f"/posts/{first['id']}/comments", json={"author": "X", "content": "Y"})

    assert len(client.get(f"/posts/{first['id']}").json()["comments"]) == 1
    assert client.get(f"/posts/{second['id']}").json()["comments"] == []


def test_add_comment_missing_field(client, created_post):
    resp = client.post(f"/posts/{created_post['id']}/comments", json={"author": "X"})
    assert resp.status_code == 400
    assert resp.json() == {"message": "Missing field."}
    assert client.get(f"/posts/{created_post['id']}").json()["comments"] == []


@pytest.mark.parametrize("body", [{"author": 0, "content": "Y"}, {"author": "X", "content": False}])
def test_add_comment_falsy_values_count_as_missing(client, created_post, body):
    resp = client.post(f"/posts/{created_post['id']}/comments", json=body)
    assert resp.status_code == 400
    assert resp.json() == {"message": "Missing field."}


def test_add_comment_unknown_post(client, created_post):
    resp = client.post("/posts/unknown/comments", json={"author": "X", "content": "Y"})
    assert resp.status_code == 404
    assert resp.json() == {"message": "Post not found"}
    assert client.get("/posts/").json() == [created_post]


def test_add_comment_checks_fields_before_lookup(client):
    resp = client.post("/posts/unknown/comments", json={"content": "Y"})
    assert resp.status_code == 400


# --- PATCH /posts/{id} ---

def test_update_post_single_field(client, sample_post):
    payload = {**sample_post, "comments": [{"author": "X", "content": "Y"}]}
    created = client.post("/posts/", json=payload).json()

    resp = client.patch(f"/posts/{created['id']}", json={"title": "New"})
    assert resp.status_code == 200
    assert resp.json() == {**created, "title": "New"}
    assert client.get(f"/posts/{created['id']}").json() == {**created, "title": "New"}


def test_update_post_ignores_falsy_values(client, created_post):
    resp = client.patch(
        f"/posts/{created_post['id']}",
        json={"title": "", "image": "new-image", "description": None},
    )
    assert resp.status_code == 200
    assert resp.json() == {**created_post, "image": "new-image"}


def test_update_post_ignores_zero_and_false(client, created_post):
    resp = client.patch(
        f"/posts/{created_post['id']}",
        json={"title": 0, "category": False, "comments": ""},
    )
    assert resp.status_code == 200
    assert resp.json() == created_post


def test_update_post_replaces_comments(client, created_post):
    post_id = created_post["id"]
    client.post(f"/posts/{post_id}/comments", json={"author": "X", "content": "Y"})

    resp = client.patch(f"/posts/{post_id}", json={"comments": [{"author": "Z", "content": "W"}]})
    assert resp.json()["comments"] == [{"author": "Z", "content": "W"}]

    resp = client.patch(f"/posts/{post_id}", json={"comments": []})
    assert resp.json()["comments"] == []


def test_update_post_keeps_position(client, sample_post):
    ids = [client.post("/posts/", json={**sample_post, "title": t}).json()["id"] for t in "abc"]
    client.patch(f"/posts/{ids[1]}", json={"title": "B"})
    assert [p["title"] for p in client.get("/posts/").json()] == ["a", "B", "c"]


def test_update_post_not_found(client):
    resp = client.patch("/posts/unknown", json={"title": "New"})
    assert resp.status_code == 404
    assert resp.json() == {"message": "Post not found"}


# --- DELETE /posts/{id} ---

def test_delete_post(client, created_post):
    resp = client.delete(f"/posts/{created_post['id']}")
    assert resp.status_code == 204
    assert resp.content == b""

    resp = client.get(f"/posts/{created_post['id']}")
    assert resp.status_code == 404


def test_delete_post_preserves_order(client, sample_post):
    ids = [client.post("/posts/", json={**sample_post, "title": t}).json()["id"] for t in "abcd"]
    client.delete(f"/posts/{ids[1]}")
    assert [p["title"] for p in client.get("/posts/").json()] == ["a", "c", "d"]


def test_delete_post_not_found(client):
    resp = client.delete("/posts/unknown")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Post not found"}


def test_apps_do_not_share_posts(client, created_post):
    from fastapi.testclient import TestClient
    from post_store_api.app.main import create_app

    with TestClient(create_app()) as other:
        assert other.get("/posts/").json() == []
