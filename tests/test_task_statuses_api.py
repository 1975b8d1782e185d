def test_index_and_show(client, auth_headers, defaults):
    response = client.get("/api/task_statuses", headers=auth_headers)

    assert response.status_code == 200
    assert response.headers["X-Total-Count"] == "5"
    slugs = [status["slug"] for status in response.json()]
    assert slugs == ["draft", "to_review", "to_be_fixed", "to_publish", "published"]

    draft = defaults["statuses"]["draft"]
    shown = client.get(f"/api/task_statuses/{draft.id}", headers=auth_headers).json()
    assert shown["name"] == "Draft"
    assert shown["slug"] == "draft"


def test_create(client, auth_headers):
    response = client.post(
        "/api/task_statuses",
        json={"name": "Archived", "slug": "archived"},
        headers=auth_headers,
    )

    assert response.status_code == 201
    assert response.json()["slug"] == "archived"
    assert "created_at" in response.json()


def test_create_with_empty_name(client, auth_headers):
    response = client.post(
        "/api/task_statuses",
        json={"name": "", "slug": "empty"},
        headers=auth_headers,
    )

    assert response.status_code == 400


def test_duplicate_slug_conflicts(client, auth_headers):
    payload = {"name": "Archived", "slug": "archived"}
    assert client.post("/api/task_statuses", json=payload, headers=auth_headers).status_code == 201

    response = client.post(
        "/api/task_statuses",
        json={"name": "Archived again", "slug": "archived"},
        headers=auth_headers,
    )

    assert response.status_code == 409
    assert response.json()["error"] == "CONFLICT"


def test_partial_update_keeps_slug(client, auth_headers, defaults):
    draft = defaults["statuses"]["draft"]

    response = client.put(
        f"/api/task_statuses/{draft.id}",
        json={"name": "AnotherName"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.json()["name"] == "AnotherName"
    assert response.json()["slug"] == "draft"


def test_full_update(client, auth_headers, defaults):
    draft = defaults["statuses"]["draft"]

    response = client.put(
        f"/api/task_statuses/{draft.id}",
        json={"name": "ToNewReview", "slug": "to_new_review"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.json()["slug"] == "to_new_review"


def test_update_with_null_slug(client, auth_headers, defaults):
    draft = defaults["statuses"]["draft"]

    response = client.put(f"/api/task_statuses/{draft.id}", json={"slug": None}, headers=auth_headers)

    assert response.status_code == 400


def test_delete(client, auth_headers, defaults):
    published = defaults["statuses"]["published"]

    response = client.delete(f"/api/task_statuses/{published.id}", headers=auth_headers)

    assert response.status_code == 204
    assert client.get(f"/api/task_statuses/{published.id}", headers=auth_headers).status_code == 404


def test_delete_status_in_use_conflicts(client, auth_headers, defaults, make_task):
    make_task("Uses draft", "draft")
    draft = defaults["statuses"]["draft"]

    response = client.delete(f"/api/task_statuses/{draft.id}", headers=auth_headers)

    assert response.status_code == 409
