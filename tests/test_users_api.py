from task_manager.models import User

from .conftest import PASSWORD


def test_register_and_login(client, db):
    response = client.post(
        "/api/users",
        json={"email": "carol@example.com", "first_name": "Carol", "password": "qwerty"},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["email"] == "carol@example.com"
    assert "password" not in body and "password_digest" not in body

    stored = db.query(User).filter(User.email == "carol@example.com").one()
    assert stored.password_digest != "qwerty"

    login = client.post("/api/login", json={"username": "carol@example.com", "password": "qwerty"})
    assert login.status_code == 200
    token = login.json()["access_token"]

    users = client.get("/api/users", headers={"Authorization": f"Bearer {token}"})
    assert users.status_code == 200
    assert users.headers["X-Total-Count"] == "1"


def test_login_with_wrong_password(client, user):
    response = client.post("/api/login", json={"username": user.email, "password": "wrong"})

    assert response.status_code == 401


def test_register_with_invalid_email(client):
    response = client.post("/api/users", json={"email": "not-an-email", "password": "qwerty"})

    assert response.status_code == 400


def test_duplicate_email_conflicts(client, user):
    response = client.post("/api/users", json={"email": user.email, "password": "qwerty"})

    assert response.status_code == 409


def test_show(client, auth_headers, user):
    response = client.get(f"/api/users/{user.id}", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["first_name"] == "Alice"
    assert client.get("/api/users/999", headers=auth_headers).status_code == 404


def test_update_own_account(client, auth_headers, user, db):
    response = client.put(
        f"/api/users/{user.id}",
        json={"last_name": "Liddell", "password": "new-password"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.json()["last_name"] == "Liddell"
    assert response.json()["first_name"] == "Alice"

    old = client.post("/api/login", json={"username": user.email, "password": PASSWORD})
    new = client.post("/api/login", json={"username": user.email, "password": "new-password"})
    assert old.status_code == 401
    assert new.status_code == 200


def test_update_with_null_email(client, auth_headers, user):
    response = client.put(f"/api/users/{user.id}", json={"email": None}, headers=auth_headers)

    assert response.status_code == 400


def test_cannot_modify_other_accounts(client, auth_headers, other_user):
    response = client.put(f"/api/users/{other_user.id}", json={"first_name": "Mallory"}, headers=auth_headers)
    assert response.status_code == 403
    assert response.json()["error"] == "FORBIDDEN"

    assert client.delete(f"/api/users/{other_user.id}", headers=auth_headers).status_code == 403


def test_delete_own_account(client, auth_headers, user):
    assert client.delete(f"/api/users/{user.id}", headers=auth_headers).status_code == 204

    # the token no longer maps to a user
    assert client.get("/api/users", headers=auth_headers).status_code == 401


def test_delete_assigned_user_conflicts(client, auth_headers, defaults, user, make_task):
    make_task("Assigned", assignee=user)

    assert client.delete(f"/api/users/{user.id}", headers=auth_headers).status_code == 409
