import sqlite3

from fastapi.testclient import TestClient

from user_management_api.app.main import create_app
from user_management_api.app.repositories.user_repository import InMemoryUserRepository


EMMA = {
    "firstName": "Emma",
    "lastName": "Watson",
    "email": "emma.watson@example.com",
    "dateOfBirth": "1990-04-15",
}


def test_create_user_returns_201_with_assigned_id(client):
    response = client.post("/api/users", json={**EMMA, "id": 77})

    assert response.status_code == 201
    body = response.json()
    assert isinstance(body["id"], int)
    assert body["id"] != 77
    assert {k: body[k] for k in EMMA} == EMMA


def test_create_user_rejects_malformed_body(client):
    response = client.post("/api/users", json={"lastName": "Watson", "email": "x@example.com"})

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Validation failed"
    assert body["status"] == 400
    assert any(error["loc"][-1] == "firstName" for error in body["errors"])


def test_create_user_rejects_bad_date(client):
    response = client.post("/api/users", json={**EMMA, "dateOfBirth": "15/04/1990"})

    assert response.status_code == 400


def test_get_user_by_id(client):
    created = client.post("/api/users", json=EMMA).json()

    response = client.get(f"/api/users/{created['id']}")

    assert response.status_code == 200
    assert response.json() == created


def test_get_missing_user_returns_404_message(client):
    response = client.get("/api/users/1")

    assert response.status_code == 404
    body = response.json()
    assert body["message"] == "User not found with id: 1"
    assert body["status"] == 404
    assert body["path"] == "/api/users/1"


def test_list_users(client):
    assert client.get("/api/users").json() == []

    client.post("/api/users", json=EMMA)
    client.post("/api/users", json={**EMMA, "email": "emma2@example.com", "dateOfBirth": None})

    response = client.get("/api/users")
    assert response.status_code == 200
    users = response.json()
    assert len(users) == 2
    assert users[1]["dateOfBirth"] is None


def test_update_user_replaces_fields(client):
    created = client.post("/api/users", json=EMMA).json()

    response = client.put(
        f"/api/users/{created['id']}",
        json={"firstName": "Emma", "lastName": "Granger", "email": "emma.granger@example.com"},
    )

    assert response.status_code == 200
    assert response.json() == {
        "id": created["id"],
        "firstName": "Emma",
        "lastName": "Granger",
        "email": "emma.granger@example.com",
        "dateOfBirth": None,
    }


def test_update_missing_user_returns_404(client):
    response = client.put("/api/users/5", json=EMMA)

    assert response.status_code == 404
    assert response.json()["message"] == "User not found with id: 5"


def test_update_user_rejects_malformed_body(client):
    created = client.post("/api/users", json=EMMA).json()

    response = client.put(
        f"/api/users/{created['id']}",
        json={"firstName": "Emma", "email": "emma.granger@example.com"},
    )

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Validation failed"
    assert any(error["loc"][-1] == "lastName" for error in body["errors"])
    assert client.get(f"/api/users/{created['id']}").json() == created


def test_id_beyond_integer_range_is_rejected(client):
    too_big = 2**63

    for response in (
        client.get(f"/api/users/{too_big}"),
        client.put(f"/api/users/{too_big}", json=EMMA),
        client.delete(f"/api/users/{too_big}"),
    ):
        assert response.status_code == 400
        assert response.json()["message"] == "Validation failed"

    largest = 2**63 - 1
    response = client.get(f"/api/users/{largest}")
    assert response.status_code == 404
    assert response.json()["message"] == f"User not found with id: {largest}"


def test_delete_user(client):
    created = client.post("/api/users", json=EMMA).json()

    response = client.delete(f"/api/users/{created['id']}")

    assert response.status_code == 204
    assert response.content == b""
    assert client.get(f"/api/users/{created['id']}").status_code == 404


def test_delete_missing_user_returns_404(client):
    response = client.delete("/api/users/9")

    assert response.status_code == 404
    assert response.json()["message"] == "User not found with id: 9"


def test_full_scenario(client):
    created = client.post("/api/users", json=EMMA).json()
    user_id = created["id"]
    assert user_id is not None

    updated = client.put(
        f"/api/users/{user_id}",
        json={**EMMA, "lastName": "Granger", "email": "emma.granger@example.com"},
    ).json()
    assert updated["lastName"] == "Granger"
    assert updated["email"] == "emma.granger@example.com"
    assert updated["dateOfBirth"] == "1990-04-15"

    assert client.delete(f"/api/users/{user_id}").status_code == 204
    response = client.get(f"/api/users/{user_id}")
    assert response.status_code == 404
    assert response.json()["message"] == f"User not found with id: {user_id}"


def test_storage_failure_returns_500():
    class BrokenRepository(InMemoryUserRepository):
        def find_all(self):
            raise sqlite3.OperationalError("database is locked")

    app = create_app(repository=BrokenRepository())
    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get("/api/users")

    assert response.status_code == 500
    assert response.json()["message"] == "Internal server error"


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
