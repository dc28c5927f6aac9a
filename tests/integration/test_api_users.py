"""
Integration tests for the /users endpoints.
Runs the full FastAPI app against an in-memory DI container.
"""
import pytest

pytestmark = pytest.mark.integration


def _create(client, email="a@b.com", name="Ann", password="12345678"):
    return client.post("/users", json={"email": email, "name": name, "password": password})


class TestUsersAPI:
    """Tests for /users endpoints"""

    def test_create_user(self, api_client):
        response = _create(api_client, email="  A@B.com ")

        assert response.status_code == 201
        data = response.json()
        assert data["email"] == "a@b.com"
        assert data["name"] == "Ann"
        assert "password" not in data
        assert "createdAt" in data

    def test_duplicate_email_returns_409(self, api_client):
        _create(api_client)
        response = _create(api_client, email="A@B.COM")

        assert response.status_code == 409
        body = response.json()
        assert body["code"] == "CONFLICT"
        assert body["message"] == "Email is already in use"
        assert body["path"] == "/users"
        assert "timestamp" in body

    def test_invalid_email_returns_400_with_field_errors(self, api_client):
        response = _create(api_client, email="not-an-email")

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "VALIDATION_ERROR"
        assert body["errors"] == [{"field": "email", "message": "Invalid email format"}]

    def test_request_shape_error_returns_400(self, api_client):
        response = api_client.post("/users", json={"email": "a@b.com", "name": "Ann", "password": "short"})

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "VALIDATION_ERROR"
        assert body["errors"][0]["field"] == "password"

    def test_get_user_twice_is_identical(self, api_client):
        user_id = _create(api_client).json()["id"]

        first = api_client.get(f"/users/{user_id}")
        second = api_client.get(f"/users/{user_id}")

        assert first.status_code == 200
        assert first.json() == second.json()

    def test_get_unknown_user_returns_404(self, api_client):
        response = api_client.get("/users/missing")

        assert response.status_code == 404
        assert response.json()["code"] == "ENTITY_NOT_FOUND"

    def test_head_user(self, api_client):
        user_id = _create(api_client).json()["id"]

        assert api_client.head(f"/users/{user_id}").status_code == 200
        assert api_client.head("/users/missing").status_code == 404

    def test_list_users_with_paging(self, api_client):
        for index in range(3):
            _create(api_client, email=f"user{index}@b.com")

        response = api_client.get("/users", params={"limit": 2, "offset": 0})

        assert response.status_code == 200
        assert len(response.json()["users"]) == 2

    @pytest.mark.parametrize("params", [{"limit": 0}, {"limit": 101}, {"offset": -1}])
    def test_list_users_rejects_bad_paging(self, api_client, params):
        assert api_client.get("/users", params=params).status_code == 400

    def test_batch_lookup_omits_unknown(self, api_client):
        user_id = _create(api_client).json()["id"]

        response = api_client.post("/users/batch", json={"ids": [user_id, "missing"]})

        assert response.status_code == 200
        assert [u["id"] for u in response.json()] == [user_id]

    def test_patch_user(self, api_client):
        user_id = _create(api_client).json()["id"]

        response = api_client.patch(f"/users/{user_id}", json={"name": "Annie"})

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Annie"
        assert data["email"] == "a@b.com"
        assert data["updatedAt"] is not None

    def test_patch_email_to_taken_returns_409(self, api_client):
        _create(api_client, email="taken@b.com")
        user_id = _create(api_client).json()["id"]

        response = api_client.patch(f"/users/{user_id}", json={"email": "taken@b.com"})

        assert response.status_code == 409

    def test_delete_user(self, api_client):
        user_id = _create(api_client).json()["id"]

        assert api_client.delete(f"/users/{user_id}").status_code == 204
        assert api_client.get(f"/users/{user_id}").status_code == 404
        assert api_client.delete(f"/users/{user_id}").status_code == 404


class TestUnknownFields:
    """Request bodies with fields outside the DTO are rejected"""

    def test_create_with_unknown_field_returns_400(self, api_client):
        response = api_client.post(
            "/users",
            json={"email": "a@b.com", "name": "Ann", "password": "12345678", "role": "admin"},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "VALIDATION_ERROR"
        assert body["errors"][0]["field"] == "role"
        assert api_client.get("/users").json()["users"] == []

    def test_patch_with_unknown_field_returns_400(self, api_client):
        user_id = _create(api_client).json()["id"]

        response = api_client.patch(f"/users/{user_id}", json={"isAdmin": True})

        assert response.status_code == 400
        assert api_client.get(f"/users/{user_id}").json()["name"] == "Ann"
