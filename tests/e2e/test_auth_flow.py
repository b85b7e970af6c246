"""End-to-end tests for the register/login/profile flow."""

from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

from quill.config import Settings
from quill.interface.api.app import create_app
from quill.util.jwt import create_token, verify_token
from tests.di import build_test_container

ANA = {"name": "Ana", "email": "ana@x.com", "password": "secret1"}


@pytest.fixture
def client():
    """Create test client backed by in-memory repositories."""
    return TestClient(create_app(build_test_container()))


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def register(client: TestClient, **overrides) -> dict:
    response = client.post("/auth/register", json={**ANA, **overrides})
    assert response.status_code == 201
    return response.json()


class TestRegisterAndLogin:
    """End-to-end tests for registration and login."""

    def test_ana_registers_and_logs_in(self, client):
        """Registration returns user 1; login returns the same user and a valid token."""
        # Act
        registered = client.post("/auth/register", json=ANA)
        logged_in = client.post(
            "/auth/login", json={"email": "ana@x.com", "password": "secret1"}
        )

        # Assert
        assert registered.status_code == 201
        assert registered.json()["user"] == {"id": 1, "name": "Ana", "email": "ana@x.com"}
        assert logged_in.status_code == 200
        body = logged_in.json()
        assert body["user"]["id"] == 1
        payload = verify_token(body["token"], Settings().auth)
        assert payload.sub == "1"
        assert payload.email == "ana@x.com"

    def test_responses_never_include_password_data(self, client):
        registered = client.post("/auth/register", json=ANA)

        assert "secret1" not in registered.text
        assert "password" not in registered.text

    def test_duplicate_email_conflicts(self, client):
        register(client)

        response = client.post(
            "/auth/register", json={**ANA, "name": "Imposter", "password": "other99"}
        )

        assert response.status_code == 409
        assert client.post(
            "/auth/login", json={"email": "ana@x.com", "password": "secret1"}
        ).status_code == 200

    @pytest.mark.parametrize(
        "overrides",
        [
            {"name": ""},
            {"email": "ana"},
            {"password": "12345"},
            {"password": "p" * 73},
        ],
    )
    def test_invalid_registration(self, client, overrides):
        response = client.post("/auth/register", json={**ANA, **overrides})

        assert response.status_code == 422

    def test_wrong_password_and_unknown_email_look_the_same(self, client):
        register(client)

        wrong_password = client.post(
            "/auth/login", json={"email": "ana@x.com", "password": "wrongpass"}
        )
        unknown_email = client.post(
            "/auth/login", json={"email": "bo@x.com", "password": "secret1"}
        )

        assert wrong_password.status_code == 401
        assert unknown_email.status_code == 401
        assert wrong_password.json() == unknown_email.json()

    def test_malformed_login(self, client):
        response = client.post("/auth/login", json={"email": "ana@x.com"})

        assert response.status_code == 422


class TestProfile:
    """End-to-end tests for the profile endpoints and the request gate."""

    def test_get_profile(self, client):
        token = register(client)["token"]

        response = client.get("/auth/profile", headers=bearer(token))

        assert response.status_code == 200
        assert response.json() == {
            "user": {"id": 1, "name": "Ana", "email": "ana@x.com"}
        }

    def test_patch_profile_merges(self, client):
        """Changing the name leaves the email and password as they were."""
        # Arrange
        token = register(client)["token"]

        # Act
        response = client.patch(
            "/auth/profile", json={"name": "Ana Maria"}, headers=bearer(token)
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["user"] == {
            "id": 1,
            "name": "Ana Maria",
            "email": "ana@x.com",
        }
        assert client.post(
            "/auth/login", json={"email": "ana@x.com", "password": "secret1"}
        ).status_code == 200

    def test_patch_password(self, client):
        token = register(client)["token"]

        response = client.patch(
            "/auth/profile", json={"password": "newpass1"}, headers=bearer(token)
        )

        assert response.status_code == 200
        assert client.post(
            "/auth/login", json={"email": "ana@x.com", "password": "secret1"}
        ).status_code == 401
        assert client.post(
            "/auth/login", json={"email": "ana@x.com", "password": "newpass1"}
        ).status_code == 200

    def test_patch_email_taken(self, client):
        token = register(client)["token"]
        register(client, name="Bo", email="bo@x.com")

        response = client.patch(
            "/auth/profile",
            json={"name": "Changed", "email": "bo@x.com"},
            headers=bearer(token),
        )

        assert response.status_code == 409
        profile = client.get("/auth/profile", headers=bearer(token)).json()
        assert profile["user"]["name"] == "Ana"

    def test_patch_invalid_email(self, client):
        token = register(client)["token"]

        response = client.patch(
            "/auth/profile", json={"email": "nope"}, headers=bearer(token)
        )

        assert response.status_code == 422

    @pytest.mark.parametrize(
        "headers",
        [
            {},
            {"Authorization": "Token abc"},
            {"Authorization": "Bearer"},
            {"Authorization": "Bearer not-a-jwt"},
        ],
    )
    def test_missing_or_malformed_token(self, client, headers):
        register(client)

        response = client.get("/auth/profile", headers=headers)

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_tampered_token(self, client):
        token = register(client)["token"]
        header, payload, signature = token.split(".")
        forged = ".".join([header, payload, signature[:-4] + "AAAA"])

        response = client.get("/auth/profile", headers=bearer(forged))

        assert response.status_code == 401

    def test_expired_token(self, client):
        register(client)
        token = create_token(
            {"sub": "1", "email": "ana@x.com"},
            Settings().auth,
            ttl=timedelta(seconds=-5),
        )

        response = client.get("/auth/profile", headers=bearer(token))

        assert response.status_code == 401

    def test_token_signed_with_other_secret(self, client):
        register(client)
        other = Settings().auth.model_copy(
            update={"jwt_secret": "another-secret-key-with-at-least-32-bytes"}
        )
        token = create_token({"sub": "1", "email": "ana@x.com"}, other)

        response = client.get("/auth/profile", headers=bearer(token))

        assert response.status_code == 401

    def test_oversized_subject(self, client):
        register(client)
        token = create_token(
            {"sub": "99999999999999999999", "email": "ana@x.com"}, Settings().auth
        )

        response = client.get("/auth/profile", headers=bearer(token))

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"


class TestHealth:
    """End-to-end tests for the health check."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
