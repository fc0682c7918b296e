"""Integration tests for JWT authentication.

Validates:
  - /health is public (plain Django view, no DRF).
  - The catalog is open while API_REQUIRE_AUTH is off.
  - With API_REQUIRE_AUTH on, product endpoints return 401 without a token,
    with an invalid token and with a malformed Authorization header.
  - A token obtained from /api/v1/auth/token/ grants access.
"""

import pytest
from django.contrib.auth import get_user_model

pytestmark = pytest.mark.integration

User = get_user_model()

LIST_URL = "/api/v1/products/"
TOKEN_URL = "/api/v1/auth/token/"


@pytest.fixture()
def require_auth(settings):
    settings.API_REQUIRE_AUTH = True


@pytest.fixture()
def user():
    return User.objects.create_user(username="catalog", password="testpass123")


class TestPublicEndpoints:
    def test_health_is_public(self, client, require_auth):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_catalog_open_by_default(self, api_client):
        response = api_client.get(LIST_URL)
        assert response.status_code == 200


@pytest.mark.usefixtures("require_auth")
class TestProtectedEndpoints:
    def test_no_token_returns_401(self, api_client):
        response = api_client.get(LIST_URL)
        assert response.status_code == 401

    def test_401_includes_www_authenticate_header(self, api_client):
        response = api_client.get(LIST_URL)
        assert response.status_code == 401
        assert "Bearer" in response.get("WWW-Authenticate", "")

    def test_401_uses_error_envelope(self, api_client):
        response = api_client.post(LIST_URL, {"name": "Widget", "price": 1}, format="json")
        assert response.status_code == 401
        assert "error" in response.json()

    def test_invalid_token_returns_401(self, api_client):
        api_client.credentials(HTTP_AUTHORIZATION="Bearer invalid.token.here")
        response = api_client.get(LIST_URL)
        assert response.status_code == 401

    def test_malformed_auth_header_returns_401(self, api_client):
        api_client.credentials(HTTP_AUTHORIZATION="Token some-token")
        response = api_client.get(LIST_URL)
        assert response.status_code == 401

    def test_force_authenticated_user_allowed(self, api_client, user):
        api_client.force_authenticate(user=user)
        response = api_client.get(LIST_URL)
        assert response.status_code == 200

    def test_obtained_token_grants_access(self, api_client, user):
        token = api_client.post(
            TOKEN_URL,
            {"username": "catalog", "password": "testpass123"},
            format="json",
        )
        assert token.status_code == 200
        access = token.json()["access"]

        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {access}")
        response = api_client.get(LIST_URL)

        assert response.status_code == 200

    def test_wrong_password_is_rejected(self, api_client, user):
        response = api_client.post(
            TOKEN_URL,
            {"username": "catalog", "password": "wrong"},
            format="json",
        )
        assert response.status_code == 401
        assert "error" in response.json()
