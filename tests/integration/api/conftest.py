"""Pytest fixtures for API integration tests."""

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr

from pennywise.presentation.api.app import API_V1_PREFIX, create_app
from pennywise.presentation.api.dependencies import get_mx_lookup
from pennywise_config.settings import Settings

TEST_PASSWORD = "Password123!"


async def accept_all_domains(domain: str) -> list[str]:
    """MX lookup stand-in: every domain receives mail."""
    return [f"mx.{domain}"]


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def api_settings(tmp_path) -> Settings:
    """Test settings backed by a throwaway SQLite file."""
    return Settings(
        # Required security settings
        jwt_access_secret_key=SecretStr("test-access-secret-for-testing-only"),
        jwt_refresh_secret_key=SecretStr("test-refresh-secret-for-testing-only"),
        postgres_password=SecretStr("test-password"),
        database_dsn=f"sqlite+aiosqlite:///{tmp_path / 'api.db'}",
        # Fast hashing
        password_hash_time_cost=1,
        password_hash_memory_cost=8,
        password_hash_parallelism=1,
        # API settings
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        log_level="WARNING",
    )


@pytest.fixture
def test_client(api_settings):
    """Test client; entering it runs the lifespan, which creates the tables."""
    app = create_app(settings=api_settings)
    app.dependency_overrides[get_mx_lookup] = lambda: accept_all_domains

    with TestClient(app) as client:
        yield client


@pytest.fixture
def registered_user_data() -> dict:
    """Test user registration data."""
    return {"email": "test@example.com", "password": TEST_PASSWORD}


@pytest.fixture
def tokens(test_client, registered_user_data, api_v1_prefix) -> dict:
    """Register a user and log in; returns the login response body."""
    response = test_client.post(f"{api_v1_prefix}/auth/register", json=registered_user_data)
    assert response.status_code == 201

    response = test_client.post(f"{api_v1_prefix}/auth/login", json=registered_user_data)
    assert response.status_code == 200
    return response.json()


@pytest.fixture
def auth_headers(tokens) -> dict:
    """Get auth headers for a registered user."""
    return {"Authorization": f"Bearer {tokens['access_token']}"}


@pytest.fixture
def other_auth_headers(test_client, api_v1_prefix) -> dict:
    """Auth headers for a second, unrelated user."""
    credentials = {"email": "other@example.com", "password": TEST_PASSWORD}
    test_client.post(f"{api_v1_prefix}/auth/register", json=credentials)
    response = test_client.post(f"{api_v1_prefix}/auth/login", json=credentials)
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def category_ids(test_client, auth_headers, api_v1_prefix) -> dict[str, int]:
    """Create a few categories; returns their ids by name."""
    ids = {}
    for name in ("Food", "Travel", "Housing"):
        response = test_client.post(
            f"{api_v1_prefix}/categories",
            headers=auth_headers,
            json={"name": name},
        )
        assert response.status_code == 201
        ids[name] = response.json()["id"]
    return ids
