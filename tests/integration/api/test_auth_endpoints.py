"""Integration tests for authentication endpoints."""

from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

from pennywise_auth import JWTService


class TestAuthRegister:
    """Tests for POST /api/v1/auth/register."""

    def test_register_success(self, test_client: TestClient, api_v1_prefix: str):
        response = test_client.post(
            f"{api_v1_prefix}/auth/register",
            json={"email": " NewUser@Example.com ", "password": "Password123!"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "User created successfully."
        assert data["user"]["email"] == "newuser@example.com"
        assert "id" in data["user"]
        assert "password" not in data["user"]

    def test_register_duplicate_email(
        self,
        test_client: TestClient,
        registered_user_data: dict,
        api_v1_prefix: str,
    ):
        first = test_client.post(f"{api_v1_prefix}/auth/register", json=registered_user_data)
        assert first.status_code == 201

        second = test_client.post(
            f"{api_v1_prefix}/auth/register",
            json={"email": "TEST@example.com", "password": "Another123!"},
        )

        assert second.status_code == 409
        assert second.json()["code"] == "EMAIL_TAKEN"
        assert second.json()["message"] == "Email address unavailable."

    def test_register_weak_password_lists_every_rule(
        self,
        test_client: TestClient,
        api_v1_prefix: str,
    ):
        response = test_client.post(
            f"{api_v1_prefix}/auth/register",
            json={"email": "weak@example.com", "password": "abc"},
        )

        assert response.status_code == 400
        data = response.json()
        assert data["status"] == 400
        assert data["code"] == "INVALID_PASSWORD"
        assert data["details"] == [
            "Password must be at least 8 characters long.",
            "Password must contain at least one uppercase letter.",
            "Password must contain at least one digit.",
            "Password must contain at least one symbol.",
        ]

    def test_register_disposable_email(self, test_client: TestClient, api_v1_prefix: str):
        response = test_client.post(
            f"{api_v1_prefix}/auth/register",
            json={"email": "someone@mailinator.com", "password": "Password123!"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_EMAIL"
        assert (
            "Disposable or temporary email addresses are not allowed."
            in response.json()["details"]
        )

    def test_register_missing_fields(self, test_client: TestClient, api_v1_prefix: str):
        response = test_client.post(f"{api_v1_prefix}/auth/register", json={})

        assert response.status_code == 400
        data = response.json()
        assert data["code"] == "VALIDATION_ERROR"
        assert len(data["details"]) == 2


class TestAuthLogin:
    """Tests for POST /api/v1/auth/login."""

    def test_login_success(
        self,
        test_client: TestClient,
        registered_user_data: dict,
        api_v1_prefix: str,
    ):
        test_client.post(f"{api_v1_prefix}/auth/register", json=registered_user_data)

        response = test_client.post(f"{api_v1_prefix}/auth/login", json=registered_user_data)

        assert response.status_code == 200
        data = response.json()
        assert data["access_token"]
        assert data["refresh_token"]
        assert data["token_type"] == "bearer"
        assert data["user"]["email"] == registered_user_data["email"]

    def test_login_unknown_email(self, test_client: TestClient, api_v1_prefix: str):
        response = test_client.post(
            f"{api_v1_prefix}/auth/login",
            json={"email": "ghost@example.com", "password": "Password123!"},
        )

        assert response.status_code == 401
        assert response.json()["message"] == "No account found with this email."
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_login_wrong_password(
        self,
        test_client: TestClient,
        registered_user_data: dict,
        api_v1_prefix: str,
    ):
        test_client.post(f"{api_v1_prefix}/auth/register", json=registered_user_data)

        response = test_client.post(
            f"{api_v1_prefix}/auth/login",
            json={"email": registered_user_data["email"], "password": "Wrong123!"},
        )

        assert response.status_code == 401
        assert response.json()["code"] == "INVALID_CREDENTIALS"
        assert response.json()["message"] == "Incorrect password."


class TestAuthRefresh:
    """Tests for POST /api/v1/auth/refresh."""

    def test_refresh_success(self, test_client: TestClient, tokens: dict, api_v1_prefix: str):
        response = test_client.post(
            f"{api_v1_prefix}/auth/refresh",
            json={"refresh_token": tokens["refresh_token"]},
        )

        assert response.status_code == 200
        access_token = response.json()["access_token"]
        me = test_client.get(
            f"{api_v1_prefix}/me",
            headers={"Authorization": f"Bearer {access_token}"},
        )
        assert me.status_code == 200

    @pytest.mark.parametrize("body", [{}, {"refresh_token": None}, {"refresh_token": "junk"}])
    def test_refresh_rejected(self, test_client: TestClient, api_v1_prefix: str, body):
        response = test_client.post(f"{api_v1_prefix}/auth/refresh", json=body)

        assert response.status_code == 403
        assert response.json()["message"] == "Unauthorized access."

    def test_refresh_with_access_token(
        self,
        test_client: TestClient,
        tokens: dict,
        api_v1_prefix: str,
    ):
        response = test_client.post(
            f"{api_v1_prefix}/auth/refresh",
            json={"refresh_token": tokens["access_token"]},
        )

        assert response.status_code == 403

    def test_refresh_expired(self, test_client: TestClient, api_settings, api_v1_prefix: str):
        jwt_service = JWTService(
            access_secret_key=api_settings.jwt_access_secret_key.get_secret_value(),
            refresh_secret_key=api_settings.jwt_refresh_secret_key.get_secret_value(),
        )
        expired = jwt_service.create_refresh_token(1, expires_delta=timedelta(seconds=-5))

        response = test_client.post(
            f"{api_v1_prefix}/auth/refresh",
            json={"refresh_token": expired},
        )

        assert response.status_code == 403
        assert response.json()["code"] == "SESSION_EXPIRED"
        assert response.json()["details"] == ["Please log in again."]


class TestAccessToken:
    """Tests for Bearer authentication on protected routes."""

    def test_missing_token(self, test_client: TestClient, api_v1_prefix: str):
        response = test_client.get(f"{api_v1_prefix}/me")

        assert response.status_code == 401
        assert response.json()["code"] == "UNAUTHORIZED"
        assert response.json()["message"] == "Unauthorized access."

    def test_refresh_token_is_not_an_access_token(
        self,
        test_client: TestClient,
        tokens: dict,
        api_v1_prefix: str,
    ):
        response = test_client.get(
            f"{api_v1_prefix}/me",
            headers={"Authorization": f"Bearer {tokens['refresh_token']}"},
        )

        assert response.status_code == 401

    def test_expired_access_token(self, test_client: TestClient, api_settings, api_v1_prefix):
        jwt_service = JWTService(
            access_secret_key=api_settings.jwt_access_secret_key.get_secret_value(),
            refresh_secret_key=api_settings.jwt_refresh_secret_key.get_secret_value(),
        )
        expired = jwt_service.create_access_token(1, expires_delta=timedelta(seconds=-5))

        response = test_client.get(
            f"{api_v1_prefix}/me",
            headers={"Authorization": f"Bearer {expired}"},
        )

        assert response.status_code == 401
        assert response.json()["code"] == "TOKEN_EXPIRED"
        assert response.json()["message"] == "Session expired."
