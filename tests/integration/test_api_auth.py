"""
Integration tests for auth API endpoints.
Uses TestClient with mocked use cases (no real DB).
"""
from unittest.mock import AsyncMock

import pytest

pytestmark = pytest.mark.integration

from swachhta_prahari.application.dto.auth_dto import AuthResponse, TokenPair
from swachhta_prahari.application.use_cases.auth import LoginUserUseCase, SignupUserUseCase, VerifyOtpUseCase
from swachhta_prahari.domain.exceptions import ValidationFailedError


@pytest.fixture
def auth_response(current_user):
    return AuthResponse(user=current_user, tokens=TokenPair(access_token="jwt.access", refresh_token="jwt.refresh"))


class TestAuthAPI:
    """Tests for /api/auth endpoints"""

    def test_signup_success(self, client, registry, auth_response):
        registry[SignupUserUseCase] = AsyncMock(spec=SignupUserUseCase)
        registry[SignupUserUseCase].execute.return_value = auth_response

        response = client.post(
            "/api/auth/signup",
            json={
                "name": "Site Admin",
                "role": "admin",
                "email": "admin@example.com",
                "username": "siteadmin",
                "password": "password123",
            },
        )

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["data"]["tokens"]["accessToken"] == "jwt.access"
        assert body["data"]["user"]["isActive"] is True

    def test_signup_duplicate_returns_400(self, client, registry):
        registry[SignupUserUseCase] = AsyncMock(spec=SignupUserUseCase)
        registry[SignupUserUseCase].execute.side_effect = ValidationFailedError("User already exists")

        response = client.post(
            "/api/auth/signup",
            json={
                "name": "Site Admin",
                "role": "admin",
                "email": "admin@example.com",
                "username": "siteadmin",
                "password": "password123",
            },
        )

        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "User already exists"}

    def test_signup_validation_errors_are_listed(self, client):
        response = client.post("/api/auth/signup", json={"name": "X", "role": "janitor"})
        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Validation failed"
        assert len(body["errors"]) >= 3

    def test_login_success(self, client, registry, auth_response):
        registry[LoginUserUseCase] = AsyncMock(spec=LoginUserUseCase)
        registry[LoginUserUseCase].execute.return_value = auth_response

        response = client.post("/api/auth/login", json={"username": "siteadmin", "password": "password123"})

        assert response.status_code == 200
        assert response.json()["data"]["tokens"]["refreshToken"] == "jwt.refresh"

    def test_login_invalid_returns_401(self, client, registry):
        registry[LoginUserUseCase] = AsyncMock(spec=LoginUserUseCase)
        registry[LoginUserUseCase].execute.return_value = None

        response = client.post("/api/auth/login", json={"email": "admin@example.com", "password": "wrong"})

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid credentials"

    def test_verify_otp_rejects_bad_code(self, client, registry):
        registry[VerifyOtpUseCase] = AsyncMock(spec=VerifyOtpUseCase)
        registry[VerifyOtpUseCase].execute.side_effect = ValidationFailedError("OTP expired or invalid")

        response = client.post("/api/auth/verify-otp", json={"email": "admin@example.com", "otp": "123456"})

        assert response.status_code == 400

    def test_me_returns_current_user(self, client):
        response = client.get("/api/auth/me")
        assert response.status_code == 200
        assert response.json()["data"]["user"]["username"] == "siteadmin"

    def test_missing_token_is_401(self, app, client):
        app.dependency_overrides.clear()
        response = client.get("/api/auth/me")
        assert response.status_code == 401
        assert response.json()["message"] == "Access denied. No token provided."
