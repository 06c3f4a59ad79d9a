"""Integration tests for authentication endpoints."""
import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.database.models import User

pytestmark = pytest.mark.asyncio


class TestRegister:
    """Tests for POST /auth/register."""

    async def test_register_success(self, async_client: AsyncClient):
        """New accounts start active on the free plan with its credits."""
        response = await async_client.post(
            "/api/v1/auth/register",
            json={
                "email": "New.User@Example.com",
                "password": "Sup3rsecret",
                "name": "New User",
            },
        )

        assert response.status_code == 201
        data = response.json()
        assert data["email"] == "new.user@example.com"
        assert data["status"] == "active"
        assert data["plan"] == "free"
        assert data["credits_balance"] == 100
        assert "password_hash" not in data

    async def test_register_duplicate_email(self, async_client: AsyncClient, test_user: User):
        response = await async_client.post(
            "/api/v1/auth/register",
            json={"email": test_user.email, "password": "Sup3rsecret", "name": "Dup"},
        )

        assert response.status_code == 400

    async def test_register_weak_password(self, async_client: AsyncClient):
        response = await async_client.post(
            "/api/v1/auth/register",
            json={"email": "weak@example.com", "password": "alllowercase", "name": "Weak"},
        )

        assert response.status_code == 422


class TestLogin:
    """Tests for POST /auth/login."""

    async def test_login_success(self, async_client: AsyncClient, test_user: User):
        response = await async_client.post(
            "/api/v1/auth/login",
            json={"email": "test@example.com", "password": "Testpassword123"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["token_type"] == "bearer"
        assert data["access_token"]
        assert data["refresh_token"]
        assert data["expires_in"] > 0
        assert "access_token" in response.cookies

    async def test_login_wrong_password(self, async_client: AsyncClient, test_user: User):
        response = await async_client.post(
            "/api/v1/auth/login",
            json={"email": "test@example.com", "password": "wrong"},
        )

        assert response.status_code == 401

    async def test_login_unknown_email(self, async_client: AsyncClient):
        response = await async_client.post(
            "/api/v1/auth/login",
            json={"email": "nobody@example.com", "password": "Whatever123"},
        )

        assert response.status_code == 401

    async def test_login_suspended_user(
        self,
        async_client: AsyncClient,
        test_user: User,
        db_session: AsyncSession,
    ):
        test_user.status = "suspended"
        await db_session.commit()

        response = await async_client.post(
            "/api/v1/auth/login",
            json={"email": "test@example.com", "password": "Testpassword123"},
        )

        assert response.status_code == 403

    async def test_login_records_last_login(
        self,
        async_client: AsyncClient,
        test_user: User,
        db_session: AsyncSession,
    ):
        await async_client.post(
            "/api/v1/auth/login",
            json={"email": "test@example.com", "password": "Testpassword123"},
        )

        await db_session.refresh(test_user)
        assert test_user.login_count == 1
        assert test_user.last_login is not None


class TestRefreshAndMe:
    """Tests for /auth/refresh, /auth/me and /auth/logout."""

    async def test_refresh_with_body_token(self, async_client: AsyncClient, test_user: User):
        login = await async_client.post(
            "/api/v1/auth/login",
            json={"email": "test@example.com", "password": "Testpassword123"},
        )
        refresh_token = login.json()["refresh_token"]
        async_client.cookies.clear()

        response = await async_client.post(
            "/api/v1/auth/refresh",
            json={"refresh_token": refresh_token},
        )

        assert response.status_code == 200
        assert response.json()["access_token"]

    async def test_refresh_without_token(self, async_client: AsyncClient):
        response = await async_client.post("/api/v1/auth/refresh")

        assert response.status_code == 401

    async def test_refresh_rejects_access_token(self, async_client: AsyncClient, test_user: User):
        login = await async_client.post(
            "/api/v1/auth/login",
            json={"email": "test@example.com", "password": "Testpassword123"},
        )
        access_token = login.json()["access_token"]
        async_client.cookies.clear()

        response = await async_client.post(
            "/api/v1/auth/refresh",
            json={"refresh_token": access_token},
        )

        assert response.status_code == 401

    async def test_me(self, async_client: AsyncClient, auth_headers: dict, test_user: User):
        response = await async_client.get("/api/v1/auth/me", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == test_user.id
        assert data["plan"] == "pro"
        assert data["credits_balance"] == 1000

    async def test_me_unauthenticated(self, async_client: AsyncClient):
        response = await async_client.get("/api/v1/auth/me")

        assert response.status_code == 401

    async def test_me_invalid_token(self, async_client: AsyncClient):
        response = await async_client.get(
            "/api/v1/auth/me",
            headers={"Authorization": "Bearer not-a-jwt"},
        )

        assert response.status_code == 401

    async def test_logout(self, async_client: AsyncClient, auth_headers: dict):
        response = await async_client.post("/api/v1/auth/logout", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["message"] == "Logged out successfully"
