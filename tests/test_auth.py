"""
Demo session tests.
"""

import pytest

from graybay.core.config import settings


@pytest.mark.asyncio
async def test_login_and_session(test_client):
    response = await test_client.post(
        "/api/auth/session",
        json={"email": settings.DEMO_USER_EMAIL, "password": settings.DEMO_USER_PASSWORD},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["token"]["tokenType"] == "bearer"
    assert data["user"]["email"] == settings.DEMO_USER_EMAIL

    session = await test_client.get(
        "/api/auth/session",
        headers={"Authorization": f"Bearer {data['token']['accessToken']}"},
    )
    assert session.status_code == 200
    assert session.json()["name"] == settings.DEMO_USER_NAME


@pytest.mark.asyncio
async def test_login_with_wrong_password(test_client):
    response = await test_client.post(
        "/api/auth/session",
        json={"email": settings.DEMO_USER_EMAIL, "password": "wrong"},
    )

    assert response.status_code == 401
    error = response.json()["error"]
    assert error["code"] == "unauthorized"
    assert error["path"] == "/api/auth/session"


@pytest.mark.asyncio
async def test_session_requires_token(test_client):
    assert (await test_client.get("/api/auth/session")).status_code == 401

    tampered = await test_client.get("/api/auth/session", headers={"Authorization": "Bearer not-a-jwt"})
    assert tampered.status_code == 401
