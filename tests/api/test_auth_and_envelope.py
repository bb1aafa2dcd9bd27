"""API tests for bearer authentication and the error envelope.

Every task and comment route requires a valid token whose sub names a live
user. Errors always use {"success": false, "error": {message, statusCode, code}}.
"""

from collections.abc import Callable
from datetime import timedelta

from httpx import AsyncClient


async def test_missing_token_is_401(client: AsyncClient) -> None:
    response = await client.get("/api/v1/tasks")
    assert response.status_code == 401
    body = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == "AUTHENTICATION_ERROR"
    assert body["error"]["statusCode"] == 401


async def test_garbage_token_is_401(client: AsyncClient) -> None:
    response = await client.get(
        "/api/v1/tasks", headers={"Authorization": "Bearer not-a-jwt"}
    )
    assert response.status_code == 401


async def test_expired_token_is_401(
    client: AsyncClient, seeded: dict[str, str], make_token: Callable[..., str]
) -> None:
    token = make_token(seeded["alice"], expires_in=timedelta(minutes=-5))
    response = await client.get(
        "/api/v1/tasks", headers={"Authorization": f"Bearer {token}"}
    )
    assert response.status_code == 401


async def test_token_for_unknown_user_is_401(
    client: AsyncClient, seeded: dict[str, str], make_token: Callable[..., str]
) -> None:
    response = await client.get(
        "/api/v1/tasks", headers={"Authorization": f"Bearer {make_token('ghost')}"}
    )
    assert response.status_code == 401


async def test_writes_require_a_token(client: AsyncClient) -> None:
    response = await client.post("/api/v1/tasks", json={"title": "x"})
    assert response.status_code == 401


async def test_malformed_id_is_400(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    response = await client.get("/api/v1/tasks/bad*id", headers=auth_headers)
    assert response.status_code == 400
    body = response.json()
    assert body["error"]["code"] == "VALIDATION_ERROR"
    assert body["error"]["details"]


async def test_unknown_task_is_404_envelope(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    response = await client.get("/api/v1/tasks/doesnotexist", headers=auth_headers)
    assert response.status_code == 404
    error = response.json()["error"]
    assert error == {
        "message": "Task not found",
        "statusCode": 404,
        "code": "RESOURCE_NOT_FOUND",
        "details": {"resource_type": "task", "resource_id": "doesnotexist"},
    }


async def test_invalid_body_is_400(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    response = await client.post("/api/v1/tasks", json={"title": ""}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["success"] is False
