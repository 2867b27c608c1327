from uuid import uuid4

import pytest
from httpx import AsyncClient

from tests.utils.session_cookies import auth_headers, register, sign_in


async def _send(client, admin_token, to_user_id, content="Please re-check the photo"):
    response = await client.post(
        "/messages",
        json={"to_user_id": to_user_id, "content": content},
        headers=auth_headers(admin_token),
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
async def test_send_and_read_message(client: AsyncClient, admin_user):
    alice_token, alice = await register(client, "alice")
    bob_token, _ = await register(client, "bob")
    admin_token = await sign_in(client, *admin_user)

    message = await _send(client, admin_token, alice["id"])
    assert message["is_read"] is False

    inbox = (await client.get("/messages", headers=auth_headers(alice_token))).json()
    assert [m["id"] for m in inbox] == [message["id"]]
    assert (await client.get("/messages", headers=auth_headers(bob_token))).json() == []

    response = await client.post(f"/messages/{message['id']}/read", headers=auth_headers(bob_token))
    assert response.status_code == 403

    response = await client.post(f"/messages/{message['id']}/read", headers=auth_headers(alice_token))
    assert response.status_code == 200
    assert response.json()["is_read"] is True


@pytest.mark.asyncio
async def test_users_cannot_send_messages(client: AsyncClient):
    alice_token, _ = await register(client, "alice")
    _, bob = await register(client, "bob")

    response = await client.post(
        "/messages", json={"to_user_id": bob["id"], "content": "hi"}, headers=auth_headers(alice_token)
    )

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_message_to_unknown_user(client: AsyncClient, admin_user):
    admin_token = await sign_in(client, *admin_user)

    response = await client.post(
        "/messages", json={"to_user_id": str(uuid4()), "content": "hi"}, headers=auth_headers(admin_token)
    )

    assert response.status_code == 404
