import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


def contact(**overrides):
    body = {
        "name": "Liisa",
        "email": "liisa@example.com",
        "subject": "Viewing",
        "message": "Could I see the flat on Saturday?",
        "propertyId": 1,
        "userId": 2,
    }
    body.update(overrides)
    return body


async def test_create_is_unread(client: AsyncClient):
    response = await client.post("/api/messages", json=contact())

    assert response.status_code == 201
    assert response.json()["status"] == "unread"


async def test_create_rejects_bad_email(client: AsyncClient):
    response = await client.post("/api/messages", json=contact(email="not-an-email"))

    assert response.status_code == 400


async def test_list_filters(client: AsyncClient):
    await client.post("/api/messages", json=contact())
    await client.post("/api/messages", json=contact(subject="Price", propertyId=3))

    response = await client.get("/api/messages", params={"propertyId": 3})

    body = response.json()
    assert body["total"] == 1
    assert body["messages"][0]["subject"] == "Price"


async def test_status_transitions(client: AsyncClient):
    message_id = (await client.post("/api/messages", json=contact())).json()["id"]

    read = await client.put(f"/api/messages/{message_id}/read")
    assert read.json()["status"] == "read"

    replied = await client.put(f"/api/messages/{message_id}/replied")
    assert replied.json()["status"] == "replied"

    unread = await client.get("/api/messages", params={"status": "unread"})
    assert unread.json()["total"] == 0


async def test_update_rejects_unknown_status(client: AsyncClient):
    message_id = (await client.post("/api/messages", json=contact())).json()["id"]

    response = await client.put(f"/api/messages/{message_id}", json={"status": "archived"})

    assert response.status_code == 400


async def test_user_and_property_views(client: AsyncClient):
    await client.post("/api/messages", json=contact(userId=5, senderUserId=6))

    assert len((await client.get("/api/messages/user/5")).json()) == 1
    assert len((await client.get("/api/messages/user/6")).json()) == 1
    assert len((await client.get("/api/messages/property/1")).json()) == 1


async def test_get_and_delete(client: AsyncClient):
    message_id = (await client.post("/api/messages", json=contact())).json()["id"]

    assert (await client.get(f"/api/messages/{message_id}")).status_code == 200

    deleted = await client.delete(f"/api/messages/{message_id}")
    assert deleted.json() == {"message": "Message deleted successfully"}

    missing = await client.get(f"/api/messages/{message_id}")
    assert missing.status_code == 404
    assert missing.json() == {"error": "Message not found"}

    assert (await client.put(f"/api/messages/{message_id}/read")).status_code == 404
