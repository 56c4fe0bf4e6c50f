import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


@pytest.fixture
async def user_and_property(make_user, make_property):
    user = await make_user()
    prop = await make_property(user, title="Saved flat")
    return user, prop


async def test_add_list_check_remove(client: AsyncClient, user_and_property):
    user, prop = user_and_property

    created = await client.post("/api/favorites", json={"userId": user.id, "propertyId": prop.id})
    assert created.status_code == 201
    assert created.json()["propertyId"] == prop.id

    listing = await client.get("/api/favorites", params={"userId": user.id})
    [favorite] = listing.json()
    assert favorite["property"]["title"] == "Saved flat"

    check = await client.get(f"/api/favorites/check/{user.id}/{prop.id}")
    assert check.json() == {"isFavorite": True}

    properties = await client.get(f"/api/favorites/user/{user.id}")
    assert [p["id"] for p in properties.json()] == [prop.id]

    removed = await client.delete(f"/api/favorites/{user.id}/{prop.id}")
    assert removed.json() == {"message": "Favorite removed successfully"}

    check = await client.get(f"/api/favorites/check/{user.id}/{prop.id}")
    assert check.json() == {"isFavorite": False}


async def test_list_requires_user_id(client: AsyncClient):
    response = await client.get("/api/favorites")

    assert response.status_code == 400
    assert response.json() == {"error": "userId is required"}


async def test_duplicate_favorite(client: AsyncClient, user_and_property):
    user, prop = user_and_property
    body = {"userId": user.id, "propertyId": prop.id}

    await client.post("/api/favorites", json=body)
    response = await client.post("/api/favorites", json=body)

    assert response.status_code == 409


async def test_remove_missing(client: AsyncClient):
    response = await client.delete("/api/favorites/1/2")

    assert response.status_code == 404
