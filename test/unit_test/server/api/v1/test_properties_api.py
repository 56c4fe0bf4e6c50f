import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


@pytest.fixture
async def owner(make_user):
    return await make_user(username="agent", name="Agent", email="agent@example.com", role="agent")


def new_listing(user_id: int, **overrides):
    body = {
        "title": "Riverside flat",
        "description": "Two rooms by the river",
        "price": 189000,
        "address": "Rantakatu 1",
        "city": "Oulu",
        "area": 54.5,
        "bedrooms": 2,
        "bathrooms": 1,
        "propertyType": "Apartment",
        "listingType": "sell",
        "features": ["Sauna", "Balcony"],
        "userId": user_id,
    }
    body.update(overrides)
    return body


class TestListing:
    async def test_filters_and_total(self, client: AsyncClient, owner, make_property):
        await make_property(owner, city="Oulu", price=150000.0)
        await make_property(owner, city="Oulu", price=350000.0)
        await make_property(owner, city="Espoo", price=250000.0)

        response = await client.get("/api/properties", params={"city": "Oulu", "maxPrice": 200000})

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 1
        assert body["properties"][0]["price"] == 150000.0

    async def test_comma_separated_and_repeated_lists(self, client: AsyncClient, owner, make_property):
        await make_property(owner, property_type="Villa")
        await make_property(owner, property_type="House")
        await make_property(owner, property_type="Studio")

        repeated = await client.get("/api/properties?propertyType=Villa&propertyType=House")
        comma = await client.get("/api/properties", params={"propertyType": "Villa,House"})

        assert repeated.json()["total"] == 2
        assert comma.json()["total"] == 2

    async def test_sorted_and_paginated(self, client: AsyncClient, owner, make_property):
        for price in (300000.0, 100000.0, 200000.0):
            await make_property(owner, price=price)

        response = await client.get("/api/properties", params={"sortBy": "price", "sortDir": "asc", "limit": 2})

        body = response.json()
        assert [p["price"] for p in body["properties"]] == [100000.0, 200000.0]
        assert body["total"] == 3

    async def test_invalid_sort_rejected(self, client: AsyncClient):
        response = await client.get("/api/properties", params={"sortBy": "title"})

        assert response.status_code == 400

    async def test_featured(self, client: AsyncClient, owner, make_property):
        await make_property(owner, title="Star", featured=True)
        await make_property(owner, title="Plain")

        response = await client.get("/api/properties/featured")

        assert [p["title"] for p in response.json()] == ["Star"]

    async def test_text_search(self, client: AsyncClient, owner, make_property):
        await make_property(owner, title="Lakeside cottage")

        missing = await client.get("/api/properties/search")
        assert missing.status_code == 400
        assert missing.json() == {"error": "Search query 'q' is required"}

        response = await client.get("/api/properties/search", params={"q": "lakeside"})
        assert len(response.json()) == 1

    async def test_types(self, client: AsyncClient):
        response = await client.get("/api/properties/types")

        assert {"label": "Villa", "value": "Villa"} in response.json()

    async def test_by_user(self, client: AsyncClient, owner, make_property):
        await make_property(owner)

        response = await client.get(f"/api/properties/user/{owner.id}")

        assert len(response.json()) == 1


class TestDetail:
    async def test_includes_owner_and_municipality(self, client: AsyncClient, owner, make_property, make_location):
        await make_location(name="Oulu", city="Oulu", municipality_code="564")
        prop = await make_property(owner, city="Oulu")

        response = await client.get(f"/api/properties/{prop.id}")

        assert response.status_code == 200
        body = response.json()
        assert body["ownerDetails"]["email"] == "agent@example.com"
        assert body["municipalityCode"] == "564"

    async def test_not_found(self, client: AsyncClient):
        response = await client.get("/api/properties/999")

        assert response.status_code == 404
        assert response.json() == {"error": "Property not found"}

    async def test_recommendations(self, client: AsyncClient, owner, make_property):
        source = await make_property(owner)
        similar = await make_property(owner, title="Similar")

        response = await client.get(f"/api/properties/{source.id}/recommendations")

        assert [p["id"] for p in response.json()] == [similar.id]


class TestWrite:
    async def test_create(self, client: AsyncClient, owner):
        response = await client.post("/api/properties", json=new_listing(owner.id))

        assert response.status_code == 201
        body = response.json()
        assert body["featured"] is False
        assert body["verified"] is False
        assert body["features"] == ["Sauna", "Balcony"]

    async def test_create_invalid(self, client: AsyncClient, owner):
        response = await client.post("/api/properties", json=new_listing(owner.id, price=-1))

        assert response.status_code == 400
        assert response.json()["error"] == "Validation failed"

    async def test_partial_update(self, client: AsyncClient, owner, make_property):
        prop = await make_property(owner, title="Before")

        response = await client.put(f"/api/properties/{prop.id}", json={"price": 99000})

        body = response.json()
        assert body["price"] == 99000
        assert body["title"] == "Before"

    async def test_update_missing(self, client: AsyncClient):
        response = await client.put("/api/properties/999", json={"price": 1})

        assert response.status_code == 404

    async def test_delete(self, client: AsyncClient, owner, make_property):
        prop = await make_property(owner)

        response = await client.delete(f"/api/properties/{prop.id}")
        assert response.status_code == 204

        again = await client.delete(f"/api/properties/{prop.id}")
        assert again.status_code == 404
