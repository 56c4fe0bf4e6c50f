import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


@pytest.fixture
async def agent(make_user):
    return await make_user(username="agent", name="Agent", role="agent")


class TestDashboard:
    async def test_counts_and_charts(self, client: AsyncClient, make_user, agent, make_property, make_location):
        await make_user(username="admin", role="admin")
        await make_user(username="buyer")
        await make_location(name="Oulu", city="Oulu")
        await make_property(agent, city="Oulu", featured=True)
        await make_property(agent, city="Espoo", property_type="House", verified=True)

        response = await client.get("/api/admin/dashboard")

        assert response.status_code == 200
        body = response.json()
        assert body["counts"] == {
            "properties": 2,
            "users": 3,
            "activeUsers": 2,
            "agents": 1,
            "locations": 1,
            "favorites": 0,
            "featuredProperties": 1,
            "verifiedProperties": 1,
        }
        assert body["charts"]["propertiesByType"] == {"Apartment": 1, "House": 1}
        assert body["charts"]["propertiesByCity"] == {"Oulu": 1, "Espoo": 1}
        assert len(body["recentProperties"]) == 2
        assert len(body["recentUsers"]) == 3


class TestUsers:
    async def test_crud(self, client: AsyncClient):
        created = await client.post(
            "/api/admin/users",
            json={"name": "Root", "email": "root@example.com", "username": "root", "password": "secret123", "role": "admin"},
        )
        assert created.status_code == 201
        user_id = created.json()["id"]

        login = await client.post("/api/users/login", json={"usernameOrEmail": "root", "password": "secret123"})
        assert login.status_code == 200

        updated = await client.put(f"/api/admin/users/{user_id}", json={"role": "agent", "password": "newpass123"})
        assert updated.json()["role"] == "agent"
        relogin = await client.post("/api/users/login", json={"usernameOrEmail": "root", "password": "newpass123"})
        assert relogin.status_code == 200

        assert (await client.get(f"/api/admin/users/{user_id}")).json()["username"] == "root"
        assert [u["id"] for u in (await client.get("/api/admin/agents")).json()] == [user_id]

        deleted = await client.delete(f"/api/admin/users/{user_id}")
        assert deleted.json() == {"message": "User deleted successfully"}
        assert (await client.get(f"/api/admin/users/{user_id}")).status_code == 404

    async def test_duplicates(self, client: AsyncClient, agent, make_user):
        other = await make_user(username="other")

        created = await client.post(
            "/api/admin/users", json={"name": "Dup", "email": "new@example.com", "username": "agent"}
        )
        assert created.status_code == 409
        assert created.json() == {"error": "Username or email already exists"}

        renamed = await client.put(f"/api/admin/users/{other.id}", json={"username": "agent"})
        assert renamed.status_code == 409

    async def test_oversized_password_rejected(self, client: AsyncClient, agent):
        created = await client.post(
            "/api/admin/users",
            json={"name": "Long", "email": "long@example.com", "username": "longpw", "password": "x" * 73},
        )
        updated = await client.put(f"/api/admin/users/{agent.id}", json={"password": "x" * 73})

        assert created.status_code == 400
        assert updated.status_code == 400

    async def test_list(self, client: AsyncClient, agent):
        users = (await client.get("/api/admin/users")).json()

        assert [u["username"] for u in users] == ["agent"]


class TestProperties:
    async def test_paginated_listing(self, client: AsyncClient, agent, make_property):
        for _ in range(3):
            await make_property(agent)

        response = await client.get("/api/admin/properties", params={"limit": 2, "page": 2})

        body = response.json()
        assert len(body["properties"]) == 1
        assert body["pagination"] == {"page": 2, "limit": 2, "total": 3, "pages": 2}

    async def test_moderation_flags(self, client: AsyncClient, agent, make_property):
        prop = await make_property(agent)

        assert (await client.put(f"/api/admin/properties/{prop.id}/verify")).json()["verified"] is True
        assert (await client.put(f"/api/admin/properties/{prop.id}/feature")).json()["featured"] is True
        assert (await client.put(f"/api/admin/properties/{prop.id}/unverify")).json()["verified"] is False
        assert (await client.put(f"/api/admin/properties/{prop.id}/unfeature")).json()["featured"] is False
        assert (await client.put("/api/admin/properties/999/verify")).status_code == 404

    async def test_crud(self, client: AsyncClient, agent):
        created = await client.post(
            "/api/admin/properties",
            json={
                "title": "Office floor",
                "description": "Open plan",
                "price": 500000,
                "address": "Keskuskatu 5",
                "city": "Helsinki",
                "area": 300,
                "bedrooms": 0,
                "bathrooms": 2,
                "propertyType": "Office",
                "listingType": "commercial",
                "userId": agent.id,
            },
        )
        assert created.status_code == 201
        prop_id = created.json()["id"]

        updated = await client.put(f"/api/admin/properties/{prop_id}", json={"status": "sold"})
        assert updated.json()["status"] == "sold"

        deleted = await client.delete(f"/api/admin/properties/{prop_id}")
        assert deleted.json() == {"message": "Property deleted successfully"}
        assert (await client.get(f"/api/admin/properties/{prop_id}")).status_code == 404


class TestLocations:
    async def test_crud(self, client: AsyncClient):
        created = await client.post("/api/admin/locations", json={"name": "Vaasa", "city": "Vaasa"})
        assert created.json()["municipalityCode"] == "905"
        location_id = created.json()["id"]

        assert len((await client.get("/api/admin/locations")).json()) == 1
        updated = await client.put(f"/api/admin/locations/{location_id}", json={"country": "Suomi"})
        assert updated.json()["country"] == "Suomi"
        assert (await client.delete(f"/api/admin/locations/{location_id}")).status_code == 204
        assert (await client.get(f"/api/admin/locations/{location_id}")).status_code == 404


class TestBulkOperations:
    async def test_clear_all_data(self, client: AsyncClient, agent, make_property, make_location):
        await make_property(agent)
        await make_location()

        response = await client.delete("/api/admin/clear-all-data")

        assert response.json()["success"] is True
        dashboard = (await client.get("/api/admin/dashboard")).json()
        assert dashboard["counts"]["properties"] == 0
        assert dashboard["counts"]["locations"] == 0
        assert dashboard["counts"]["users"] == 1

    async def test_generate_requires_full_reseed(self, client: AsyncClient):
        response = await client.post("/api/admin/generate-data", json={})

        assert response.status_code == 400
        assert response.json() == {"error": "Full reseed is required. Partial seeding is not supported."}

    async def test_generate(self, client: AsyncClient):
        response = await client.post("/api/admin/generate-data", json={"clearExisting": True})

        assert response.json()["success"] is True
        assert (await client.get("/api/admin/dashboard")).json()["counts"]["users"] == 3
