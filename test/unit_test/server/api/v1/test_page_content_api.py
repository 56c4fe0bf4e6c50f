import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def create(client: AsyncClient, title: str, page_type: str = "home", section: str = "hero", position: int = 0) -> int:
    response = await client.post(
        "/api/page-content",
        json={"pageType": page_type, "section": section, "title": title, "position": position},
    )
    assert response.status_code == 201
    return response.json()["id"]


async def test_reads_by_page_and_section(client: AsyncClient):
    await create(client, "Welcome")
    await create(client, "Why us", section="features")
    await create(client, "About us", page_type="about")

    assert len((await client.get("/api/page-content")).json()) == 3
    assert len((await client.get("/api/page-content/type/home")).json()) == 2
    hero = (await client.get("/api/page-content/type/home/section/hero")).json()
    assert [block["title"] for block in hero] == ["Welcome"]


async def test_position_is_required(client: AsyncClient):
    response = await client.post("/api/page-content", json={"pageType": "home", "section": "hero"})

    assert response.status_code == 400


async def test_update_and_delete(client: AsyncClient):
    block_id = await create(client, "Welcome")

    updated = await client.put(f"/api/page-content/{block_id}", json={"subtitle": "Find your home", "buttonText": "Search"})
    assert updated.json()["subtitle"] == "Find your home"
    assert updated.json()["buttonText"] == "Search"

    assert (await client.delete(f"/api/page-content/{block_id}")).json() == {"success": True}
    assert (await client.get(f"/api/page-content/{block_id}")).status_code == 404


async def test_reorder(client: AsyncClient):
    first = await create(client, "A", position=0)
    await create(client, "B", position=1)

    response = await client.put(f"/api/page-content/{first}/reorder", json={"position": 1})
    assert response.json() == {"success": True}

    hero = (await client.get("/api/page-content/type/home/section/hero")).json()
    assert [block["title"] for block in hero] == ["B", "A"]
