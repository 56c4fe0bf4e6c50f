import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def create(client: AsyncClient, title: str, section: str = "company", position: int = 0) -> int:
    response = await client.post(
        "/api/footer", json={"section": section, "title": title, "content": "", "link": "/x", "position": position}
    )
    assert response.status_code == 201
    return response.json()["id"]


async def test_list_grouped_and_ordered(client: AsyncClient):
    await create(client, "Twitter", section="social")
    await create(client, "Careers", position=1)
    await create(client, "About", position=0)

    titles = [item["title"] for item in (await client.get("/api/footer")).json()]

    assert titles == ["About", "Careers", "Twitter"]


async def test_section(client: AsyncClient):
    await create(client, "About")
    await create(client, "Twitter", section="social")

    response = await client.get("/api/footer/section/social")

    assert [item["title"] for item in response.json()] == ["Twitter"]


async def test_patch_and_delete(client: AsyncClient):
    item_id = await create(client, "About")

    patched = await client.patch(f"/api/footer/{item_id}", json={"openInNewTab": True})
    assert patched.json()["openInNewTab"] is True
    assert patched.json()["title"] == "About"

    assert (await client.delete(f"/api/footer/{item_id}")).json() == {"success": True}
    assert (await client.get(f"/api/footer/{item_id}")).status_code == 404


async def test_reorder(client: AsyncClient):
    first = await create(client, "First", position=0)
    await create(client, "Second", position=1)
    await create(client, "Third", position=2)

    response = await client.post(f"/api/footer/{first}/reorder", json={"newPosition": 2})
    assert response.json() == {"success": True}

    section = (await client.get("/api/footer/section/company")).json()
    assert [(item["title"], item["position"]) for item in section] == [("Second", 0), ("Third", 1), ("First", 2)]


async def test_reorder_missing(client: AsyncClient):
    response = await client.post("/api/footer/999/reorder", json={"newPosition": 0})

    assert response.status_code == 404
    assert response.json() == {"error": "Footer content not found"}
