import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio

BODY = "Oulu has a growing housing market driven by its universities and tech sector."


def post(**overrides):
    data = {"title": "Living in Oulu!", "content": BODY, "category": "Guides"}
    data.update(overrides)
    return data


async def test_slug_derived_from_title(client: AsyncClient):
    response = await client.post("/api/posts", json=post())

    assert response.status_code == 201
    body = response.json()
    assert body["slug"] == "living-in-oulu"
    assert body["isPublished"] is False
    assert body["publishedAt"] is None


async def test_publishing_stamps_date(client: AsyncClient):
    response = await client.post("/api/posts", json=post(isPublished=True))

    assert response.json()["publishedAt"] is not None


async def test_underivable_slug(client: AsyncClient):
    response = await client.post("/api/posts", json=post(title="!!!!!!"))

    assert response.status_code == 400


async def test_invalid_explicit_slug(client: AsyncClient):
    response = await client.post("/api/posts", json=post(slug="Not A Slug"))

    assert response.status_code == 400


async def test_duplicate_slug(client: AsyncClient):
    await client.post("/api/posts", json=post())

    response = await client.post("/api/posts", json=post())

    assert response.status_code == 409


async def test_short_content_rejected(client: AsyncClient):
    response = await client.post("/api/posts", json=post(content="too short"))

    assert response.status_code == 400


async def test_public_reads_only_published(client: AsyncClient, make_user):
    author = await make_user(username="writer", name="Writer")
    await client.post("/api/posts", json=post(title="Draft post here"))
    await client.post("/api/posts", json=post(title="Public post here", isPublished=True, authorId=author.id))

    listing = await client.get("/api/posts")
    body = listing.json()
    assert body["total"] == 1
    assert body["page"] == 1
    assert body["posts"][0]["author"]["name"] == "Writer"

    assert (await client.get("/api/posts/slug/public-post-here")).status_code == 200
    assert (await client.get("/api/posts/slug/draft-post-here")).status_code == 404
    assert (await client.get("/api/posts/all")).json()["total"] == 2


async def test_category_filter(client: AsyncClient):
    await client.post("/api/posts", json=post(isPublished=True))
    await client.post("/api/posts", json=post(title="Market report", category="Market", isPublished=True))

    response = await client.get("/api/posts", params={"category": "Market"})

    assert [p["slug"] for p in response.json()["posts"]] == ["market-report"]


async def test_update_retitles_and_publishes(client: AsyncClient):
    post_id = (await client.post("/api/posts", json=post())).json()["id"]

    response = await client.put(f"/api/posts/{post_id}", json={"title": "Living in Tampere", "isPublished": True})

    body = response.json()
    assert body["slug"] == "living-in-tampere"
    assert body["isPublished"] is True
    assert body["publishedAt"] is not None


async def test_update_slug_collision(client: AsyncClient):
    await client.post("/api/posts", json=post())
    other_id = (await client.post("/api/posts", json=post(title="Another story"))).json()["id"]

    response = await client.put(f"/api/posts/{other_id}", json={"slug": "living-in-oulu"})

    assert response.status_code == 409


async def test_get_and_delete(client: AsyncClient):
    post_id = (await client.post("/api/posts", json=post())).json()["id"]

    assert (await client.get(f"/api/posts/{post_id}")).json()["title"] == "Living in Oulu!"
    assert (await client.delete(f"/api/posts/{post_id}")).status_code == 204
    assert (await client.get(f"/api/posts/{post_id}")).status_code == 404
