"""Unit tests for the blog posts repository."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from homeharbor.core.database.entities import Post
from homeharbor.core.database.repositories.posts import PostRepository


def _at(day: int) -> datetime:
    return datetime(2025, 3, day, tzinfo=timezone.utc)


@pytest.fixture
def repository(session):
    return PostRepository(session)


@pytest.fixture
async def posts(repository, make_user):
    author = await make_user(username="writer", name="Writer")
    rows = [
        Post(title="Old", slug="old", content="...", is_published=True, published_at=_at(1), category="tips", author_id=author.id),
        Post(title="New", slug="new", content="...", is_published=True, published_at=_at(10), category="market"),
        Post(title="Unstamped", slug="unstamped", content="...", is_published=True, created_at=_at(5)),
        Post(title="Draft", slug="draft", content="...", created_at=_at(20)),
    ]
    return [await repository.create(row) for row in rows]


async def test_published_orders_by_publication_then_creation(repository, posts):
    rows, total = await repository.published()

    assert total == 3
    assert [p.slug for p in rows] == ["new", "unstamped", "old"]


async def test_published_by_category(repository, posts):
    rows, total = await repository.published(category="tips")

    assert total == 1
    assert rows[0].slug == "old"


async def test_all_posts_includes_drafts(repository, posts):
    rows, total = await repository.all_posts(page=1, limit=2)

    assert total == 4
    assert len(rows) == 2


async def test_get_by_slug_respects_published_only(repository, posts):
    assert (await repository.get_by_slug("draft")).title == "Draft"
    assert await repository.get_by_slug("draft", published_only=True) is None


async def test_slug_taken(repository, posts):
    old = posts[0]

    assert await repository.slug_taken("old")
    assert not await repository.slug_taken("old", exclude_id=old.id)
    assert not await repository.slug_taken("fresh")


async def test_authors_for(repository, posts):
    authors = await repository.authors_for(posts)

    assert [user.name for user in authors.values()] == ["Writer"]
    assert await repository.authors_for(posts[1:]) == {}
