"""API test fixtures — FastAPI app over an injected store + httpx test client.

Invariants:
    - Every test gets a fresh BlogPostStore (no state shared through the module app)
    - `store` starts empty; `seeded_client` goes through the default seeded path

Design Decisions:
    - ASGITransport: requests run in-process, no server socket
"""

import pytest
from httpx import ASGITransport, AsyncClient

from blogposts.config import Settings
from blogposts.core.blog_post_store import BlogPostStore
from blogposts.main import create_app


@pytest.fixture
def store():
    return BlogPostStore()


@pytest.fixture
async def client(store):
    """Test client bound to an app built around the `store` fixture."""
    app = create_app(store)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def seeded_client():
    """Test client for an app that built and seeded its own store."""
    app = create_app(settings=Settings(_env_file=None, seed_posts=True))
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def existing_post(store):
    return store.create("First post", "Hello world", "Ada")
