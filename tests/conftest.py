"""Test configuration and fixtures for the forum client tests."""

from unittest.mock import AsyncMock

import httpx
import pytest
import pytest_asyncio

from httpx import ASGITransport

from forum_client.api.client import ForumAPIClient
from forum_client.config.client import ClientSettings
from forum_client.config.server import ServerSettings
from forum_client.models.comment import Comment
from forum_client.models.post import Post
from forum_client.models.topic import Topic
from forum_client.models.user import User
from forum_client.server.main import create_app
from forum_client.server.store import ForumStore
from forum_client.state.prompts import ScriptedPrompts
from forum_client.state.session import SessionContext


@pytest.fixture
def client_settings() -> ClientSettings:
    """Client settings pointing at the in-process test backend."""
    return ClientSettings(base_url="http://test", request_timeout=None)


@pytest.fixture
def moderator() -> User:
    """Moderator principal."""
    return User(id=1, username="alice", is_moderator=True)


@pytest.fixture
def member() -> User:
    """Regular, non-moderator principal."""
    return User(id=2, username="bob", is_moderator=False)


@pytest.fixture
def sample_topic() -> Topic:
    return Topic(id=5, title="General", description="General discussion")


@pytest.fixture
def other_topic() -> Topic:
    return Topic(id=6, title="Homework", description="Ask about assignments")


@pytest.fixture
def post_factory():
    """Build posts with sensible defaults."""

    def _create_post(
        post_id: int,
        topic_id: int = 5,
        author: str = "alice",
        is_pinned: bool = False,
        title: str | None = None,
        content: str | None = None,
    ) -> Post:
        return Post(
            id=post_id,
            topic_id=topic_id,
            title=title or f"Post {post_id}",
            content=content or f"Content of post {post_id}",
            author=author,
            is_pinned=is_pinned,
        )

    return _create_post


@pytest.fixture
def comment_factory():
    """Build comments with sensible defaults."""

    def _create_comment(
        comment_id: int,
        post_id: int = 10,
        author: str = "bob",
        is_pinned: bool = False,
        content: str | None = None,
    ) -> Comment:
        return Comment(
            id=comment_id,
            post_id=post_id,
            content=content or f"Comment {comment_id}",
            author=author,
            is_pinned=is_pinned,
        )

    return _create_comment


@pytest.fixture
def mock_api():
    """ForumAPIClient double; every endpoint is an AsyncMock."""
    api = AsyncMock(spec=ForumAPIClient)
    api.base_url = "http://test"
    return api


@pytest.fixture
def prompts() -> ScriptedPrompts:
    """Prompts that confirm everything and record alerts."""
    return ScriptedPrompts(confirm_result=True)


@pytest.fixture
def session(mock_api) -> SessionContext:
    """Session bound to the mocked API, nobody logged in."""
    return SessionContext(mock_api)


@pytest.fixture
def forum_store() -> ForumStore:
    """Reference backend store with the demo data."""
    return ForumStore.with_seed_data()


@pytest.fixture
def server_app(forum_store):
    """Reference backend app backed by forum_store."""
    return create_app(ServerSettings(seed_data=False), store=forum_store)


@pytest_asyncio.fixture
async def async_client(server_app):
    """Raw async HTTP client talking to the reference backend in-process."""
    async with httpx.AsyncClient(
        transport=ASGITransport(app=server_app), base_url="http://test"
    ) as client:
        yield client


@pytest_asyncio.fixture
async def live_api(server_app, client_settings):
    """ForumAPIClient wired to the reference backend in-process."""
    http_client = httpx.AsyncClient(
        transport=ASGITransport(app=server_app), base_url="http://test"
    )
    api = ForumAPIClient(http_client=http_client, settings=client_settings)
    yield api
    await api.aclose()
