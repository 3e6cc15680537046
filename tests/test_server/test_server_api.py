"""Tests for the reference backend endpoints."""

import pytest

from forum_client.server.store import ForumStore


class TestHealthAndTopics:
    """Health and topic listing."""

    @pytest.mark.asyncio
    async def test_health(self, async_client):
        response = await async_client.get("/health")

        assert response.status_code == 200
        assert response.text == "OK\n"

    @pytest.mark.asyncio
    async def test_list_topics(self, async_client):
        response = await async_client.get("/topics")

        assert response.status_code == 200
        assert response.json() == [
            {"id": 1, "title": "General", "description": "General discussion"},
            {"id": 2, "title": "Homework", "description": "Ask about assignments"},
        ]


class TestLogin:
    """POST /login."""

    @pytest.mark.asyncio
    async def test_existing_moderator(self, async_client):
        response = await async_client.post("/login", json={"username": "alice"})

        assert response.status_code == 200
        assert response.json() == {"id": 1, "username": "alice", "isModerator": True}

    @pytest.mark.asyncio
    async def test_new_user_is_created(self, async_client, forum_store):
        response = await async_client.post("/login", json={"username": "carol"})

        assert response.status_code == 200
        body = response.json()
        assert body["username"] == "carol"
        assert body["isModerator"] is False
        assert forum_store.get_user_by_username("carol").id == body["id"]

    @pytest.mark.asyncio
    async def test_blank_username(self, async_client):
        response = await async_client.post("/login", json={"username": "  "})

        assert response.status_code == 400


class TestPosts:
    """/posts endpoints."""

    @pytest.mark.asyncio
    async def test_list_requires_topic_id(self, async_client):
        response = await async_client.get("/posts")

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_list_by_topic(self, async_client):
        response = await async_client.get("/posts", params={"topicId": 1})

        assert response.status_code == 200
        body = response.json()
        assert [p["id"] for p in body] == [1, 2]
        assert body[0] == {
            "id": 1,
            "topicId": 1,
            "title": "Welcome to the forum",
            "content": "Introduce yourself and say hi!",
            "author": "alice",
            "isPinned": False,
        }

    @pytest.mark.asyncio
    async def test_list_unknown_topic_is_empty(self, async_client):
        response = await async_client.get("/posts", params={"topicId": 99})

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_create(self, async_client):
        response = await async_client.post(
            "/posts",
            json={"topicId": 1, "userId": 2, "title": "Hi", "content": "World"},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["author"] == "bob"
        assert body["topicId"] == 1
        assert body["isPinned"] is False

    @pytest.mark.asyncio
    async def test_create_missing_fields(self, async_client):
        response = await async_client.post(
            "/posts",
            json={"topicId": 1, "userId": 2, "title": "", "content": "World"},
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_create_unknown_topic(self, async_client):
        response = await async_client.post(
            "/posts",
            json={"topicId": 99, "userId": 2, "title": "Hi", "content": "World"},
        )

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_create_unknown_user(self, async_client):
        response = await async_client.post(
            "/posts",
            json={"topicId": 1, "userId": 99, "title": "Hi", "content": "World"},
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_author_updates(self, async_client):
        response = await async_client.put(
            "/posts",
            json={"id": 2, "userId": 2, "title": "New", "content": "Body"},
        )

        assert response.status_code == 200
        assert response.json()["title"] == "New"

    @pytest.mark.asyncio
    async def test_non_author_update_forbidden(self, async_client):
        response = await async_client.put(
            "/posts",
            json={"id": 1, "userId": 2, "title": "New", "content": "Body"},
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_update_unknown_post(self, async_client):
        response = await async_client.put(
            "/posts",
            json={"id": 99, "userId": 1, "title": "New", "content": "Body"},
        )

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_moderator_deletes_and_comments_cascade(
        self, async_client, forum_store
    ):
        response = await async_client.request(
            "DELETE", "/posts", json={"id": 2, "userId": 1}
        )

        assert response.status_code == 204
        assert forum_store.get_post(2) is None
        assert forum_store.list_comments(2) == []

    @pytest.mark.asyncio
    async def test_non_author_delete_forbidden(self, async_client, forum_store):
        response = await async_client.request(
            "DELETE", "/posts", json={"id": 1, "userId": 2}
        )

        assert response.status_code == 403
        assert forum_store.get_post(1) is not None

    @pytest.mark.asyncio
    async def test_pin_orders_list(self, async_client):
        response = await async_client.post(
            "/posts/pin", json={"id": 2, "userId": 1, "pinned": True}
        )

        assert response.status_code == 200
        assert response.json()["isPinned"] is True

        listing = await async_client.get("/posts", params={"topicId": 1})
        assert [p["id"] for p in listing.json()] == [2, 1]

    @pytest.mark.asyncio
    async def test_pin_requires_moderator(self, async_client):
        response = await async_client.post(
            "/posts/pin", json={"id": 2, "userId": 2, "pinned": True}
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_pin_unknown_post(self, async_client):
        response = await async_client.post(
            "/posts/pin", json={"id": 99, "userId": 1, "pinned": True}
        )

        assert response.status_code == 404


class TestComments:
    """/comments endpoints."""

    @pytest.mark.asyncio
    async def test_list_requires_post_id(self, async_client):
        response = await async_client.get("/comments")

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_list_by_post(self, async_client):
        response = await async_client.get("/comments", params={"postId": 1})

        assert response.status_code == 200
        assert [(c["id"], c["author"]) for c in response.json()] == [
            (1, "alice"),
            (2, "bob"),
        ]

    @pytest.mark.asyncio
    async def test_create(self, async_client):
        response = await async_client.post(
            "/comments", json={"postId": 1, "userId": 2, "content": "Hey"}
        )

        assert response.status_code == 201
        assert response.json()["postId"] == 1

    @pytest.mark.asyncio
    async def test_create_on_unknown_post(self, async_client):
        response = await async_client.post(
            "/comments", json={"postId": 99, "userId": 2, "content": "Hey"}
        )

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_create_empty_content(self, async_client):
        response = await async_client.post(
            "/comments", json={"postId": 1, "userId": 2, "content": ""}
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_non_author_update_forbidden(self, async_client):
        response = await async_client.put(
            "/comments", json={"id": 1, "userId": 2, "content": "Mine"}
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_author_deletes(self, async_client, forum_store):
        response = await async_client.request(
            "DELETE", "/comments", json={"id": 2, "userId": 2}
        )

        assert response.status_code == 204
        assert forum_store.get_comment(2) is None

    @pytest.mark.asyncio
    async def test_pin_comment(self, async_client):
        response = await async_client.post(
            "/comments/pin", json={"id": 2, "userId": 1, "pinned": True}
        )

        assert response.status_code == 200
        listing = await async_client.get("/comments", params={"postId": 1})
        assert [c["id"] for c in listing.json()] == [2, 1]


class TestForumStore:
    """Store behavior not visible through a single request."""

    def test_empty_store(self):
        store = ForumStore()

        assert store.list_topics() == []
        assert store.get_user(1) is None

    def test_get_or_create_is_idempotent(self, forum_store):
        first = forum_store.get_or_create_user("dave")
        second = forum_store.get_or_create_user("dave")

        assert first.id == second.id
        assert first.is_moderator is False

    def test_moderator_can_modify_any_post(self, forum_store):
        assert forum_store.can_modify_post(1, 2) is True
        assert forum_store.can_modify_post(2, 1) is False
        assert forum_store.can_modify_post(2, 99) is False
