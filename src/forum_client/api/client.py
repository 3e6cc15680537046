"""HTTP client for the forum backend REST API."""

import logging

from typing import Any
from typing import Self

import httpx

from pydantic import TypeAdapter

from forum_client.api.errors import ForumAPIError
from forum_client.config.client import ClientSettings
from forum_client.config.client import get_client_settings
from forum_client.models.base import DeleteRequest
from forum_client.models.base import PinRequest
from forum_client.models.comment import Comment
from forum_client.models.comment import CommentCreate
from forum_client.models.comment import CommentUpdate
from forum_client.models.post import Post
from forum_client.models.post import PostCreate
from forum_client.models.post import PostUpdate
from forum_client.models.topic import Topic
from forum_client.models.user import LoginRequest
from forum_client.models.user import User

logger = logging.getLogger(__name__)

_topics_adapter = TypeAdapter(list[Topic] | None)
_posts_adapter = TypeAdapter(list[Post] | None)
_comments_adapter = TypeAdapter(list[Comment] | None)
_post_adapter = TypeAdapter(Post)
_comment_adapter = TypeAdapter(Comment)
_user_adapter = TypeAdapter(User)


class ForumAPIClient:
    """Thin async wrapper over the forum backend endpoints.

    Every method issues exactly one request. Non-2xx responses raise
    ForumAPIError carrying the status code. There are no retries and no
    cancellation; timeouts are whatever the settings say (none by default).
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        settings: ClientSettings | None = None,
    ):
        self._settings = settings or get_client_settings()
        if http_client is None:
            http_client = httpx.AsyncClient(
                base_url=base_url or self._settings.base_url,
                timeout=self._settings.request_timeout,
                headers={"User-Agent": self._settings.user_agent},
            )
        self._http = http_client

    @classmethod
    def from_settings(cls, settings: ClientSettings) -> "ForumAPIClient":
        """Build a client from explicit settings."""
        return cls(settings=settings)

    @property
    def base_url(self) -> str:
        return str(self._http.base_url)

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._http.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> httpx.Response:
        try:
            response = await self._http.request(
                method, path, params=params, json=body
            )
        except httpx.HTTPError as e:
            logger.warning(f"{method} {path} failed before a response: {e}")
            raise ForumAPIError(None, f"Network error: {e}") from e

        logger.debug(f"{method} {path} -> {response.status_code}")
        if not response.is_success:
            logger.warning(f"{method} {path} returned HTTP {response.status_code}")
            raise ForumAPIError(response.status_code)
        return response

    @staticmethod
    def _decode(response: httpx.Response, adapter: TypeAdapter) -> Any:
        try:
            return adapter.validate_json(response.content)
        except ValueError as e:
            status_code = response.status_code
            logger.warning(f"Malformed response body (HTTP {status_code}): {e}")
            raise ForumAPIError(
                status_code, f"Malformed response (HTTP {status_code})"
            ) from e

    async def _get_list(
        self, path: str, adapter: TypeAdapter, params: dict[str, Any] | None = None
    ) -> list:
        response = await self._request("GET", path, params=params)
        # The backend encodes an empty collection as JSON null
        return self._decode(response, adapter) or []

    async def health(self) -> bool:
        """Check that the backend answers GET /health."""
        try:
            await self._request("GET", "/health")
        except ForumAPIError:
            return False
        return True

    async def login(self, request: LoginRequest) -> User:
        """Get-or-create a user by username."""
        response = await self._request("POST", "/login", body=request.to_wire())
        return self._decode(response, _user_adapter)

    async def list_topics(self) -> list[Topic]:
        """Fetch every topic."""
        return await self._get_list("/topics", _topics_adapter)

    async def list_posts(self, topic_id: int) -> list[Post]:
        """Fetch the posts of one topic."""
        return await self._get_list(
            "/posts", _posts_adapter, params={"topicId": topic_id}
        )

    async def create_post(self, request: PostCreate) -> Post:
        response = await self._request("POST", "/posts", body=request.to_wire())
        return self._decode(response, _post_adapter)

    async def update_post(self, request: PostUpdate) -> Post:
        response = await self._request("PUT", "/posts", body=request.to_wire())
        return self._decode(response, _post_adapter)

    async def delete_post(self, request: DeleteRequest) -> None:
        """Delete a post; any 2xx (including 204 No Content) is success."""
        await self._request("DELETE", "/posts", body=request.to_wire())

    async def pin_post(self, request: PinRequest) -> Post:
        response = await self._request("POST", "/posts/pin", body=request.to_wire())
        return self._decode(response, _post_adapter)

    async def list_comments(self, post_id: int) -> list[Comment]:
        """Fetch the comments of one post."""
        return await self._get_list(
            "/comments", _comments_adapter, params={"postId": post_id}
        )

    async def create_comment(self, request: CommentCreate) -> Comment:
        response = await self._request("POST", "/comments", body=request.to_wire())
        return self._decode(response, _comment_adapter)

    async def update_comment(self, request: CommentUpdate) -> Comment:
        response = await self._request("PUT", "/comments", body=request.to_wire())
        return self._decode(response, _comment_adapter)

    async def delete_comment(self, request: DeleteRequest) -> None:
        """Delete a comment; any 2xx (including 204 No Content) is success."""
        await self._request("DELETE", "/comments", body=request.to_wire())

    async def pin_comment(self, request: PinRequest) -> Comment:
        response = await self._request(
            "POST", "/comments/pin", body=request.to_wire()
        )
        return self._decode(response, _comment_adapter)
