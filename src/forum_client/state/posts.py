"""Post list controller: the posts of the selected topic."""

from forum_client.models.base import DeleteRequest
from forum_client.models.base import PinRequest
from forum_client.models.post import Post
from forum_client.models.post import PostCreate
from forum_client.models.post import PostUpdate
from forum_client.models.user import User
from forum_client.state.controller import OwnedEntityListController


class PostListController(OwnedEntityListController[Post]):
    """Controller for GET/POST/PUT/DELETE /posts and POST /posts/pin."""

    label = "posts"
    entity_name = "post"
    parent_name = "topic"
    required_fields = ("title", "content")
    required_message = "Title and content are required."

    def _belongs(self, item: Post, parent_id: int | None) -> bool:
        return parent_id is None or item.topic_id == parent_id

    async def _fetch(self, parent_id: int | None) -> list[Post]:
        if parent_id is None:
            return []
        return await self._api.list_posts(parent_id)

    async def _create(self, parent_id: int, user: User, fields: dict[str, str]) -> Post:
        return await self._api.create_post(
            PostCreate(
                topic_id=parent_id,
                user_id=user.id,
                title=fields["title"],
                content=fields["content"],
            )
        )

    async def _update(self, entity_id: int, user: User, fields: dict[str, str]) -> Post:
        return await self._api.update_post(
            PostUpdate(
                id=entity_id,
                user_id=user.id,
                title=fields["title"],
                content=fields["content"],
            )
        )

    async def _delete(self, entity_id: int, user: User) -> None:
        await self._api.delete_post(DeleteRequest(id=entity_id, user_id=user.id))

    async def _pin(self, entity_id: int, user: User, pinned: bool) -> Post:
        return await self._api.pin_post(
            PinRequest(id=entity_id, user_id=user.id, pinned=pinned)
        )
