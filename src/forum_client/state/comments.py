"""Comment list controller: the comments of the selected post."""

from forum_client.models.base import DeleteRequest
from forum_client.models.base import PinRequest
from forum_client.models.comment import Comment
from forum_client.models.comment import CommentCreate
from forum_client.models.comment import CommentUpdate
from forum_client.models.user import User
from forum_client.state.controller import OwnedEntityListController


class CommentListController(OwnedEntityListController[Comment]):
    """Controller for GET/POST/PUT/DELETE /comments and POST /comments/pin."""

    label = "comments"
    entity_name = "comment"
    parent_name = "post"
    required_fields = ("content",)
    required_message = "Comment content is required."

    def _belongs(self, item: Comment, parent_id: int | None) -> bool:
        return parent_id is None or item.post_id == parent_id

    async def _fetch(self, parent_id: int | None) -> list[Comment]:
        if parent_id is None:
            return []
        return await self._api.list_comments(parent_id)

    async def _create(
        self, parent_id: int, user: User, fields: dict[str, str]
    ) -> Comment:
        return await self._api.create_comment(
            CommentCreate(post_id=parent_id, user_id=user.id, content=fields["content"])
        )

    async def _update(
        self, entity_id: int, user: User, fields: dict[str, str]
    ) -> Comment:
        return await self._api.update_comment(
            CommentUpdate(id=entity_id, user_id=user.id, content=fields["content"])
        )

    async def _delete(self, entity_id: int, user: User) -> None:
        await self._api.delete_comment(DeleteRequest(id=entity_id, user_id=user.id))

    async def _pin(self, entity_id: int, user: User, pinned: bool) -> Comment:
        return await self._api.pin_comment(
            PinRequest(id=entity_id, user_id=user.id, pinned=pinned)
        )
