"""Comment models for the forum client."""

from forum_client.models.base import ForumEntity
from forum_client.models.base import ForumModel


class Comment(ForumEntity):
    """A reply within a post."""

    post_id: int
    content: str
    author: str
    is_pinned: bool = False


class CommentCreate(ForumModel):
    """Comment creation body."""

    post_id: int
    user_id: int
    content: str


class CommentUpdate(ForumModel):
    """Comment update body."""

    id: int
    user_id: int
    content: str
