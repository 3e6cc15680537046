"""Post models for the forum client."""

from forum_client.models.base import ForumEntity
from forum_client.models.base import ForumModel


class Post(ForumEntity):
    """A thread within a topic."""

    topic_id: int
    title: str
    content: str
    author: str
    is_pinned: bool = False


class PostCreate(ForumModel):
    """Post creation body."""

    topic_id: int
    user_id: int
    title: str
    content: str


class PostUpdate(ForumModel):
    """Post update body."""

    id: int
    user_id: int
    title: str
    content: str
