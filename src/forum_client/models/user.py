"""User models for the forum client."""

from forum_client.models.base import ForumEntity
from forum_client.models.base import ForumModel


class User(ForumEntity):
    """Session principal returned by POST /login."""

    username: str
    is_moderator: bool = False


class LoginRequest(ForumModel):
    """Login body."""

    username: str
