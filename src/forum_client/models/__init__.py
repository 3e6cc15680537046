"""Data models for the forum client."""

from forum_client.models.base import AuthoredEntity
from forum_client.models.base import DeleteRequest
from forum_client.models.base import ForumEntity
from forum_client.models.base import ForumModel
from forum_client.models.base import PinRequest
from forum_client.models.base import pin_sort_key
from forum_client.models.comment import Comment
from forum_client.models.comment import CommentCreate
from forum_client.models.comment import CommentUpdate
from forum_client.models.post import Post
from forum_client.models.post import PostCreate
from forum_client.models.post import PostUpdate
from forum_client.models.topic import Topic
from forum_client.models.user import LoginRequest
from forum_client.models.user import User

__all__ = [
    "AuthoredEntity",
    "Comment",
    "CommentCreate",
    "CommentUpdate",
    "DeleteRequest",
    "ForumEntity",
    "ForumModel",
    "LoginRequest",
    "PinRequest",
    "Post",
    "PostCreate",
    "PostUpdate",
    "Topic",
    "User",
    "pin_sort_key",
]
