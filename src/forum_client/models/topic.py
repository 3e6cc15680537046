"""Topic model for the forum client."""

from forum_client.models.base import ForumEntity


class Topic(ForumEntity):
    """Top-level discussion category."""

    title: str
    description: str = ""
