"""Forum client application state: session, lists and selection in one place."""

import logging

from typing import Self

from forum_client.api.client import ForumAPIClient
from forum_client.config.client import ClientSettings
from forum_client.state.base import Outcome
from forum_client.state.comments import CommentListController
from forum_client.state.posts import PostListController
from forum_client.state.prompts import ScriptedPrompts
from forum_client.state.prompts import UserPrompts
from forum_client.state.selection import SelectionCoordinator
from forum_client.state.session import SessionContext
from forum_client.state.topics import TopicListController

logger = logging.getLogger(__name__)


class ForumClientApp:
    """Everything a forum view renders, wired together."""

    def __init__(self, api: ForumAPIClient, prompts: UserPrompts | None = None):
        self.api = api
        self.prompts = prompts or ScriptedPrompts()
        self.session = SessionContext(api)
        self.topics = TopicListController(api, self.session, self.prompts)
        self.posts = PostListController(api, self.session, self.prompts)
        self.comments = CommentListController(api, self.session, self.prompts)
        self.selection = SelectionCoordinator(self.posts, self.comments)

    @classmethod
    def from_settings(
        cls, settings: ClientSettings, prompts: UserPrompts | None = None
    ) -> "ForumClientApp":
        return cls(ForumAPIClient.from_settings(settings), prompts)

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.api.aclose()

    async def mount(self) -> Outcome:
        """Initial load: fetch the topic list."""
        logger.info(f"Mounting forum client against {self.api.base_url}")
        return await self.topics.load()

    async def login(self, username: str) -> Outcome:
        return await self.session.login(username)

    def logout(self) -> None:
        self.session.logout()

    async def select_topic(self, topic_id: int) -> Outcome:
        """Select a loaded topic by id."""
        topic = self.topics.get(topic_id)
        if topic is None:
            return Outcome.INVALID
        return await self.selection.select_topic(topic)

    async def select_post(self, post_id: int) -> Outcome:
        """Select a loaded post by id."""
        post = self.posts.get(post_id)
        if post is None:
            return Outcome.INVALID
        return await self.selection.select_post(post)
