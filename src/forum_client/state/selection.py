"""Selection coordinator: which topic and which post are active."""

import logging

from forum_client.models.post import Post
from forum_client.models.topic import Topic
from forum_client.state.base import Outcome
from forum_client.state.comments import CommentListController
from forum_client.state.posts import PostListController

logger = logging.getLogger(__name__)


class SelectionCoordinator:
    """Drives the post and comment lists from the current selection.

    Two axes: no topic / topic and no post / post. The post axis returns to
    "no post" whenever the topic axis changes, and no post or comment from a
    previous parent survives a parent change.
    """

    def __init__(self, posts: PostListController, comments: CommentListController):
        self.posts = posts
        self.comments = comments
        self.selected_topic: Topic | None = None
        self.selected_post: Post | None = None

        posts.on_removed(self._post_removed)
        posts.on_replaced(self._post_replaced)

    async def select_topic(self, topic: Topic) -> Outcome:
        """Make topic active and load its posts.

        Selecting the already-selected topic re-fetches its posts and keeps
        the current list until the response arrives.
        """
        same_topic = (
            self.selected_topic is not None and self.selected_topic.id == topic.id
        )
        logger.info(f"Selecting topic {topic.id} ({topic.title})")
        self.selected_topic = topic
        self.clear_post()
        if same_topic:
            self.posts.reset_forms()
        else:
            self.posts.clear()
        return await self.posts.load(topic.id)

    async def select_post(self, post: Post) -> Outcome:
        """Make post active and load its comments."""
        same_post = self.selected_post is not None and self.selected_post.id == post.id
        logger.info(f"Selecting post {post.id} ({post.title})")
        self.selected_post = post
        if same_post:
            self.comments.reset_forms()
        else:
            self.comments.clear()
        return await self.comments.load(post.id)

    def clear_topic(self) -> None:
        """Return to the no-topic state."""
        self.selected_topic = None
        self.clear_post()
        self.posts.clear()

    def clear_post(self) -> None:
        """Return to the no-post state."""
        self.selected_post = None
        self.comments.clear()

    def _post_removed(self, post_id: int) -> None:
        if self.selected_post is not None and self.selected_post.id == post_id:
            logger.info(f"Selected post {post_id} was deleted")
            self.clear_post()

    def _post_replaced(self, post: Post) -> None:
        if self.selected_post is not None and self.selected_post.id == post.id:
            self.selected_post = post
