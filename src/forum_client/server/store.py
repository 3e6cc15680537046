"""In-memory storage for the reference forum backend."""

import logging

from itertools import count

from pydantic import BaseModel

from forum_client.models.base import pin_sort_key
from forum_client.models.comment import Comment
from forum_client.models.post import Post
from forum_client.models.topic import Topic
from forum_client.models.user import User

logger = logging.getLogger(__name__)


class PostRecord(BaseModel):
    """Stored post; the author is kept as a user id."""

    id: int
    topic_id: int
    user_id: int
    title: str
    content: str
    is_pinned: bool = False


class CommentRecord(BaseModel):
    """Stored comment; the author is kept as a user id."""

    id: int
    post_id: int
    user_id: int
    content: str
    is_pinned: bool = False


class ForumStore:
    """Users, topics, posts and comments with auto-increment ids.

    Reads return the wire models (author resolved to a username); lists are
    ordered pinned first, then by id.
    """

    def __init__(self):
        self._users: dict[int, User] = {}
        self._topics: dict[int, Topic] = {}
        self._posts: dict[int, PostRecord] = {}
        self._comments: dict[int, CommentRecord] = {}
        self._user_ids = count(1)
        self._topic_ids = count(1)
        self._post_ids = count(1)
        self._comment_ids = count(1)

    @classmethod
    def with_seed_data(cls) -> "ForumStore":
        """Store populated with two users, two topics and a few threads."""
        store = cls()
        alice = store.add_user("alice", is_moderator=True)
        bob = store.add_user("bob")
        general = store.add_topic("General", "General discussion")
        homework = store.add_topic("Homework", "Ask about assignments")

        welcome = store.create_post(
            general.id,
            alice.id,
            "Welcome to the forum",
            "Introduce yourself and say hi!",
        )
        chat = store.create_post(
            general.id,
            bob.id,
            "General chat",
            "Talk about anything not related to homework.",
        )
        math = store.create_post(
            homework.id,
            alice.id,
            "Math homework question",
            "I am stuck on question 3 of the worksheet.",
        )
        deadline = store.create_post(
            homework.id,
            bob.id,
            "Project deadline reminder",
            "Don't forget the assignment is due next week.",
        )

        store.create_comment(welcome.id, alice.id, "Hello everyone!")
        store.create_comment(welcome.id, bob.id, "Nice to meet you all.")
        store.create_comment(chat.id, bob.id, "I love random chats.")
        store.create_comment(
            math.id, alice.id, "Same, I'm also stuck on that question."
        )
        store.create_comment(deadline.id, bob.id, "Thanks for the reminder!")
        logger.info("Seeded forum store with demo data")
        return store

    # Users

    def add_user(self, username: str, is_moderator: bool = False) -> User:
        user = User(
            id=next(self._user_ids), username=username, is_moderator=is_moderator
        )
        self._users[user.id] = user
        return user

    def get_user(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> User | None:
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    def get_or_create_user(self, username: str) -> User:
        """Find a user by username or create a non-moderator one."""
        user = self.get_user_by_username(username)
        if user is None:
            user = self.add_user(username)
            logger.info(f"Created user {username} (id={user.id})")
        return user

    def is_moderator(self, user_id: int) -> bool:
        user = self._users.get(user_id)
        return user is not None and user.is_moderator

    # Topics

    def add_topic(self, title: str, description: str) -> Topic:
        topic = Topic(id=next(self._topic_ids), title=title, description=description)
        self._topics[topic.id] = topic
        return topic

    def get_topic(self, topic_id: int) -> Topic | None:
        return self._topics.get(topic_id)

    def list_topics(self) -> list[Topic]:
        return sorted(self._topics.values(), key=lambda topic: topic.id)

    # Posts

    def _post_view(self, record: PostRecord) -> Post:
        return Post(
            id=record.id,
            topic_id=record.topic_id,
            title=record.title,
            content=record.content,
            author=self._users[record.user_id].username,
            is_pinned=record.is_pinned,
        )

    def get_post(self, post_id: int) -> Post | None:
        record = self._posts.get(post_id)
        return self._post_view(record) if record else None

    def list_posts(self, topic_id: int) -> list[Post]:
        posts = [
            self._post_view(record)
            for record in self._posts.values()
            if record.topic_id == topic_id
        ]
        return sorted(posts, key=pin_sort_key)

    def create_post(
        self, topic_id: int, user_id: int, title: str, content: str
    ) -> Post:
        record = PostRecord(
            id=next(self._post_ids),
            topic_id=topic_id,
            user_id=user_id,
            title=title,
            content=content,
        )
        self._posts[record.id] = record
        return self._post_view(record)

    def update_post(self, post_id: int, title: str, content: str) -> Post | None:
        record = self._posts.get(post_id)
        if record is None:
            return None
        record.title = title
        record.content = content
        return self._post_view(record)

    def set_post_pinned(self, post_id: int, pinned: bool) -> Post | None:
        record = self._posts.get(post_id)
        if record is None:
            return None
        record.is_pinned = pinned
        return self._post_view(record)

    def delete_post(self, post_id: int) -> bool:
        """Delete a post together with its comments."""
        if self._posts.pop(post_id, None) is None:
            return False
        orphaned = [c.id for c in self._comments.values() if c.post_id == post_id]
        for comment_id in orphaned:
            del self._comments[comment_id]
        return True

    def can_modify_post(self, user_id: int, post_id: int) -> bool:
        record = self._posts.get(post_id)
        if record is None:
            return False
        return record.user_id == user_id or self.is_moderator(user_id)

    # Comments

    def _comment_view(self, record: CommentRecord) -> Comment:
        return Comment(
            id=record.id,
            post_id=record.post_id,
            content=record.content,
            author=self._users[record.user_id].username,
            is_pinned=record.is_pinned,
        )

    def get_comment(self, comment_id: int) -> Comment | None:
        record = self._comments.get(comment_id)
        return self._comment_view(record) if record else None

    def list_comments(self, post_id: int) -> list[Comment]:
        comments = [
            self._comment_view(record)
            for record in self._comments.values()
            if record.post_id == post_id
        ]
        return sorted(comments, key=pin_sort_key)

    def create_comment(self, post_id: int, user_id: int, content: str) -> Comment:
        record = CommentRecord(
            id=next(self._comment_ids),
            post_id=post_id,
            user_id=user_id,
            content=content,
        )
        self._comments[record.id] = record
        return self._comment_view(record)

    def update_comment(self, comment_id: int, content: str) -> Comment | None:
        record = self._comments.get(comment_id)
        if record is None:
            return None
        record.content = content
        return self._comment_view(record)

    def set_comment_pinned(self, comment_id: int, pinned: bool) -> Comment | None:
        record = self._comments.get(comment_id)
        if record is None:
            return None
        record.is_pinned = pinned
        return self._comment_view(record)

    def delete_comment(self, comment_id: int) -> bool:
        return self._comments.pop(comment_id, None) is not None

    def can_modify_comment(self, user_id: int, comment_id: int) -> bool:
        record = self._comments.get(comment_id)
        if record is None:
            return False
        return record.user_id == user_id or self.is_moderator(user_id)
