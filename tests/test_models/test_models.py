"""Tests for forum data models."""

from forum_client.models.base import DeleteRequest
from forum_client.models.base import PinRequest
from forum_client.models.base import pin_sort_key
from forum_client.models.comment import Comment
from forum_client.models.comment import CommentCreate
from forum_client.models.post import Post
from forum_client.models.post import PostCreate
from forum_client.models.user import User


class TestWireFormat:
    """Models read and write camelCase JSON."""

    def test_post_from_wire(self):
        post = Post.model_validate(
            {
                "id": 42,
                "topicId": 5,
                "title": "Hi",
                "content": "World",
                "author": "alice",
                "isPinned": True,
            }
        )

        assert post.topic_id == 5
        assert post.is_pinned is True

    def test_pin_flag_defaults_to_false(self):
        """Backends that predate pinning omit isPinned."""
        comment = Comment.model_validate(
            {"id": 1, "postId": 1, "content": "Hello everyone!", "author": "alice"}
        )

        assert comment.is_pinned is False

    def test_user_from_wire(self):
        user = User.model_validate({"id": 1, "username": "alice", "isModerator": True})

        assert user.is_moderator is True

    def test_post_create_body(self):
        body = PostCreate(topic_id=5, user_id=1, title="Hi", content="World").to_wire()

        assert body == {"topicId": 5, "userId": 1, "title": "Hi", "content": "World"}

    def test_comment_create_body(self):
        body = CommentCreate(post_id=3, user_id=2, content="Nice").to_wire()

        assert body == {"postId": 3, "userId": 2, "content": "Nice"}

    def test_delete_and_pin_bodies(self):
        assert DeleteRequest(id=7, user_id=1).to_wire() == {"id": 7, "userId": 1}
        assert PinRequest(id=7, user_id=1, pinned=True).to_wire() == {
            "id": 7,
            "userId": 1,
            "pinned": True,
        }


class TestPinSortKey:
    """Pinned entities sort first, ties by ascending id."""

    def test_sort_order(self, post_factory):
        posts = [
            post_factory(4),
            post_factory(3, is_pinned=True),
            post_factory(1),
            post_factory(9, is_pinned=True),
        ]

        ordered = sorted(posts, key=pin_sort_key)

        assert [p.id for p in ordered] == [3, 9, 1, 4]
