"""Posts endpoints for the reference backend."""

import logging

from typing import Annotated

from fastapi import APIRouter
from fastapi import HTTPException
from fastapi import Query
from fastapi import Response
from fastapi import status

from forum_client.models.base import DeleteRequest
from forum_client.models.base import PinRequest
from forum_client.models.post import Post
from forum_client.models.post import PostCreate
from forum_client.models.post import PostUpdate
from forum_client.server.dependencies import StoreDep
from forum_client.server.dependencies import require_moderator
from forum_client.server.dependencies import require_user
from forum_client.server.store import ForumStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/posts", tags=["posts"])


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")


def _check_can_modify(
    store: ForumStore, user_id: int, post_id: int, action: str
) -> None:
    if store.get_post(post_id) is None:
        raise _not_found()
    if not store.can_modify_post(user_id, post_id):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Not allowed to {action} this post",
        )


@router.get("")
async def list_posts(
    store: StoreDep,
    topic_id: Annotated[int | None, Query(alias="topicId")] = None,
) -> list[Post]:
    """List the posts of a topic, pinned first."""
    if topic_id is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing topicId parameter",
        )
    return store.list_posts(topic_id)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_post(request: PostCreate, store: StoreDep) -> Post:
    """Create a post in a topic."""
    if request.topic_id <= 0 or not request.title or not request.content:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing topicId, userId, title, or content",
        )
    require_user(store, request.user_id)
    if store.get_topic(request.topic_id) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Topic not found"
        )

    post = store.create_post(
        request.topic_id, request.user_id, request.title, request.content
    )
    logger.info(f"Post {post.id} created in topic {post.topic_id} by {post.author}")
    return post


@router.put("")
async def update_post(request: PostUpdate, store: StoreDep) -> Post:
    """Edit a post. Only its author or a moderator may do so."""
    if request.id <= 0 or not request.title or not request.content:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing id, userId, title, or content",
        )
    require_user(store, request.user_id)
    _check_can_modify(store, request.user_id, request.id, "edit")

    post = store.update_post(request.id, request.title, request.content)
    return post


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(request: DeleteRequest, store: StoreDep) -> Response:
    """Delete a post and its comments."""
    if request.id <= 0:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Missing id or userId"
        )
    require_user(store, request.user_id)
    _check_can_modify(store, request.user_id, request.id, "delete")

    store.delete_post(request.id)
    logger.info(f"Post {request.id} deleted by user {request.user_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/pin")
async def pin_post(request: PinRequest, store: StoreDep) -> Post:
    """Pin or unpin a post. Moderators only."""
    require_moderator(store, request.user_id)
    post = store.set_post_pinned(request.id, request.pinned)
    if post is None:
        raise _not_found()
    logger.info(f"Post {post.id} {'pinned' if post.is_pinned else 'unpinned'}")
    return post
