"""Comments endpoints for the reference backend."""

import logging

from typing import Annotated

from fastapi import APIRouter
from fastapi import HTTPException
from fastapi import Query
from fastapi import Response
from fastapi import status

from forum_client.models.base import DeleteRequest
from forum_client.models.base import PinRequest
from forum_client.models.comment import Comment
from forum_client.models.comment import CommentCreate
from forum_client.models.comment import CommentUpdate
from forum_client.server.dependencies import StoreDep
from forum_client.server.dependencies import require_moderator
from forum_client.server.dependencies import require_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/comments", tags=["comments"])


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND, detail="Comment not found"
    )


@router.get("")
async def list_comments(
    store: StoreDep,
    post_id: Annotated[int | None, Query(alias="postId")] = None,
) -> list[Comment]:
    """List the comments of a post, pinned first."""
    if post_id is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing postId parameter",
        )
    return store.list_comments(post_id)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_comment(request: CommentCreate, store: StoreDep) -> Comment:
    if request.post_id <= 0 or not request.content:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing postId, userId, or content",
        )
    require_user(store, request.user_id)
    if store.get_post(request.post_id) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Post not found"
        )

    comment = store.create_comment(request.post_id, request.user_id, request.content)
    logger.info(f"Comment {comment.id} created on post {comment.post_id}")
    return comment


@router.put("")
async def update_comment(request: CommentUpdate, store: StoreDep) -> Comment:
    if request.id <= 0 or not request.content:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing id, userId, or content",
        )
    require_user(store, request.user_id)
    if store.get_comment(request.id) is None:
        raise _not_found()
    if not store.can_modify_comment(request.user_id, request.id):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not allowed to edit this comment",
        )

    return store.update_comment(request.id, request.content)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(request: DeleteRequest, store: StoreDep) -> Response:
    if request.id <= 0:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Missing id or userId"
        )
    require_user(store, request.user_id)
    if store.get_comment(request.id) is None:
        raise _not_found()
    if not store.can_modify_comment(request.user_id, request.id):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not allowed to delete this comment",
        )

    store.delete_comment(request.id)
    logger.info(f"Comment {request.id} deleted by user {request.user_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/pin")
async def pin_comment(request: PinRequest, store: StoreDep) -> Comment:
    """Pin or unpin a comment. Moderators only."""
    require_moderator(store, request.user_id)
    comment = store.set_comment_pinned(request.id, request.pinned)
    if comment is None:
        raise _not_found()
    return comment
