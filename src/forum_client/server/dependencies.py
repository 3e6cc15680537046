"""FastAPI dependencies for the reference backend."""

from typing import Annotated

from fastapi import Depends
from fastapi import HTTPException
from fastapi import Request
from fastapi import status

from forum_client.models.user import User
from forum_client.server.store import ForumStore


def get_store(request: Request) -> ForumStore:
    """The store attached to the running application."""
    return request.app.state.store


StoreDep = Annotated[ForumStore, Depends(get_store)]


def require_user(store: ForumStore, user_id: int) -> User:
    """Resolve a client-supplied user id.

    The id is trusted as sent; there is no session token.
    """
    if user_id <= 0:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Missing userId"
        )
    user = store.get_user(user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Unknown user"
        )
    return user


def require_moderator(store: ForumStore, user_id: int) -> User:
    user = require_user(store, user_id)
    if not user.is_moderator:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail="Moderator role required"
        )
    return user
