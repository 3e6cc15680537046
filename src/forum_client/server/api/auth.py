"""Login endpoint for the reference backend."""

import logging

from fastapi import APIRouter
from fastapi import HTTPException
from fastapi import status

from forum_client.models.user import LoginRequest
from forum_client.models.user import User
from forum_client.server.dependencies import StoreDep

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/login")
async def login(request: LoginRequest, store: StoreDep) -> User:
    """Get-or-create a user by username. New users are not moderators."""
    username = request.username.strip()
    if not username:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username cannot be empty",
        )
    user = store.get_or_create_user(username)
    logger.info(f"Login: {user.username} (id={user.id})")
    return user
