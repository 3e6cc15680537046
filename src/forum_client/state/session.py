"""Session context: the logged-in principal and authorization checks."""

import logging

from forum_client.api.client import ForumAPIClient
from forum_client.api.errors import ForumClientError
from forum_client.models.base import AuthoredEntity
from forum_client.models.user import LoginRequest
from forum_client.models.user import User
from forum_client.state.base import Outcome

logger = logging.getLogger(__name__)


class SessionContext:
    """Holds the current user.

    The principal is the only source of truth for authorization; controllers
    read it at the moment of each action, so a new login takes effect on the
    next action without reloading any list.
    """

    def __init__(self, api: ForumAPIClient):
        self._api = api
        self.current_user: User | None = None
        self.error: str | None = None
        self.logging_in = False
        self._epoch = 0

    @property
    def is_authenticated(self) -> bool:
        return self.current_user is not None

    @property
    def is_moderator(self) -> bool:
        return self.current_user is not None and self.current_user.is_moderator

    def can_modify(self, entity: AuthoredEntity) -> bool:
        """True if the current user authored the entity or is a moderator."""
        user = self.current_user
        if user is None:
            return False
        return user.username == entity.author or user.is_moderator

    async def login(self, username: str) -> Outcome:
        """Log in as username, creating the user on the backend if needed.

        A failed login keeps whatever session was active before.
        """
        username = username.strip()
        if not username:
            self.error = "Username is required."
            return Outcome.INVALID

        epoch = self._epoch
        self.logging_in = True
        self.error = None
        try:
            user = await self._api.login(LoginRequest(username=username))
        except ForumClientError as e:
            if epoch != self._epoch:
                return Outcome.STALE
            logger.warning(f"Login failed for {username}: {e}")
            self.error = f"Login failed: {e}"
            return Outcome.FAILED
        finally:
            self.logging_in = False

        # Logged out while the request was in flight
        if epoch != self._epoch:
            logger.debug(f"Discarding login for {user.username}")
            return Outcome.STALE

        self.current_user = user
        logger.info(f"Logged in as {user.username} (id={user.id})")
        return Outcome.SUCCESS

    def logout(self) -> None:
        """Drop the principal. No request is sent.

        A login still in flight is discarded when it completes.
        """
        self._epoch += 1
        if self.current_user is not None:
            logger.info(f"Logged out {self.current_user.username}")
        self.current_user = None
        self.error = None
