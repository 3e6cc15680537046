"""Generic list controllers shared by topics, posts and comments."""

import logging

from abc import ABC
from abc import abstractmethod
from collections.abc import Callable
from typing import Generic
from typing import TypeVar

from forum_client.api.client import ForumAPIClient
from forum_client.api.errors import ForumClientError
from forum_client.models.base import ForumEntity
from forum_client.models.base import pin_sort_key
from forum_client.models.user import User
from forum_client.state.base import EditState
from forum_client.state.base import FormState
from forum_client.state.base import ListState
from forum_client.state.base import Outcome
from forum_client.state.prompts import UserPrompts
from forum_client.state.session import SessionContext

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=ForumEntity)


class EntityListController(ABC, Generic[T]):
    """Owns one collection: its items, loading flag and error slot.

    Loads replace the whole list. Each load gets a generation token and a
    response is applied only if its token is still current, so a slow
    response for a previous parent never overwrites a newer one.
    """

    label = "items"

    def __init__(
        self, api: ForumAPIClient, session: SessionContext, prompts: UserPrompts
    ):
        self._api = api
        self._session = session
        self._prompts = prompts
        self.state: ListState[T] = ListState()
        self.parent_id: int | None = None
        self._generation = 0

    @property
    def items(self) -> list[T]:
        return self.state.items

    @property
    def loading(self) -> bool:
        return self.state.loading

    @property
    def error(self) -> str | None:
        return self.state.error

    @abstractmethod
    async def _fetch(self, parent_id: int | None) -> list[T]:
        """Fetch the collection from the backend."""

    def _belongs(self, item: T, parent_id: int | None) -> bool:
        """Whether item may be shown under parent_id."""
        return True

    def get(self, entity_id: int) -> T | None:
        """Return the loaded entity with this id, if any."""
        for item in self.state.items:
            if item.id == entity_id:
                return item
        return None

    async def load(self, parent_id: int | None = None) -> Outcome:
        """Fetch the collection and replace the local list with it."""
        self._generation += 1
        token = self._generation
        self.parent_id = parent_id
        self.state.loading = True
        self.state.error = None

        try:
            items = await self._fetch(parent_id)
        except ForumClientError as e:
            if token != self._generation:
                logger.debug(f"Discarding failed {self.label} load #{token}")
                return Outcome.STALE
            logger.warning(f"Failed to load {self.label} (parent={parent_id}): {e}")
            self.state.error = f"Failed to load {self.label}: {e}"
            self.state.loading = False
            return Outcome.FAILED

        if token != self._generation:
            logger.debug(f"Discarding {self.label} load #{token}: superseded")
            return Outcome.STALE

        kept = [item for item in items if self._belongs(item, parent_id)]
        if len(kept) != len(items):
            dropped = len(items) - len(kept)
            logger.warning(f"Dropped {dropped} {self.label} outside parent {parent_id}")
        self.state.items = kept
        self.state.loaded = True
        self.state.loading = False
        logger.info(f"Loaded {len(kept)} {self.label} (parent={parent_id})")
        return Outcome.SUCCESS

    def clear(self) -> None:
        """Forget the list and ignore any load still in flight."""
        self._generation += 1
        self.parent_id = None
        self.state = ListState()


class OwnedEntityListController(EntityListController[T]):
    """List controller for authored entities that can be created, edited,
    deleted and pinned.

    Mutations are merged into the local list by id instead of re-fetching:
    append on create, replace on update and pin, filter on delete.
    """

    entity_name = "item"
    parent_name = "parent"
    required_fields: tuple[str, ...] = ()
    required_message = "All fields are required."

    def __init__(
        self, api: ForumAPIClient, session: SessionContext, prompts: UserPrompts
    ):
        super().__init__(api, session, prompts)
        self.form = FormState()
        self.edit = EditState()
        self._removed_listeners: list[Callable[[int], None]] = []
        self._replaced_listeners: list[Callable[[T], None]] = []

    @abstractmethod
    async def _create(self, parent_id: int, user: User, fields: dict[str, str]) -> T:
        """Send the create request."""

    @abstractmethod
    async def _update(self, entity_id: int, user: User, fields: dict[str, str]) -> T:
        """Send the update request."""

    @abstractmethod
    async def _delete(self, entity_id: int, user: User) -> None:
        """Send the delete request."""

    @abstractmethod
    async def _pin(self, entity_id: int, user: User, pinned: bool) -> T:
        """Send the pin request."""

    def on_removed(self, listener: Callable[[int], None]) -> None:
        """Call listener with the id of every entity deleted from the list."""
        self._removed_listeners.append(listener)

    def on_replaced(self, listener: Callable[[T], None]) -> None:
        """Call listener with every entity replaced in place."""
        self._replaced_listeners.append(listener)

    def clean_fields(self, fields: dict[str, str]) -> dict[str, str] | None:
        """Trim the required fields; None if any of them ends up empty."""
        cleaned = {}
        for name in self.required_fields:
            value = (fields.get(name) or "").strip()
            if not value:
                return None
            cleaned[name] = value
        return cleaned

    def reset_forms(self) -> None:
        """Clear the creation form and leave edit mode."""
        self.form.reset()
        self.edit.reset()

    def clear(self) -> None:
        super().clear()
        self.reset_forms()

    def _replace(self, entity: T) -> None:
        self.state.items = [
            entity if item.id == entity.id else item for item in self.state.items
        ]
        for listener in self._replaced_listeners:
            listener(entity)

    def _remove(self, entity_id: int) -> None:
        self.state.items = [item for item in self.state.items if item.id != entity_id]
        if self.edit.entity_id == entity_id:
            self.edit.reset()
        for listener in self._removed_listeners:
            listener(entity_id)

    async def create(self, fields: dict[str, str] | None = None) -> Outcome:
        """Create an entity under the current parent from the form fields.

        The form keeps its values on failure so the user can retry.
        """
        if fields is not None:
            self.form.fields = dict(fields)

        cleaned = self.clean_fields(self.form.fields)
        if cleaned is None:
            self.form.error = self.required_message
            return Outcome.INVALID

        user = self._session.current_user
        if user is None:
            self.form.error = f"You must be logged in to create a {self.entity_name}."
            return Outcome.UNAUTHORIZED

        parent_id = self.parent_id
        if parent_id is None:
            self.form.error = f"Select a {self.parent_name} first."
            return Outcome.INVALID

        self.form.error = None
        self.form.submitting = True
        try:
            created = await self._create(parent_id, user, cleaned)
        except ForumClientError as e:
            # The form now belongs to another parent; leave it untouched
            if self.parent_id != parent_id:
                logger.debug(f"Discarding failed {self.entity_name} create: {e}")
                return Outcome.STALE
            logger.warning(f"Failed to create {self.entity_name}: {e}")
            self.form.submitting = False
            self.form.error = f"Failed to create {self.entity_name}: {e}"
            return Outcome.FAILED

        if self.parent_id != parent_id:
            logger.debug(
                f"Created {self.entity_name} {created.id} belongs to a "
                f"{self.parent_name} no longer selected"
            )
            return Outcome.STALE

        self.form.submitting = False
        if self.get(created.id) is not None:
            self._replace(created)
        else:
            self.state.items = [*self.state.items, created]
        self.form.reset()
        logger.info(f"Created {self.entity_name} {created.id} by {user.username}")
        return Outcome.SUCCESS

    def start_edit(self, entity_id: int) -> Outcome:
        """Enter edit mode for an entity, prefilled with its current values."""
        entity = self.get(entity_id)
        if entity is None:
            return Outcome.INVALID
        if not self._session.can_modify(entity):
            return Outcome.FORBIDDEN

        self.edit.entity_id = entity_id
        self.edit.fields = {
            name: getattr(entity, name) for name in self.required_fields
        }
        self.edit.error = None
        return Outcome.SUCCESS

    def cancel_edit(self) -> None:
        self.edit.reset()

    async def update(
        self, entity_id: int, fields: dict[str, str] | None = None
    ) -> Outcome:
        """Save an edit. Stays in edit mode on any failure.

        Sessions that may not edit the entity are alerted and never enter
        edit mode.
        """
        user = self._session.current_user
        if user is None:
            self._prompts.alert(
                f"You must be logged in to edit a {self.entity_name}."
            )
            return Outcome.UNAUTHORIZED

        entity = self.get(entity_id)
        if entity is None:
            return Outcome.INVALID
        if not self._session.can_modify(entity):
            self._prompts.alert(
                f"You are not allowed to edit this {self.entity_name}."
            )
            return Outcome.FORBIDDEN

        if fields is None:
            fields = self.edit.fields if self.edit.entity_id == entity_id else {}
        self.edit.entity_id = entity_id
        self.edit.fields = dict(fields)

        cleaned = self.clean_fields(fields)
        if cleaned is None:
            self.edit.error = self.required_message
            return Outcome.INVALID

        parent_id = self.parent_id
        self.edit.error = None
        self.edit.submitting = True
        try:
            updated = await self._update(entity_id, user, cleaned)
        except ForumClientError as e:
            if self.parent_id != parent_id:
                logger.debug(f"Discarding failed {self.entity_name} update: {e}")
                return Outcome.STALE
            logger.warning(f"Failed to update {self.entity_name} {entity_id}: {e}")
            self.edit.submitting = False
            self.edit.error = f"Failed to update {self.entity_name}: {e}"
            return Outcome.FAILED

        if self.parent_id != parent_id:
            logger.debug(f"Discarding {self.entity_name} {entity_id} update")
            return Outcome.STALE

        self._replace(updated)
        self.edit.reset()
        logger.info(f"Updated {self.entity_name} {entity_id}")
        return Outcome.SUCCESS

    async def delete(self, entity_id: int) -> Outcome:
        """Delete an entity after the user confirms. Failures are alerted."""
        user = self._session.current_user
        if user is None:
            self._prompts.alert(
                f"You must be logged in to delete a {self.entity_name}."
            )
            return Outcome.UNAUTHORIZED

        entity = self.get(entity_id)
        if entity is None:
            return Outcome.INVALID
        if not self._session.can_modify(entity):
            self._prompts.alert(
                f"You are not allowed to delete this {self.entity_name}."
            )
            return Outcome.FORBIDDEN

        if not self._prompts.confirm(
            f"Are you sure you want to delete this {self.entity_name}?"
        ):
            return Outcome.CANCELLED

        try:
            await self._delete(entity_id, user)
        except ForumClientError as e:
            logger.warning(f"Failed to delete {self.entity_name} {entity_id}: {e}")
            self._prompts.alert(f"Failed to delete {self.entity_name}: {e}")
            return Outcome.FAILED

        self._remove(entity_id)
        logger.info(f"Deleted {self.entity_name} {entity_id}")
        return Outcome.SUCCESS

    async def toggle_pin(self, entity_id: int) -> Outcome:
        """Flip the pin flag of an entity. Does nothing for non-moderators."""
        user = self._session.current_user
        if user is None or not user.is_moderator:
            return Outcome.SKIPPED

        entity = self.get(entity_id)
        if entity is None:
            return Outcome.INVALID

        parent_id = self.parent_id
        pinned = not entity.is_pinned
        try:
            updated = await self._pin(entity_id, user, pinned)
        except ForumClientError as e:
            action = "pin" if pinned else "unpin"
            logger.warning(f"Failed to {action} {self.entity_name} {entity_id}: {e}")
            self._prompts.alert(f"Failed to {action} {self.entity_name}: {e}")
            return Outcome.FAILED

        if self.parent_id != parent_id:
            logger.debug(f"Discarding {self.entity_name} {entity_id} pin change")
            return Outcome.STALE

        self._replace(updated)
        self.state.items = sorted(self.state.items, key=pin_sort_key)
        logger.info(
            f"{'Pinned' if updated.is_pinned else 'Unpinned'} "
            f"{self.entity_name} {entity_id}"
        )
        return Outcome.SUCCESS
