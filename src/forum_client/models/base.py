"""Base models and helpers for forum entities."""

from typing import Protocol

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic.alias_generators import to_camel


class ForumModel(BaseModel):
    """Base model for everything exchanged with the forum backend.

    Fields are snake_case in Python and camelCase on the wire.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def to_wire(self) -> dict:
        """Serialize to the JSON body the backend expects."""
        return self.model_dump(by_alias=True, mode="json")


class ForumEntity(ForumModel):
    """Entity with a server-assigned integer identity."""

    id: int


class AuthoredEntity(Protocol):
    """Anything that carries an author username and a pin flag."""

    id: int
    author: str
    is_pinned: bool


def pin_sort_key(entity: AuthoredEntity) -> tuple[bool, int]:
    """Sort key placing pinned entities first, then by ascending id."""
    return (not entity.is_pinned, entity.id)


class DeleteRequest(ForumModel):
    """Body for DELETE /posts and DELETE /comments."""

    id: int
    user_id: int


class PinRequest(ForumModel):
    """Body for POST /posts/pin and POST /comments/pin."""

    id: int
    user_id: int
    pinned: bool
