"""State records shared by the forum controllers."""

from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from typing import Generic
from typing import TypeVar

T = TypeVar("T")


class Outcome(str, Enum):
    """Result of a controller operation."""

    SUCCESS = "success"
    INVALID = "invalid"  # empty required field, no request sent
    UNAUTHORIZED = "unauthorized"  # no session
    FORBIDDEN = "forbidden"  # session cannot modify the entity
    CANCELLED = "cancelled"  # user declined the confirmation
    FAILED = "failed"  # request sent, backend or network error
    STALE = "stale"  # response superseded by a newer selection, discarded
    SKIPPED = "skipped"  # silently ignored (pin without moderator flag)

    @property
    def ok(self) -> bool:
        return self is Outcome.SUCCESS


@dataclass
class ListState(Generic[T]):
    """Items of one collection plus its request status."""

    items: list[T] = field(default_factory=list)
    loading: bool = False
    error: str | None = None
    loaded: bool = False


@dataclass
class FormState:
    """Creation form: current field values and the last validation/request error."""

    fields: dict[str, str] = field(default_factory=dict)
    error: str | None = None
    submitting: bool = False

    def reset(self) -> None:
        self.fields = {}
        self.error = None
        self.submitting = False


@dataclass
class EditState:
    """In-progress edit of a single entity."""

    entity_id: int | None = None
    fields: dict[str, str] = field(default_factory=dict)
    error: str | None = None
    submitting: bool = False

    @property
    def active(self) -> bool:
        return self.entity_id is not None

    def reset(self) -> None:
        self.entity_id = None
        self.fields = {}
        self.error = None
        self.submitting = False
