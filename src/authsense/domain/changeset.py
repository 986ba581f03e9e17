"""Immutable pending-change container for record updates."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class FieldError:
    """Validation error attached to one field."""

    field: str
    message: str


@dataclass(frozen=True)
class Changeset:
    """Base record paired with proposed changes and validation errors.

    Every modifier returns a new changeset; the original is never edited.
    """

    data: Any = None
    changes: Mapping[str, Any] = field(default_factory=dict)
    errors: tuple[FieldError, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "changes", MappingProxyType(dict(self.changes)))

    @classmethod
    def change(cls, data: Any = None, /, **changes: Any) -> Changeset:
        """Build a changeset proposing ``changes`` over ``data``."""

        return cls(data=data, changes=changes)

    def __hash__(self) -> int:
        # The base record is left out; it is often a mutable mapping.
        return hash((tuple(sorted(self.changes.items())), self.errors))

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def get_change(self, field_name: str, default: Any = None) -> Any:
        """Return the proposed value for one field, ignoring base record values."""

        return self.changes.get(field_name, default)

    def put_change(self, field_name: str, value: Any) -> Changeset:
        """Return a copy with one proposed value staged."""

        return replace(self, changes={**self.changes, field_name: value})

    def add_error(self, field_name: str, message: str) -> Changeset:
        """Return a copy with one field marked invalid."""

        return replace(self, errors=(*self.errors, FieldError(field=field_name, message=message)))

    def errors_for(self, field_name: str) -> list[str]:
        return [error.message for error in self.errors if error.field == field_name]
