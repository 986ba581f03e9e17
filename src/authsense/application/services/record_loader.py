"""Record lookup by identity value using resolved authentication config."""

from __future__ import annotations

from typing import Any

from authsense.config.resolver import AuthConfig


class RecordRepositoryNotConfiguredError(RuntimeError):
    """Raised when a lookup is attempted without a configured repository."""

    def __init__(self, *, record_type: Any) -> None:
        super().__init__(f"no repository configured for record type: {record_type!r}")
        self.record_type = record_type


class RecordLoader:
    """Load candidate records for authentication."""

    def load(self, identity: Any, *, config: AuthConfig) -> Any | None:
        """Return the record whose identity field matches, or None when absent.

        A configured scope replaces the record type as the lookup target.
        """

        if config.repository is None:
            raise RecordRepositoryNotConfiguredError(record_type=config.record_type)
        if identity is None:
            return None

        source = config.scope() if config.scope is not None else config.record_type
        return config.repository.get_by(source, field=config.identity_field, value=identity)
