"""Port for single-record lookups used by authentication services."""

from __future__ import annotations

from typing import Any, Protocol


class RecordRepositoryPort(Protocol):
    """Record repository contract."""

    def get_by(self, source: Any, *, field: str, value: Any) -> Any | None:
        """Return the first record in ``source`` whose ``field`` equals ``value``, or None."""
