"""Field access helpers for opaque stored records."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def read_field(record: Any, field_name: str) -> Any:
    """Read one named field from a mapping-like or attribute-style record."""

    if isinstance(record, Mapping):
        return record.get(field_name)
    return getattr(record, field_name, None)
