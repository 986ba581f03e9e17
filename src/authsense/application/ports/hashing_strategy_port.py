"""Port for password hashing, verification and timing-equalizing dummy checks."""

from __future__ import annotations

from typing import Protocol


class HashingStrategyPort(Protocol):
    """Password hashing/verification contract."""

    def hash_password(self, password: str) -> str:
        """Hash plaintext password for storage."""

    def verify_password(self, *, password: str, password_hash: str) -> bool:
        """Verify plaintext password against stored hash."""

    def dummy_verify(self) -> bool:
        """Spend the cost of one verification without real data and return False."""
