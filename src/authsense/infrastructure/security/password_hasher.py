"""Bcrypt and Argon2 password hasher adapters."""

from __future__ import annotations

import secrets

import bcrypt
from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

from authsense.application.ports.hashing_strategy_port import HashingStrategyPort
from authsense.config.settings import Settings

# bcrypt only consumes the first 72 bytes of input; newer releases reject longer values.
BCRYPT_MAX_PASSWORD_BYTES = 72

_DUMMY_PROBE = "authsense-dummy-probe"


class BcryptPasswordHasher(HashingStrategyPort):
    """Password hashing adapter using bcrypt.

    Passwords longer than 72 UTF-8 bytes are truncated to 72 bytes before
    hashing and verification, so any two passwords sharing that prefix match.
    """

    def __init__(self, *, rounds: int = 12) -> None:
        if not 4 <= rounds <= 31:
            raise ValueError("bcrypt rounds must be between 4 and 31")
        self._rounds = rounds
        # Same cost as real hashes so dummy checks take as long as real ones.
        self._dummy_hash = bcrypt.hashpw(
            secrets.token_urlsafe(32).encode("utf-8"),
            bcrypt.gensalt(rounds=rounds),
        )

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash_password(self, password: str) -> str:
        encoded = _encode_for_bcrypt(password)
        return bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=self._rounds)).decode("utf-8")

    def verify_password(self, *, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(_encode_for_bcrypt(password), password_hash.encode("utf-8"))
        except ValueError:
            return False

    def dummy_verify(self) -> bool:
        bcrypt.checkpw(_DUMMY_PROBE.encode("utf-8"), self._dummy_hash)
        return False


class Argon2PasswordHasher(HashingStrategyPort):
    """Password hashing adapter using Argon2id."""

    def __init__(
        self,
        *,
        time_cost: int = 3,
        memory_cost: int = 65536,
        parallelism: int = 4,
    ) -> None:
        self._hasher = PasswordHasher(
            time_cost=time_cost,
            memory_cost=memory_cost,
            parallelism=parallelism,
        )
        self._dummy_hash = self._hasher.hash(secrets.token_urlsafe(32))

    def hash_password(self, password: str) -> str:
        return self._hasher.hash(password)

    def verify_password(self, *, password: str, password_hash: str) -> bool:
        try:
            return self._hasher.verify(password_hash, password)
        except (VerificationError, InvalidHashError):
            return False

    def dummy_verify(self) -> bool:
        try:
            self._hasher.verify(self._dummy_hash, _DUMMY_PROBE)
        except VerificationError:
            pass
        return False


def build_password_hasher(settings: Settings) -> HashingStrategyPort:
    """Build the hashing strategy selected by runtime settings."""

    if settings.password_hash_scheme == "argon2":
        return Argon2PasswordHasher(
            time_cost=settings.argon2_time_cost,
            memory_cost=settings.argon2_memory_cost,
            parallelism=settings.argon2_parallelism,
        )
    return BcryptPasswordHasher(rounds=settings.bcrypt_rounds)


def _encode_for_bcrypt(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]
