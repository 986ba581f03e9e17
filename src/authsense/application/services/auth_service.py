"""Application authentication service for credential verification."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from authsense.application.services.record_loader import RecordLoader
from authsense.config.resolver import AuthConfig, ConfigResolver, ConfigTarget
from authsense.domain.auth.credentials import Credentials, extract_credentials
from authsense.domain.auth.records import read_field
from authsense.domain.changeset import Changeset


class AuthOutcome(StrEnum):
    """Supported authentication outcomes."""

    SUCCESS = "success"
    INVALID_CREDENTIALS = "invalid_credentials"


@dataclass(frozen=True)
class AuthResult:
    """Authentication result model.

    Failures carry the annotated changeset when one was submitted and never
    say whether the identity or the password was wrong.
    """

    outcome: AuthOutcome
    record: Any | None = None
    changeset: Changeset | None = None

    @property
    def ok(self) -> bool:
        return self.outcome is AuthOutcome.SUCCESS


class AuthService:
    """Authenticate submitted credentials against stored records."""

    def __init__(
        self,
        *,
        resolver: ConfigResolver,
        loader: RecordLoader | None = None,
    ) -> None:
        self._resolver = resolver
        self._loader = loader or RecordLoader()

    def authenticate(
        self,
        credentials: Credentials,
        target: ConfigTarget = None,
        **overrides: Any,
    ) -> AuthResult:
        """Authenticate a changeset or ``(identity, password)`` pair."""

        config = self._resolver.resolve(target, **overrides)
        record = self.authenticate_record(credentials, config)
        if record is not None:
            return AuthResult(outcome=AuthOutcome.SUCCESS, record=record)
        return AuthResult(
            outcome=AuthOutcome.INVALID_CREDENTIALS,
            changeset=_auth_failure(credentials, config=config),
        )

    def authenticate_record(
        self,
        credentials: Credentials,
        target: ConfigTarget = None,
        **overrides: Any,
    ) -> Any | None:
        """Return the record matching these credentials, or None on any mismatch.

        When there is nothing to compare against, the configured strategy runs
        one dummy verification so that unknown identities cost as much as
        wrong passwords.
        """

        config = self._resolver.resolve(target, **overrides)
        identity, password = extract_credentials(
            credentials,
            identity_field=config.identity_field,
            password_field=config.password_field,
        )
        strategy = config.hashing_strategy

        record = self._loader.load(identity, config=config)
        password_hash = None if record is None else read_field(record, config.hashed_password_field)
        if record is None or password is None or password_hash is None:
            strategy.dummy_verify()
            return None

        if strategy.verify_password(password=password, password_hash=password_hash):
            return record
        return None

    def get_record(
        self,
        identity: Any,
        target: ConfigTarget = None,
        **overrides: Any,
    ) -> Any | None:
        """Load a record by identity value, or None when absent."""

        config = self._resolver.resolve(target, **overrides)
        return self._loader.load(identity, config=config)


def _auth_failure(credentials: Credentials, *, config: AuthConfig) -> Changeset | None:
    if not isinstance(credentials, Changeset):
        return None
    return credentials.add_error(config.password_field, config.login_error)
