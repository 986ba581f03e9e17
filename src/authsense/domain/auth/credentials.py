"""Submitted credential shapes and identity/password extraction."""

from __future__ import annotations

from typing import Any, NamedTuple

from authsense.domain.changeset import Changeset


class RawCredentials(NamedTuple):
    """Plain identity value and plaintext password pair."""

    identity: Any
    password: str | None


Credentials = Changeset | RawCredentials | tuple[Any, str | None]


def extract_credentials(
    credentials: Credentials,
    *,
    identity_field: str,
    password_field: str,
) -> RawCredentials:
    """Return the submitted identity and password from either credential shape.

    Changesets contribute only their proposed values; base record values are
    never used for authentication.
    """

    if isinstance(credentials, Changeset):
        return RawCredentials(
            identity=credentials.get_change(identity_field),
            password=credentials.get_change(password_field),
        )
    if isinstance(credentials, tuple):
        identity, password = credentials
        return RawCredentials(identity=identity, password=password)
    raise TypeError(
        f"credentials must be a Changeset or an (identity, password) pair, "
        f"got {type(credentials).__name__}"
    )
