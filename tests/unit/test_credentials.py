from __future__ import annotations

from dataclasses import dataclass

import pytest

from authsense.domain.auth.credentials import RawCredentials, extract_credentials
from authsense.domain.auth.records import read_field
from authsense.domain.changeset import Changeset


@dataclass(frozen=True)
class StoredUser:
    email: str
    hashed_password: str


def test_extract_from_changeset_uses_configured_fields() -> None:
    changeset = Changeset.change(None, username="rico", secret="pw")

    extracted = extract_credentials(changeset, identity_field="username", password_field="secret")

    assert extracted == RawCredentials(identity="rico", password="pw")


def test_extract_from_plain_tuple() -> None:
    extracted = extract_credentials(
        ("rico@gmail.com", "pw"),
        identity_field="email",
        password_field="password",
    )

    assert extracted.identity == "rico@gmail.com"
    assert extracted.password == "pw"


def test_extract_rejects_wrong_pair_length() -> None:
    with pytest.raises(ValueError):
        extract_credentials(
            ("rico@gmail.com", "pw", "extra"),  # type: ignore[arg-type]
            identity_field="email",
            password_field="password",
        )


def test_extract_rejects_unknown_shapes() -> None:
    with pytest.raises(TypeError, match="credentials must be"):
        extract_credentials(
            "rico@gmail.com",  # type: ignore[arg-type]
            identity_field="email",
            password_field="password",
        )


def test_read_field_supports_mappings_and_objects() -> None:
    assert read_field({"hashed_password": "h"}, "hashed_password") == "h"
    assert read_field(StoredUser(email="e", hashed_password="h"), "hashed_password") == "h"
    assert read_field({}, "hashed_password") is None
    assert read_field(StoredUser(email="e", hashed_password="h"), "missing") is None
