"""Stage hashed passwords into pending changesets before persistence."""

from __future__ import annotations

import logging
from typing import Any

from authsense.config.resolver import ConfigResolver, ConfigTarget
from authsense.domain.changeset import Changeset

logger = logging.getLogger(__name__)


class PasswordHashingService:
    """Hash proposed plaintext passwords using the configured strategy."""

    def __init__(self, *, resolver: ConfigResolver) -> None:
        self._resolver = resolver

    def stage_hashed_password(
        self,
        changeset: Changeset,
        target: ConfigTarget = None,
        **overrides: Any,
    ) -> Changeset:
        """Return a changeset with the hashed password staged.

        Changesets that propose no password change are returned unchanged.
        """

        config = self._resolver.resolve(target, **overrides)
        password = changeset.get_change(config.password_field)
        if password is None:
            return changeset

        staged = changeset.put_change(
            config.hashed_password_field,
            config.hashing_strategy.hash_password(password),
        )
        logger.debug("hashed_password_staged field=%s", config.hashed_password_field)
        return staged
