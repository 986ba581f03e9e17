"""Layered per-record-type authentication configuration.

Configuration is resolved fresh for every call by merging, key by key and
lowest precedence first:

1. built-in defaults,
2. global defaults supplied once at process start,
3. overrides registered for the record type in use,
4. call-site overrides.

A key left unset (``None``) in a layer falls through to the layer below, so
partial overrides never blank out sibling defaults.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Mapping
from dataclasses import dataclass, fields, replace
from functools import reduce
from types import MappingProxyType
from typing import Any, cast

from authsense.application.ports.hashing_strategy_port import HashingStrategyPort
from authsense.application.ports.record_repository_port import RecordRepositoryPort
from authsense.config.settings import Settings
from authsense.infrastructure.security.password_hasher import (
    BcryptPasswordHasher,
    build_password_hasher,
)

logger = logging.getLogger(__name__)

DEFAULT_LOGIN_ERROR = "Invalid credentials."

Scope = Callable[[], Any]


@dataclass(frozen=True)
class ConfigOverrides:
    """One configuration layer; ``None`` marks a key as unset."""

    record_type: Hashable | None = None
    repository: RecordRepositoryPort | None = None
    scope: Scope | None = None
    identity_field: str | None = None
    password_field: str | None = None
    hashed_password_field: str | None = None
    hashing_strategy: HashingStrategyPort | None = None
    login_error: str | None = None

    def merge(self, other: ConfigOverrides) -> ConfigOverrides:
        """Return this layer with every key set in ``other`` replaced."""

        updates = {
            item.name: getattr(other, item.name)
            for item in fields(other)
            if getattr(other, item.name) is not None
        }
        return replace(self, **updates)


@dataclass(frozen=True)
class AuthConfig:
    """Fully resolved settings for one authentication or hashing call."""

    record_type: Hashable | None
    repository: RecordRepositoryPort | None
    scope: Scope | None
    identity_field: str
    password_field: str
    hashed_password_field: str
    hashing_strategy: HashingStrategyPort
    login_error: str


ConfigTarget = Hashable | ConfigOverrides | AuthConfig | None

BUILTIN_DEFAULTS = ConfigOverrides(
    identity_field="email",
    password_field="password",
    hashed_password_field="hashed_password",
    hashing_strategy=BcryptPasswordHasher(),
    login_error=DEFAULT_LOGIN_ERROR,
)

_EMPTY_LAYER = ConfigOverrides()


class ConfigResolver:
    """Resolve authentication configuration for record types and call sites."""

    def __init__(
        self,
        *,
        defaults: ConfigOverrides | None = None,
        record_types: Mapping[Hashable, ConfigOverrides] | None = None,
    ) -> None:
        self._defaults = defaults or _EMPTY_LAYER
        self._record_types = MappingProxyType(
            {
                key: replace(layer, record_type=None)
                for key, layer in (record_types or {}).items()
            }
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        repository: RecordRepositoryPort | None = None,
        record_types: Mapping[Hashable, ConfigOverrides] | None = None,
        default_record_type: Hashable | None = None,
        hashing_strategy: HashingStrategyPort | None = None,
    ) -> ConfigResolver:
        """Build a resolver whose global defaults come from environment settings."""

        defaults = ConfigOverrides(
            record_type=default_record_type,
            repository=repository,
            identity_field=settings.identity_field,
            password_field=settings.password_field,
            hashed_password_field=settings.hashed_password_field,
            hashing_strategy=hashing_strategy or build_password_hasher(settings),
            login_error=settings.login_error,
        )
        return cls(defaults=defaults, record_types=record_types)

    def resolve(
        self,
        target: ConfigTarget = None,
        **overrides: Any,
    ) -> AuthConfig:
        """Return the merged configuration for a record type or override set.

        ``target`` may be a record-type identifier, a ``ConfigOverrides`` layer
        or an already resolved ``AuthConfig``. Keyword arguments are applied as
        call-site overrides and must be ``ConfigOverrides`` keys.
        """

        if isinstance(target, AuthConfig):
            if not overrides:
                return target
            target = ConfigOverrides(
                **{item.name: getattr(target, item.name) for item in fields(target)}
            )

        if isinstance(target, ConfigOverrides):
            call_site = target.merge(ConfigOverrides(**overrides))
        else:
            call_site = ConfigOverrides(record_type=target).merge(ConfigOverrides(**overrides))

        record_type = (
            call_site.record_type
            if call_site.record_type is not None
            else self._defaults.record_type
        )
        type_layer = self._record_types.get(record_type, _EMPTY_LAYER)
        if record_type is not None and record_type not in self._record_types:
            logger.debug("auth_config_unregistered_record_type record_type=%r", record_type)

        merged = reduce(
            ConfigOverrides.merge,
            (BUILTIN_DEFAULTS, self._defaults, type_layer, call_site),
        )
        return AuthConfig(
            record_type=record_type,
            repository=merged.repository,
            scope=merged.scope,
            # Built-in defaults populate every required key.
            identity_field=cast(str, merged.identity_field),
            password_field=cast(str, merged.password_field),
            hashed_password_field=cast(str, merged.hashed_password_field),
            hashing_strategy=cast(HashingStrategyPort, merged.hashing_strategy),
            login_error=cast(str, merged.login_error),
        )
