# ABOUTME: Request configuration for provider lookups.
# ABOUTME: Merges caller overrides on top of built-in defaults (timeout, socket limit, API keys).

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any

from isbnresolver.errors import ValidationError

DEFAULT_TIMEOUT_MS = 5000
DEFAULT_MAX_SOCKETS = 500
ISBNDB_API_KEY_ENV = "ISBNDB_API_KEY"

# camelCase spellings accepted alongside the field names.
_OPTION_ALIASES = {
    "timeout": "timeout_ms",
    "maxSockets": "max_sockets",
    "isbndbApiKey": "isbndb_api_key",
}


@dataclass(frozen=True)
class RequestOptions:
    """Per-resolution request settings.

    timeout_ms bounds each provider request on its own; a timeout fails only
    that provider. max_sockets caps the connection pool of the transport.
    """

    timeout_ms: int = DEFAULT_TIMEOUT_MS
    max_sockets: int = DEFAULT_MAX_SOCKETS
    isbndb_api_key: str | None = None

    @classmethod
    def from_env(cls) -> "RequestOptions":
        """Defaults, with the ISBNdb API key taken from the environment."""
        return cls(isbndb_api_key=os.environ.get(ISBNDB_API_KEY_ENV) or None)


DEFAULT_OPTIONS = RequestOptions()

_FIELD_NAMES = {f.name for f in fields(RequestOptions)}


def merge_options(
    overrides: "RequestOptions | Mapping[str, Any] | None",
    base: RequestOptions = DEFAULT_OPTIONS,
) -> RequestOptions:
    """Apply caller-supplied overrides on top of base options.

    Mapping keys may use the snake_case field names or the camelCase aliases
    ``timeout`` and ``maxSockets``. Keys whose value is None keep the base
    value. A RequestOptions override contributes only the fields that differ
    from their defaults, so a key taken from the environment survives an
    override that only sets timeout_ms.

    Raises:
        ValidationError: On unknown keys or non-positive numeric values.
    """
    if overrides is None:
        return base
    if isinstance(overrides, RequestOptions):
        overrides = {
            f.name: getattr(overrides, f.name)
            for f in fields(overrides)
            if getattr(overrides, f.name) != f.default
        }
    if not isinstance(overrides, Mapping):
        raise ValidationError(f"options must be a mapping, got {type(overrides).__name__}")

    changes: dict[str, Any] = {}
    for key, value in overrides.items():
        name = _OPTION_ALIASES.get(key, key)
        if name not in _FIELD_NAMES:
            raise ValidationError(f"Unknown request option: {key!r}")
        if value is None:
            continue
        changes[name] = value

    for name in ("timeout_ms", "max_sockets"):
        value = changes.get(name)
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, int | float) or value <= 0:
            raise ValidationError(f"{name} must be a positive number, got {value!r}")

    return replace(base, **changes)
