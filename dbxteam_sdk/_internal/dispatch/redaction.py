"""Masking of credential-like values before they reach verbose logs."""

from typing import Any

REDACT_KEYS: frozenset[str] = frozenset({
    "access_token",
    "api_key",
    "authorization",
    "token",
    "secret",
    "password",
    "refresh_token",
    "client_secret",
    "private_key",
    "credentials",
})

REDACTED_VALUE = "[REDACTED]"


def _is_sensitive(key: Any) -> bool:
    return isinstance(key, str) and key.lower() in REDACT_KEYS


def redact_payload(payload: dict[str, Any]) -> dict[str, Any]:
    """Mask sensitive keys at any depth of a decoded JSON payload.

    The payload is copied; the caller's object is left untouched.

    Args:
        payload: Decoded JSON object, typically a route argument.

    Returns:
        A copy with every sensitive value replaced by "[REDACTED]".
    """
    return _redact(payload)


def redact_headers(headers: dict[str, str]) -> dict[str, str]:
    """Mask credential headers, matching names case-insensitively."""
    return {
        name: REDACTED_VALUE if _is_sensitive(name) else value for name, value in headers.items()
    }


def _redact(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {
            key: REDACTED_VALUE if _is_sensitive(key) else _redact(value)
            for key, value in obj.items()
        }
    if isinstance(obj, list):
        return [_redact(item) for item in obj]
    return obj
