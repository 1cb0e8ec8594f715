"""Summaries of settled fetch payloads for DEBUG logs.

Fetch results routinely carry credentials or large response bodies, so
payloads are masked and truncated before they reach a log record.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

# Substring match on lower-cased keys: "accessToken", "X-Api-Key", ...
_SENSITIVE_MARKERS = ("password", "secret", "token", "authorization", "cookie", "apikey", "api-key", "api_key")


def _is_sensitive(key: str) -> bool:
    lowered = key.lower()
    return any(marker in lowered for marker in _SENSITIVE_MARKERS)


def _truncate(text: str, max_string: int) -> str:
    if len(text) > max_string:
        return f"{text[:max_string]}…<truncated>"
    return text


def redact_for_log(value: Any, *, max_string: int = 512, _depth: int = 0) -> Any:
    """Return a copy of a fetch payload or error that is safe to log."""
    if _depth > 20:
        return "<max-depth>"
    if value is None or isinstance(value, (bool, int, float)):
        return value
    if isinstance(value, str):
        return _truncate(value, max_string)
    if isinstance(value, BaseException):
        return f"{type(value).__name__}: {_truncate(str(value), max_string)}"

    if isinstance(value, BaseModel):
        value = dict(value)
    if isinstance(value, Mapping):
        return {
            str(key): "<redacted>" if _is_sensitive(str(key)) else redact_for_log(item, max_string=max_string, _depth=_depth + 1)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple, set, frozenset)):
        return [redact_for_log(item, max_string=max_string, _depth=_depth + 1) for item in value]

    return _truncate(repr(value), max_string)
