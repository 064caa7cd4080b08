"""Request body validation for todo create/update.

Bodies arrive as untyped JSON. Rules run in a fixed order and the first
failing rule's message is what the client sees.
"""

from __future__ import annotations

import re
from typing import Any

from todo_service.core.config import ALLOWED_BODY_KEYS, STATUS_MAX_LENGTH, TITLE_MAX_LENGTH
from todo_service.core.errors import TodoValidationError

INVALID_BODY = "Invalid request body"
TITLE_REQUIRED = "Title is required"
TITLE_INVALID = "Title must be valid string type"
TITLE_TOO_LONG = f"Title can't exceed {TITLE_MAX_LENGTH} characters"
STATUS_INVALID = "Status must be a valid string type"
STATUS_TOO_LONG = f"Status can't exceed {STATUS_MAX_LENGTH} characters"

# String.prototype.trim() whitespace: WhiteSpace plus LineTerminator.
_JS_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

# @@@numeric-title - mirrors JS Number() string coercion: "1e3", " 12 ", "0x1f", "-Infinity" are all numbers.
_NUMERIC_RE = re.compile(
    r"""
    [+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?
    |[+-]?Infinity
    |0[xX][0-9a-fA-F]+
    |0[oO][0-7]+
    |0[bB][01]+
    """,
    re.VERBOSE | re.ASCII,
)


def js_trim(value: str) -> str:
    return value.strip(_JS_WHITESPACE)


def js_length(value: str) -> int:
    """Length in UTF-16 code units, so astral characters count twice."""
    return len(value.encode("utf-16-le", "surrogatepass")) // 2


def is_numeric_string(value: str) -> bool:
    """Return True if the whole string (ignoring surrounding whitespace) reads as a number."""
    return _NUMERIC_RE.fullmatch(js_trim(value)) is not None


def _has_invalid_keys(body: dict[str, Any]) -> bool:
    return any(key not in ALLOWED_BODY_KEYS for key in body)


def _check_title(body: dict[str, Any]) -> None:
    if "title" not in body:
        raise TodoValidationError(TITLE_REQUIRED)
    title = body["title"]
    if not isinstance(title, str) or not js_trim(title) or is_numeric_string(title):
        raise TodoValidationError(TITLE_INVALID)
    if js_length(title) > TITLE_MAX_LENGTH:
        raise TodoValidationError(TITLE_TOO_LONG)


def _check_status(body: dict[str, Any]) -> None:
    if "status" not in body:
        return
    status = body["status"]
    if not isinstance(status, str) or not js_trim(status):
        raise TodoValidationError(STATUS_INVALID)
    if js_length(status) > STATUS_MAX_LENGTH:
        raise TodoValidationError(STATUS_TOO_LONG)


def _require_object(body: Any) -> dict[str, Any]:
    if not isinstance(body, dict):
        raise TodoValidationError(INVALID_BODY)
    return body


def validate_create_body(body: Any) -> dict[str, Any]:
    """Validate a create body and return it as a mapping. Raises TodoValidationError."""
    body = _require_object(body)
    if _has_invalid_keys(body):
        raise TodoValidationError(INVALID_BODY)
    _check_title(body)
    _check_status(body)
    return body


def validate_update_body(body: Any) -> dict[str, Any]:
    """Validate a partial update body. Empty bodies are rejected, not treated as no-ops."""
    body = _require_object(body)
    if not body or _has_invalid_keys(body):
        raise TodoValidationError(INVALID_BODY)
    if "title" in body:
        _check_title(body)
    _check_status(body)
    return body
