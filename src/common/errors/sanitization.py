"""Sanitization helpers for user-facing error surfaces."""

from __future__ import annotations

import re
from typing import Any

MAX_PUBLIC_ERROR_LENGTH = 2048

_MULTI_SPACE_RE = re.compile(r"[ \t\r\f\v]+")


def sanitize_error_message(message: Any, *, fallback: str = "Request failed.") -> str:
    """Return bounded user-facing error text.

    Runs of horizontal whitespace collapse to a single space; newlines are
    kept so formatted messages keep their paragraphs.
    """
    raw_text = "" if message is None else str(message)
    safe_text = _MULTI_SPACE_RE.sub(" ", raw_text).strip()
    if not safe_text:
        safe_text = (fallback or "Request failed.").strip()
    return safe_text[:MAX_PUBLIC_ERROR_LENGTH]


def sanitize_exception(exc: BaseException, *, fallback: str = "Request failed.") -> str:
    """Sanitize an exception for outward-facing tool contracts."""
    message = str(exc) or type(exc).__name__
    return sanitize_error_message(message, fallback=fallback)
