"""Tests for user-facing error message sanitization."""

from common.errors.sanitization import (
    MAX_PUBLIC_ERROR_LENGTH,
    sanitize_error_message,
    sanitize_exception,
)


def test_sanitize_message_collapses_horizontal_whitespace():
    assert sanitize_error_message("  width \t is   bad  ") == "width is bad"


def test_sanitize_message_keeps_paragraph_breaks():
    assert sanitize_error_message("Title\n\nDetails:  x") == "Title\n\nDetails: x"


def test_sanitize_message_bounds_length():
    safe = sanitize_error_message("x" * (MAX_PUBLIC_ERROR_LENGTH + 100))
    assert len(safe) == MAX_PUBLIC_ERROR_LENGTH


def test_sanitize_message_uses_fallback_for_blank_input():
    assert sanitize_error_message(None) == "Request failed."
    assert sanitize_error_message("   ", fallback="Chart failed.") == "Chart failed."


def test_sanitize_exception_uses_type_name_without_message():
    class _RendererCrash(RuntimeError):
        pass

    assert sanitize_exception(_RendererCrash()) == "_RendererCrash"
    assert sanitize_exception(ValueError("bad  value")) == "bad value"
