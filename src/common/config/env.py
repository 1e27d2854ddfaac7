"""Typed environment variable parsing helpers."""

import os
from typing import Iterable, List, Optional

TRUTHY = ("true", "1", "yes", "on")
FALSEY = ("false", "0", "no", "off", "")


def _raw(name: str, required: bool) -> Optional[str]:
    value = os.getenv(name)
    if value is None and required:
        raise KeyError(f"Environment variable '{name}' is required but not set.")
    return value


def get_env_str(name: str, default: Optional[str] = None, required: bool = False) -> Optional[str]:
    """Get an environment variable as a string."""
    value = _raw(name, required)
    return default if value is None else value


def get_env_int(name: str, default: Optional[int] = None, required: bool = False) -> Optional[int]:
    """Get an environment variable as an integer."""
    value = _raw(name, required)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Environment variable '{name}' must be an integer, got '{value}'.")


def get_env_bool(
    name: str, default: Optional[bool] = None, required: bool = False
) -> Optional[bool]:
    """Get an environment variable as a boolean.

    Truthy: true, 1, yes, on
    Falsey: false, 0, no, off, (empty string)
    """
    value = _raw(name, required)
    if value is None:
        return default

    val_lower = value.strip().lower()
    if val_lower in TRUTHY:
        return True
    if val_lower in FALSEY:
        return False
    raise ValueError(f"Environment variable '{name}' must be a boolean, got '{value}'.")


def get_env_list(
    name: str, default: Optional[List[str]] = None, required: bool = False, separator: str = ","
) -> Optional[List[str]]:
    """Get an environment variable as a list of strings."""
    value = _raw(name, required)
    if value is None:
        return default
    return [s.strip() for s in value.split(separator) if s.strip()]


def get_env_choice(name: str, choices: Iterable[str], default: str) -> str:
    """Get a lower-cased environment variable restricted to ``choices``."""
    allowed = {c.lower() for c in choices}
    value = (get_env_str(name, default) or default).strip().lower()
    if value not in allowed:
        raise ValueError(
            f"Environment variable '{name}' must be one of {sorted(allowed)}, got '{value}'."
        )
    return value
