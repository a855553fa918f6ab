"""Property-specific rules and textual coercion helpers."""

from __future__ import annotations

import re

APPLICATION_NAME_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9.\-_]{1,50}")

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_BOOLEAN_FORMS = {"true": True, "false": False}


def is_valid_application_name(value: object) -> bool:
    """Letter first, then 1-50 letters, digits, '.', '-' or '_'."""

    return isinstance(value, str) and APPLICATION_NAME_PATTERN.fullmatch(value) is not None


def parse_boolean(text: str) -> bool:
    """Parse ``true``/``false`` in any letter case; raise ValueError otherwise."""

    try:
        return _BOOLEAN_FORMS[text.lower()]
    except KeyError:
        raise ValueError(f"not a boolean: {text!r}") from None


def parse_integer(text: str) -> int:
    """Parse a signed base-10 integer that fits in 32 bits."""

    if _INTEGER_PATTERN.fullmatch(text) is None:
        raise ValueError(f"not a base-10 integer: {text!r}")
    value = int(text)
    if not INT32_MIN <= value <= INT32_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


__all__ = [
    "APPLICATION_NAME_PATTERN",
    "INT32_MAX",
    "INT32_MIN",
    "is_valid_application_name",
    "parse_boolean",
    "parse_integer",
]
