"""Exception hierarchy raised while resolving and validating session properties."""

from __future__ import annotations

from enum import Enum
from typing import Iterable


class ErrorCode(str, Enum):
    """Classification attached to every session property failure."""

    INVALID_PARAMETER_TYPE = "invalid_parameter_type"
    INVALID_PARAMETER_VALUE = "invalid_parameter_value"
    UNKNOWN_PROPERTY = "unknown_property"
    MISSING_PROPERTY = "missing_property"
    CATALOG_CONFLICT = "catalog_conflict"


class SessionPropertyError(ValueError):
    """Base error for property resolution and validation failures."""

    code: ErrorCode

    def __init__(self, message: str, *, property_key: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.property_key = property_key


class InvalidParameterTypeError(SessionPropertyError):
    """Raised when a value's shape cannot be used for the property's kind."""

    code = ErrorCode.INVALID_PARAMETER_TYPE

    def __init__(self, property_key: str, actual_type: str, expected_kind: str) -> None:
        super().__init__(
            f"Invalid type for property '{property_key}': got {actual_type}, expected {expected_kind}",
            property_key=property_key,
        )
        self.actual_type = actual_type
        self.expected_kind = expected_kind


class InvalidParameterValueError(SessionPropertyError):
    """Raised when a value has an acceptable shape but fails a semantic rule."""

    code = ErrorCode.INVALID_PARAMETER_VALUE

    def __init__(self, property_key: str, value: object, *, display: str | None = None) -> None:
        shown = display if display is not None else repr(value)
        super().__init__(
            f"Invalid value {shown} for property '{property_key}'",
            property_key=property_key,
        )
        self.value = value


class UnknownPropertyError(SessionPropertyError):
    """Raised by callers that treat unrecognized property names as fatal."""

    code = ErrorCode.UNKNOWN_PROPERTY

    def __init__(self, names: Iterable[str]) -> None:
        self.names = tuple(names)
        super().__init__(f"Unknown session properties: {', '.join(self.names)}")


class MissingPropertyError(SessionPropertyError):
    """Raised when required properties were not supplied."""

    code = ErrorCode.MISSING_PROPERTY

    def __init__(self, keys: Iterable[str]) -> None:
        self.keys = tuple(sorted(keys))
        super().__init__(f"Missing required session properties: {', '.join(self.keys)}")


class CatalogError(SessionPropertyError):
    """Raised when property definitions collide on a key or alias."""

    code = ErrorCode.CATALOG_CONFLICT


__all__ = [
    "CatalogError",
    "ErrorCode",
    "InvalidParameterTypeError",
    "InvalidParameterValueError",
    "MissingPropertyError",
    "SessionPropertyError",
    "UnknownPropertyError",
]
