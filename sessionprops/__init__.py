"""Typed registry of the session properties accepted by the database client."""

from __future__ import annotations

from .catalog import SESSION_PROPERTIES, PropertyCatalog, lookup, required_keys
from .errors import (
    CatalogError,
    ErrorCode,
    InvalidParameterTypeError,
    InvalidParameterValueError,
    MissingPropertyError,
    SessionPropertyError,
    UnknownPropertyError,
)
from .models import PropertyDefinition, ValueKind
from .validation import NormalizedProperties, UnknownPropertyPolicy, normalize_properties, validate

__version__ = "0.1.0"

__all__ = [
    "CatalogError",
    "ErrorCode",
    "InvalidParameterTypeError",
    "InvalidParameterValueError",
    "MissingPropertyError",
    "NormalizedProperties",
    "PropertyCatalog",
    "PropertyDefinition",
    "SESSION_PROPERTIES",
    "SessionPropertyError",
    "UnknownPropertyError",
    "UnknownPropertyPolicy",
    "ValueKind",
    "__version__",
    "lookup",
    "normalize_properties",
    "required_keys",
    "validate",
]
