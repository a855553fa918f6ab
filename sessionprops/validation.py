"""Validation and coercion of raw session property values."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from .catalog import PropertyCatalog
from .errors import (
    InvalidParameterTypeError,
    InvalidParameterValueError,
    MissingPropertyError,
    UnknownPropertyError,
)
from .models import PropertyDefinition, ValueKind
from .validators import parse_boolean, parse_integer

LOG = logging.getLogger(__name__)


class UnknownPropertyPolicy(str, Enum):
    """How ``normalize_properties`` treats unrecognized names."""

    IGNORE = "ignore"
    WARN = "warn"
    ERROR = "error"


def validate(definition: PropertyDefinition, value: object) -> Any:
    """Return ``value`` as the property's kind or raise a classified error.

    ``None`` passes through untouched. Values that already have the right
    shape only go through the property's special validator, if any. Text is
    coerced for boolean and integer properties; every other mismatch is a
    type error.
    """

    if value is None:
        return None

    kind = definition.kind
    if kind.matches(value):
        validator = definition.special_validator
        if validator is not None and not validator(value):
            raise InvalidParameterValueError(
                definition.key, value, display=definition.display_value(value)
            )
        return value

    if isinstance(value, str):
        if kind is ValueKind.BOOLEAN:
            try:
                return parse_boolean(value)
            except ValueError:
                raise InvalidParameterValueError(
                    definition.key, value, display=definition.display_value(value)
                ) from None
        if kind is ValueKind.INTEGER:
            try:
                return parse_integer(value)
            except ValueError:
                # Kept as a type error for compatibility with existing callers.
                raise InvalidParameterTypeError(
                    definition.key, type(value).__name__, kind.value
                ) from None

    raise InvalidParameterTypeError(definition.key, type(value).__name__, kind.value)


@dataclass(frozen=True, slots=True)
class NormalizedProperties:
    """Outcome of validating a full set of raw properties."""

    values: Mapping[str, Any] = field(default_factory=dict)
    unknown: Mapping[str, object] = field(default_factory=dict)
    missing_required: frozenset[str] = frozenset()

    @property
    def is_complete(self) -> bool:
        """True when every required property was supplied."""

        return not self.missing_required

    def require_complete(self) -> "NormalizedProperties":
        """Raise MissingPropertyError unless every required property is set."""

        if self.missing_required:
            raise MissingPropertyError(self.missing_required)
        return self


def normalize_properties(
    raw: Mapping[str, object] | Iterable[tuple[str, object]],
    *,
    catalog: PropertyCatalog | None = None,
    unknown: UnknownPropertyPolicy | str = UnknownPropertyPolicy.IGNORE,
) -> NormalizedProperties:
    """Validate every supplied property and key the results canonically.

    ``raw`` is a mapping or an ordered sequence of (name, value) pairs.
    Unrecognized names are collected untouched unless ``unknown`` is
    ``"error"``. When several supplied names resolve to the same property the
    last one wins.
    """

    if catalog is None:
        catalog = PropertyCatalog.default()
    policy = UnknownPropertyPolicy(unknown)
    values: dict[str, Any] = {}
    sources: dict[str, str] = {}
    unrecognized: dict[str, object] = {}

    pairs = raw.items() if isinstance(raw, Mapping) else raw
    for name, value in pairs:
        definition = catalog.lookup(name)
        if definition is None:
            unrecognized[name] = value
            continue
        previous = sources.get(definition.key)
        if previous is not None:
            LOG.warning(
                "Session property supplied more than once; keeping the later value",
                extra={"property": definition.key, "names": (previous, name)},
            )
        values[definition.key] = validate(definition, value)
        sources[definition.key] = name

    if unrecognized:
        if policy is UnknownPropertyPolicy.ERROR:
            raise UnknownPropertyError(unrecognized)
        level = logging.WARNING if policy is UnknownPropertyPolicy.WARN else logging.DEBUG
        LOG.log(level, "Unrecognized session properties", extra={"names": tuple(unrecognized)})

    missing = frozenset(
        key for key in catalog.required_keys() if values.get(key) is None
    )
    return NormalizedProperties(
        values=MappingProxyType(values),
        unknown=MappingProxyType(unrecognized),
        missing_required=missing,
    )


__all__ = [
    "NormalizedProperties",
    "UnknownPropertyPolicy",
    "normalize_properties",
    "validate",
]
