"""Shared dataclasses describing recognized session properties."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterator

SpecialValidator = Callable[[object], bool]


class ValueKind(str, Enum):
    """Closed set of value shapes a session property accepts."""

    TEXT = "text"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    OPAQUE = "opaque"

    def matches(self, value: object) -> bool:
        """Return True when ``value`` already has this kind's runtime shape."""

        if self is ValueKind.TEXT:
            return isinstance(value, str)
        if self is ValueKind.BOOLEAN:
            return isinstance(value, bool)
        if self is ValueKind.INTEGER:
            return isinstance(value, int) and not isinstance(value, bool)
        # Key objects, raw bytes or SecretBytes; scalars and containers never qualify.
        return not isinstance(value, _NON_OPAQUE_TYPES)


_NON_OPAQUE_TYPES = (str, bool, int, float, list, tuple, dict, set, frozenset)


@dataclass(frozen=True, slots=True)
class PropertyDefinition:
    """One recognized configuration property."""

    key: str
    required: bool
    kind: ValueKind
    aliases: tuple[str, ...] = ()
    special_validator: SpecialValidator | None = field(default=None, compare=False)
    sensitive: bool = False
    description: str = ""

    def names(self) -> Iterator[str]:
        """Yield the canonical key followed by every alias."""

        yield self.key
        yield from self.aliases

    def display_value(self, value: object) -> str:
        """Render ``value`` for messages, hiding secrets."""

        if self.sensitive:
            return "****"
        return repr(value)


__all__ = ["PropertyDefinition", "SpecialValidator", "ValueKind"]
