from __future__ import annotations

"""Structural comparison helpers.

All helpers return ``-1``, ``0`` or ``1`` for scalars.  Sequence helpers
combine per-position results with a bitwise OR: any difference yields a
non-zero result, but the sign of an OR-combined value carries no ordering
meaning.  Length differences always dominate, the longer side sorting
greater.

Null policy, applied everywhere: ``None`` sorts before any value and two
``None`` values are equal.
"""

from typing import Any, Callable, Mapping, Optional, Sequence

from lxml import etree as ET

from .exceptions import ComparisonTypeError

__all__ = [
    "SyndicationComparable",
    "sign",
    "compare_text",
    "compare_values",
    "compare_sequence",
    "compare_mapping",
    "compare_entities",
    "compare_entity_sequence",
    "ensure_comparable",
]


def sign(value: int) -> int:
    return (value > 0) - (value < 0)


def compare_text(source: Optional[str], target: Optional[str], ignore_case: bool = True) -> int:
    """Ordinal string comparison; ``None`` is treated as ``""``."""
    left = source or ""
    right = target or ""
    if ignore_case:
        left = left.upper()
        right = right.upper()
    return (left > right) - (left < right)


def compare_values(source: Any, target: Any) -> int:
    """Natural-order comparison of booleans, numbers, dates and enums."""
    if source is None and target is None:
        return 0
    if source is None:
        return -1
    if target is None:
        return 1
    left = getattr(source, "value", source)
    right = getattr(target, "value", target)
    return (left > right) - (left < right)


def compare_sequence(source: Sequence[Any], target: Sequence[Any], ignore_case: bool = True) -> int:
    """Positional comparison of two scalar sequences."""
    if len(source) != len(target):
        return 1 if len(source) > len(target) else -1
    result = 0
    for left, right in zip(source, target):
        if isinstance(left, str) or isinstance(right, str):
            result |= compare_text(left, right, ignore_case)
        else:
            result |= compare_values(left, right)
    return result


def compare_mapping(source: Mapping[str, Optional[str]], target: Mapping[str, Optional[str]],
                    ignore_case: bool = True) -> int:
    """Order-insensitive comparison of two string maps.

    Equivalent key/value sets compare equal regardless of insertion order.
    A key present in *source* but missing from *target* counts as greater.
    """
    if len(source) != len(target):
        return 1 if len(source) > len(target) else -1
    result = 0
    for key, value in source.items():
        if key not in target:
            result |= 1
            continue
        result |= compare_text(value, target[key], ignore_case)
    return result


def compare_entities(source: Any, target: Any) -> int:
    """Compare two entities (or ``None``) with the null policy applied."""
    if source is None and target is None:
        return 0
    if source is None:
        return -1
    if target is None:
        return 1
    return source.compare_to(target)


def compare_entity_sequence(source: Sequence[Any], target: Sequence[Any],
                            compare: Optional[Callable[[Any, Any], int]] = None) -> int:
    """Positional comparison of entity sequences with length dominance."""
    if len(source) != len(target):
        return 1 if len(source) > len(target) else -1
    compare = compare or compare_entities
    result = 0
    for left, right in zip(source, target):
        result |= compare(left, right)
    return result


def ensure_comparable(other: Any, expected: type) -> None:
    """Raise :class:`ComparisonTypeError` unless *other* is an *expected* instance."""
    if not isinstance(other, expected):
        raise ComparisonTypeError(expected, other)


# ---------------------------------------------------------------------------
# Operator mixin
# ---------------------------------------------------------------------------

class SyndicationComparable:
    """Derive equality, ordering and hashing from ``compare_to``.

    Subclasses implement ``compare_to(other)`` and ``write_to(parent)``.
    ``None`` sorts before any instance.  Equality with an object of an
    unrelated type is ``False``; ordering against one raises
    :class:`ComparisonTypeError`.  The hash is the hash of the serialised
    XML fragment, so entities that serialise identically hash identically.
    """

    def compare_to(self, other: Any) -> int:
        raise NotImplementedError

    def write_to(self, parent: ET._Element) -> None:
        raise NotImplementedError

    def to_string(self) -> str:
        """Return the XML fragment ``write_to`` produces, pretty-printed."""
        holder = ET.Element("fragment")
        self.write_to(holder)
        return "".join(
            ET.tostring(child, encoding="unicode", pretty_print=True) for child in holder
        )

    def __eq__(self, other: Any) -> bool:
        if other is None:
            return False
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.compare_to(other) == 0

    def __ne__(self, other: Any) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other: Any) -> bool:
        if other is None:
            return False
        return self.compare_to(other) < 0

    def __gt__(self, other: Any) -> bool:
        if other is None:
            return True
        return self.compare_to(other) > 0

    def __le__(self, other: Any) -> bool:
        return not self.__gt__(other)

    def __ge__(self, other: Any) -> bool:
        return not self.__lt__(other)

    def __hash__(self) -> int:
        return hash(self.to_string())
