"""Type guard functions for runtime type checking in sqlchain.

These helpers let the argument normalizer tell single values apart from collections of values
without scattering ``isinstance`` chains through the builders.
"""

from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Any

from typing_extensions import TypeGuard

__all__ = (
    "is_iterable_argument",
    "is_mapping",
    "is_number",
    "is_text",
)


def is_text(obj: Any) -> TypeGuard[str]:
    """Check if a value is plain SQL text.

    Args:
        obj: Value to check.

    Returns:
        bool
    """
    return isinstance(obj, str)


def is_number(obj: Any) -> TypeGuard[int | float | Decimal]:
    """Check if a value is a numeric literal, booleans included.

    Args:
        obj: Value to check.

    Returns:
        bool
    """
    return isinstance(obj, (int, float, Decimal))


def is_mapping(obj: Any) -> TypeGuard[Mapping[Any, Any]]:
    return isinstance(obj, Mapping)


def is_iterable_argument(obj: Any) -> TypeGuard[Iterable[Any]]:
    """Check if a call argument should be treated as a collection of items.

    Text and bytes are iterable but always count as a single item. Builder values and fragments
    are never iterable, so they fall through to ``False`` as well.

    Args:
        obj: Value to check.

    Returns:
        bool
    """
    if isinstance(obj, (str, bytes, bytearray)):
        return False
    return isinstance(obj, Iterable)
