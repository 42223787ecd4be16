from collections.abc import Iterable
from decimal import Decimal
from typing import Union

from typing_extensions import TypeAlias, TypeVar

__all__ = (
    "NumericLiteral",
    "OneOrMany",
    "T",
)

T = TypeVar("T")

NumericLiteral: TypeAlias = Union[int, float, Decimal]
"""Numeric values rendered verbatim into statement text."""

OneOrMany: TypeAlias = Union[T, Iterable[T]]
"""A single item, a tuple, a list, or any iterator of items.

:class:`str` is always a single item.
"""
