"""Argument normalization for "one or more" builder methods.

Every clause method accepts a single value, a tuple, a list, or any iterator, and stores an
ordered tuple of fragments. The helpers here are the only place that decides which of those
shapes a call argument has.
"""

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from sqlchain.builder._fragments import ColumnValuePair, Expression
from sqlchain.exceptions import ArityMismatchError, SQLBuilderError
from sqlchain.utils.type_guards import is_iterable_argument, is_mapping

__all__ = (
    "to_pairs",
    "to_row",
    "to_rows",
    "to_sequence",
)

FragmentT = TypeVar("FragmentT")


def to_sequence(
    value: Any,
    convert: "Callable[[Any], FragmentT]",
    *,
    is_item: "Callable[[Any], bool] | None" = None,
) -> "tuple[FragmentT, ...]":
    """Normalize a call argument into an ordered tuple of fragments.

    Args:
        value: ``None``, a single item, or a collection of items.
        convert: Conversion applied to every item.
        is_item: Optional predicate marking values that are single items even though they are
            iterable, such as ``(name, type)`` pairs.

    Returns:
        The converted items in input order.
    """
    if value is None:
        return ()
    if (is_item is not None and is_item(value)) or not is_iterable_argument(value):
        return (convert(value),)
    return tuple(convert(item) for item in value)


def to_row(value: Any) -> "tuple[Expression, ...]":
    """Normalize one ``VALUES`` row.

    Raises:
        ArityMismatchError: If the row is empty.

    Returns:
        The row's expressions.
    """
    row = to_sequence(value, Expression.of)
    if not row:
        raise ArityMismatchError(actual=0)
    return row


def to_rows(values: "Iterable[Any]", arity: "int | None" = None) -> "tuple[tuple[Expression, ...], ...]":
    """Normalize a batch of ``VALUES`` rows and check that they share one arity.

    Args:
        values: Iterable of rows, each row being anything :func:`to_row` accepts.
        arity: Arity fixed by earlier columns or rows. ``None`` lets the first row fix it.

    Raises:
        SQLBuilderError: If ``values`` is not a collection of rows.
        ArityMismatchError: If a row is empty or its arity differs from the fixed one.

    Returns:
        The normalized rows.
    """
    if not is_iterable_argument(values):
        msg = f"VALUES expects a collection of rows, got {type(values).__name__}."
        raise SQLBuilderError(msg)
    rows: list[tuple[Expression, ...]] = []
    for value in values:
        row = to_row(value)
        if arity is None:
            arity = len(row)
        elif len(row) != arity:
            raise ArityMismatchError(actual=len(row), expected=arity)
        rows.append(row)
    return tuple(rows)


def _is_single_pair(value: Any) -> bool:
    return (
        isinstance(value, tuple)
        and len(value) == 2  # noqa: PLR2004
        and not any(isinstance(part, (tuple, ColumnValuePair)) for part in value)
    )


def to_pairs(value: Any) -> "tuple[ColumnValuePair, ...]":
    """Normalize ``SET`` assignments.

    Accepts a :class:`ColumnValuePair`, a single ``(column, value)`` tuple, a mapping of column
    to value, or a collection of pairs.

    Returns:
        The assignments in input order.
    """
    if is_mapping(value):
        return tuple(ColumnValuePair.of((column, expression)) for column, expression in value.items())
    return to_sequence(value, ColumnValuePair.of, is_item=_is_single_pair)
