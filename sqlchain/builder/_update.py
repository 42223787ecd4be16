"""UPDATE statement builder.

:func:`update` returns a :class:`BareUpdate` that only offers ``set``, so an ``UPDATE`` without a
``SET`` clause cannot be rendered.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from typing_extensions import Self

from sqlchain.builder._arity import to_pairs
from sqlchain.builder._base import QueryStatement, joined
from sqlchain.builder._fragments import (
    ColumnLike,
    ColumnValuePair,
    Condition,
    ExpressionLike,
    OutputExpression,
    TableName,
    TableNameLike,
)
from sqlchain.builder.mixins import ReturningClauseMixin, WhereClauseMixin
from sqlchain.exceptions import SQLBuilderError
from sqlchain.utils.logging import get_logger

if TYPE_CHECKING:
    from sqlchain.builder._with import WithClause

__all__ = (
    "BareUpdate",
    "Update",
    "update",
)

logger = get_logger("builder.update")

_MISSING = object()


def _assignments(column: "ColumnLike | Any", value: "ExpressionLike | object") -> "tuple[ColumnValuePair, ...]":
    if value is _MISSING:
        pairs = to_pairs(column)
    else:
        pairs = (ColumnValuePair.of((column, value)),)  # type: ignore[arg-type]
    if not pairs:
        logger.debug("Rejected empty SET assignment list")
        msg = "SET needs at least one assignment."
        raise SQLBuilderError(msg)
    return pairs


@dataclass(frozen=True)
class Update(WhereClauseMixin, ReturningClauseMixin, QueryStatement):
    """``UPDATE`` statement with at least one assignment.

    Example:
        >>> update("Dummy").set("x", 1).where_("x > 0").to_sql()
        'UPDATE Dummy SET x = 1 WHERE x > 0'
    """

    table_name: TableName
    assignments: "tuple[ColumnValuePair, ...]"
    with_clause: "WithClause | None" = None
    _where: "tuple[Condition, ...]" = field(default=())
    _returning: "tuple[OutputExpression, ...]" = field(default=())

    def set(self, column: "ColumnLike | Any", value: "ExpressionLike | object" = _MISSING) -> Self:
        """Append assignments.

        Args:
            column: The column to assign, or a mapping / collection of ``(column, value)`` pairs
                when ``value`` is omitted.
            value: The value to assign to ``column``.

        Raises:
            SQLBuilderError: If no assignment is given.
        """
        return replace(self, assignments=(*self.assignments, *_assignments(column, value)))

    def _render_parts(self) -> "Iterator[str]":
        if self.with_clause is not None:
            yield self.with_clause._render()  # noqa: SLF001
        yield f"UPDATE {self.table_name} SET {joined(self.assignments)}"
        yield from self._render_where()
        yield from self._render_returning()


@dataclass(frozen=True)
class BareUpdate:
    """``UPDATE <t>`` without assignments. Cannot be rendered, only offers :meth:`set`."""

    table_name: TableName
    with_clause: "WithClause | None" = None

    def set(self, column: "ColumnLike | Any", value: "ExpressionLike | object" = _MISSING) -> Update:
        """Add the first assignments.

        Either ``set("x", 1)`` or ``set({"x": 1, "y": 2})`` / ``set([("x", 1), ("y", 2)])``.

        Raises:
            SQLBuilderError: If no assignment is given.
        """
        return Update(self.table_name, _assignments(column, value), self.with_clause)


def update(table_name: TableNameLike) -> BareUpdate:
    """Start an ``UPDATE`` statement."""
    return BareUpdate(TableName.of(table_name))
