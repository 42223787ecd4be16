"""INSERT statement builder.

:func:`insert_into` returns a :class:`BareInsertInto`, which cannot be rendered until the kind of
``VALUES`` clause is chosen:

1. ``default_values()`` for ``DEFAULT VALUES``;
2. ``values(rows)`` for ``VALUES (...)`` with unspecified columns;
3. ``columns(cols)`` followed by ``values(rows)`` for ``(...) VALUES (...)``.

The first columns or rows fix the arity of the statement. Every later row must match it.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Union

from typing_extensions import Self, TypeAlias

from sqlchain.builder._arity import to_pairs, to_rows, to_sequence
from sqlchain.builder._base import QueryStatement, joined
from sqlchain.builder._fragments import Column, ColumnLike, ColumnValuePair, Expression, TableName, TableNameLike
from sqlchain.builder.mixins import ReturningClauseMixin
from sqlchain.exceptions import ArityMismatchError, SQLBuilderError
from sqlchain.typing import OneOrMany
from sqlchain.utils.logging import get_logger

if TYPE_CHECKING:
    from sqlchain.builder._with import WithClause

__all__ = (
    "BareInsertInto",
    "DefaultValues",
    "InsertInto",
    "InsertIntoColumnsBuilder",
    "InsertValues",
    "OnConflict",
    "OnConflictClauseBuilder",
    "WithColumns",
    "WithoutColumns",
    "insert_into",
)

logger = get_logger("builder.insert")

Row: TypeAlias = "tuple[Expression, ...]"


def _render_rows(rows: "tuple[Row, ...]") -> str:
    return "VALUES " + ", ".join(f"({joined(row)})" for row in rows)


@dataclass(frozen=True)
class DefaultValues:
    """``DEFAULT VALUES``."""

    def __str__(self) -> str:
        return "DEFAULT VALUES"


@dataclass(frozen=True)
class WithoutColumns:
    """``VALUES (...), ...`` with unspecified columns. The first row fixes the arity."""

    rows: "tuple[Row, ...]"

    @property
    def arity(self) -> int:
        return len(self.rows[0])

    def add(self, rows: "Iterable[Any]") -> "WithoutColumns":
        return WithoutColumns((*self.rows, *to_rows(rows, self.arity)))

    def __str__(self) -> str:
        return _render_rows(self.rows)


@dataclass(frozen=True)
class WithColumns:
    """``(<columns>) VALUES (...), ...``. The column list fixes the arity."""

    columns: "tuple[Column, ...]"
    rows: "tuple[Row, ...]"

    @property
    def arity(self) -> int:
        return len(self.columns)

    def add(self, rows: "Iterable[Any]") -> "WithColumns":
        return WithColumns(self.columns, (*self.rows, *to_rows(rows, self.arity)))

    def __str__(self) -> str:
        return f"({joined(self.columns)}) {_render_rows(self.rows)}"


InsertValues: TypeAlias = Union[DefaultValues, WithoutColumns, WithColumns]


def _first_rows(rows: "Iterable[Any]", arity: "int | None" = None) -> "tuple[Row, ...]":
    normalized = to_rows(rows, arity)
    if not normalized:
        logger.debug("Rejected empty VALUES batch")
        raise ArityMismatchError(actual=0)
    return normalized


@dataclass(frozen=True)
class OnConflict:
    """``ON CONFLICT [(<target>)] DO NOTHING | DO UPDATE SET ...``."""

    target: "tuple[Column, ...]" = ()
    assignments: "tuple[ColumnValuePair, ...]" = ()

    def __str__(self) -> str:
        clause = f"ON CONFLICT ({joined(self.target)})" if self.target else "ON CONFLICT"
        if self.assignments:
            return f"{clause} DO UPDATE SET {joined(self.assignments)}"
        return f"{clause} DO NOTHING"


@dataclass(frozen=True)
class InsertInto(ReturningClauseMixin, QueryStatement):
    """``INSERT INTO`` statement with its ``VALUES`` clause chosen.

    Example:
        >>> insert_into("Rectangle").columns(("width", "height")).values([("$1", "$2")]).returning("id").to_sql()
        'INSERT INTO Rectangle (width, height) VALUES ($1, $2) RETURNING id'
    """

    table_name: TableName
    values_clause: InsertValues
    with_clause: "WithClause | None" = None
    _returning: "tuple[Expression, ...]" = field(default=())
    _on_conflict: "OnConflict | None" = None

    def values(self, rows: "Iterable[Any]") -> Self:
        """Append more rows. Each row must match the statement's arity.

        Raises:
            SQLBuilderError: On a ``DEFAULT VALUES`` statement.
            ArityMismatchError: If a row's arity differs from the fixed one.
        """
        if isinstance(self.values_clause, DefaultValues):
            msg = "Cannot add rows to an INSERT ... DEFAULT VALUES statement."
            raise SQLBuilderError(msg)
        return replace(self, values_clause=self.values_clause.add(rows))

    def on_conflict(self, target: "OneOrMany[ColumnLike]" = ()) -> "OnConflictClauseBuilder":
        """Start an ``ON CONFLICT`` clause, optionally naming the conflict target columns.

        Calling it again replaces the previous clause.
        """
        return OnConflictClauseBuilder(self, to_sequence(target, Column.of))

    def _render_parts(self) -> "Iterator[str]":
        if self.with_clause is not None:
            yield self.with_clause._render()  # noqa: SLF001
        yield f"INSERT INTO {self.table_name}"
        yield str(self.values_clause)
        if self._on_conflict is not None:
            yield str(self._on_conflict)
        yield from self._render_returning()


@dataclass(frozen=True)
class OnConflictClauseBuilder:
    """``ON CONFLICT`` clause waiting for its action."""

    statement: InsertInto
    target: "tuple[Column, ...]" = ()

    def do_nothing(self) -> InsertInto:
        return replace(self.statement, _on_conflict=OnConflict(self.target))

    def do_update_set(self, assignments: Any) -> InsertInto:
        """Resolve the conflict with ``DO UPDATE SET``.

        Args:
            assignments: A ``(column, value)`` pair, a mapping, or a collection of pairs.

        Raises:
            SQLBuilderError: If no assignment is given.
        """
        pairs = to_pairs(assignments)
        if not pairs:
            msg = "ON CONFLICT DO UPDATE SET needs at least one assignment."
            raise SQLBuilderError(msg)
        return replace(self.statement, _on_conflict=OnConflict(self.target, pairs))


@dataclass(frozen=True)
class InsertIntoColumnsBuilder:
    """``INSERT INTO <t> (<columns>)`` waiting for its first rows. Only offers :meth:`values`."""

    table_name: TableName
    columns: "tuple[Column, ...]"
    with_clause: "WithClause | None" = None

    def values(self, rows: "Iterable[Any]") -> InsertInto:
        """Add the first rows, each matching the column count.

        Raises:
            ArityMismatchError: If no row is given, or a row's arity differs from the column count.
        """
        clause = WithColumns(self.columns, _first_rows(rows, len(self.columns)))
        return InsertInto(self.table_name, clause, self.with_clause)


@dataclass(frozen=True)
class BareInsertInto:
    """``INSERT INTO <t>`` without a ``VALUES`` clause. Cannot be rendered."""

    table_name: TableName
    with_clause: "WithClause | None" = None

    def default_values(self) -> InsertInto:
        return InsertInto(self.table_name, DefaultValues(), self.with_clause)

    def values(self, rows: "Iterable[Any]") -> InsertInto:
        """Add ``VALUES`` rows with unspecified columns. The first row fixes the arity.

        Raises:
            ArityMismatchError: If no row is given, a row is empty, or rows differ in arity.
        """
        return InsertInto(self.table_name, WithoutColumns(_first_rows(rows)), self.with_clause)

    def columns(self, columns: "OneOrMany[ColumnLike]") -> InsertIntoColumnsBuilder:
        """Name the target columns, fixing the arity of every row.

        Raises:
            ArityMismatchError: If no column is given.
        """
        names = to_sequence(columns, Column.of)
        if not names:
            raise ArityMismatchError(actual=0)
        return InsertIntoColumnsBuilder(self.table_name, names, self.with_clause)


def insert_into(table_name: TableNameLike) -> BareInsertInto:
    """Start an ``INSERT INTO`` statement.

    Example:
        >>> insert_into("Dummy").default_values().to_sql()
        'INSERT INTO Dummy DEFAULT VALUES'
    """
    return BareInsertInto(TableName.of(table_name))
