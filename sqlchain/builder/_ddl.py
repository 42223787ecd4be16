"""CREATE TABLE statement builder."""

from collections.abc import Iterator
from dataclasses import dataclass, field, replace
from typing import Any

from typing_extensions import Self

from sqlchain.builder._arity import to_sequence
from sqlchain.builder._base import Statement, joined
from sqlchain.builder._column_definition import ColumnDefinition, is_column_pair
from sqlchain.builder._fragments import Column, ColumnLike, TableName, TableNameLike
from sqlchain.exceptions import SQLBuilderError
from sqlchain.typing import OneOrMany

__all__ = (
    "CreateTable",
    "CreateTableBuilder",
    "TableConstraint",
    "create_table",
)


@dataclass(frozen=True)
class TableConstraint:
    """``UNIQUE (<columns>)``."""

    unique: "tuple[Column, ...]"

    def __str__(self) -> str:
        return f"UNIQUE ({joined(self.unique)})"


def _column_definitions(definitions: Any) -> "tuple[ColumnDefinition, ...]":
    return to_sequence(definitions, ColumnDefinition.of, is_item=is_column_pair)


@dataclass(frozen=True)
class CreateTable(Statement):
    """``CREATE TABLE`` statement with its column definitions.

    Example:
        >>> create_table("Dummy").columns((("id", "integer"), column_def("name", "text").not_null())).to_sql()
        'CREATE TABLE Dummy (id integer, name text NOT NULL)'
    """

    table_name: TableName
    definitions: "tuple[ColumnDefinition, ...]"
    _if_not_exists: bool = False
    _constraints: "tuple[TableConstraint, ...]" = field(default=())

    def if_not_exists(self) -> Self:
        return replace(self, _if_not_exists=True)

    def columns(self, definitions: Any) -> Self:
        """Append more column definitions."""
        return replace(self, definitions=(*self.definitions, *_column_definitions(definitions)))

    def unique(self, columns: "OneOrMany[ColumnLike]") -> Self:
        """Add a table-level ``UNIQUE (<columns>)`` constraint.

        Raises:
            SQLBuilderError: If no column is given.
        """
        unique = to_sequence(columns, Column.of)
        if not unique:
            msg = "UNIQUE table constraint needs at least one column."
            raise SQLBuilderError(msg)
        return replace(self, _constraints=(*self._constraints, TableConstraint(unique)))

    def _render_parts(self) -> "Iterator[str]":
        yield "CREATE TABLE IF NOT EXISTS" if self._if_not_exists else "CREATE TABLE"
        yield str(self.table_name)
        yield f"({joined((*self.definitions, *self._constraints))})"


@dataclass(frozen=True)
class CreateTableBuilder:
    """``CREATE TABLE <name>`` waiting for its columns."""

    table_name: TableName
    _if_not_exists: bool = False

    def if_not_exists(self) -> Self:
        return replace(self, _if_not_exists=True)

    def columns(self, definitions: Any) -> CreateTable:
        """Define the table's columns.

        Args:
            definitions: Column definition builders from :func:`column_def`, plain
                ``(name, type)`` pairs, or a collection mixing both.

        Raises:
            SQLBuilderError: If no column is given, or an item cannot define a column.
        """
        columns = _column_definitions(definitions)
        if not columns:
            msg = "CREATE TABLE needs at least one column definition."
            raise SQLBuilderError(msg)
        return CreateTable(self.table_name, columns, self._if_not_exists)


def create_table(table_name: TableNameLike) -> CreateTableBuilder:
    """Start a ``CREATE TABLE`` statement."""
    return CreateTableBuilder(TableName.of(table_name))
