"""``WITH`` clauses (common table expressions).

A chain is started with :func:`with_`, each entry is closed with ``as_(<statement>)``, and the
finished clause turns into the statement that carries it::

    with_("recent").as_(select("id").from_("Orders").where_("age < 7")).select("*").from_("recent")

The clause has no rendering of its own outside the statement it prefixes.
"""

from dataclasses import dataclass, field, replace

from sqlchain.builder._arity import to_sequence
from sqlchain.builder._base import QueryStatement, joined
from sqlchain.builder._delete import DeleteFrom
from sqlchain.builder._fragments import Column, ColumnLike, ExpressionLike, TableName, TableNameLike
from sqlchain.builder._insert import BareInsertInto
from sqlchain.builder._select import Select
from sqlchain.builder._update import BareUpdate
from sqlchain.exceptions import SQLBuilderError
from sqlchain.typing import OneOrMany
from sqlchain.utils.logging import get_logger

__all__ = (
    "WithClause",
    "WithQuery",
    "WithQueryBuilder",
    "with_",
    "with_recursive",
)

logger = get_logger("builder.with")


@dataclass(frozen=True)
class WithQuery:
    """One named entry of a ``WITH`` clause."""

    name: TableName
    columns: "tuple[Column, ...]"
    statement: str

    def __str__(self) -> str:
        if self.columns:
            return f"{self.name}({joined(self.columns)}) AS ({self.statement})"
        return f"{self.name} AS ({self.statement})"


@dataclass(frozen=True)
class WithClause:
    """Ordered ``WITH`` entries, ready to prefix a statement.

    Entry order is kept as given; later entries may refer to earlier ones.
    """

    queries: "tuple[WithQuery, ...]" = field(default=())
    recursive: bool = False

    def _render(self) -> str:
        keyword = "WITH RECURSIVE" if self.recursive else "WITH"
        return f"{keyword} {joined(self.queries)}"

    def and_(self, name: TableNameLike) -> "WithQueryBuilder":
        """Start the next named entry."""
        return WithQueryBuilder(self, TableName.of(name))

    def select(self, expressions: "OneOrMany[ExpressionLike]" = ()) -> Select:
        return Select(_with=self).and_select(expressions)

    def insert_into(self, table_name: TableNameLike) -> BareInsertInto:
        return BareInsertInto(TableName.of(table_name), self)

    def update(self, table_name: TableNameLike) -> BareUpdate:
        return BareUpdate(TableName.of(table_name), self)

    def delete_from(self, table_name: TableNameLike) -> DeleteFrom:
        return DeleteFrom(TableName.of(table_name), _with=self)


@dataclass(frozen=True)
class WithQueryBuilder:
    """A named ``WITH`` entry waiting for the statement that defines it."""

    clause: WithClause
    name: TableName
    column_names: "tuple[Column, ...]" = ()

    def columns(self, columns: "OneOrMany[ColumnLike]") -> "WithQueryBuilder":
        """Give the entry an explicit column list."""
        return replace(self, column_names=(*self.column_names, *to_sequence(columns, Column.of)))

    def as_(self, statement: QueryStatement) -> WithClause:
        """Define the entry with a ``SELECT``, ``INSERT``, ``UPDATE`` or ``DELETE`` statement.

        Raises:
            SQLBuilderError: If ``statement`` cannot define a ``WITH`` query.

        Returns:
            The clause with this entry appended.
        """
        if not isinstance(statement, QueryStatement):
            logger.debug("Rejected %s as WITH query %s", type(statement).__name__, self.name)
            msg = f"WITH query {self.name} must be a SELECT, INSERT, UPDATE or DELETE statement."
            raise SQLBuilderError(msg)
        query = WithQuery(self.name, self.column_names, statement.to_sql())
        return replace(self.clause, queries=(*self.clause.queries, query))


def with_(name: TableNameLike) -> WithQueryBuilder:
    """Start a ``WITH`` clause with its first named entry.

    Example:
        >>> with_("thing").as_(select("1 + 1")).select("x").from_("thing").to_sql()
        'WITH thing AS (SELECT 1 + 1) SELECT x FROM thing'
    """
    return WithQueryBuilder(WithClause(), TableName.of(name))


def with_recursive(name: TableNameLike) -> WithQueryBuilder:
    """Start a ``WITH RECURSIVE`` clause with its first named entry."""
    return WithQueryBuilder(WithClause(recursive=True), TableName.of(name))
