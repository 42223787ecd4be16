from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from sqlchain.builder._base import QueryStatement
from sqlchain.builder._fragments import Condition, OutputExpression, TableName, TableNameLike
from sqlchain.builder.mixins import ReturningClauseMixin, WhereClauseMixin

if TYPE_CHECKING:
    from sqlchain.builder._with import WithClause

__all__ = (
    "DeleteFrom",
    "delete_from",
)


@dataclass(frozen=True)
class DeleteFrom(WhereClauseMixin, ReturningClauseMixin, QueryStatement):
    """``DELETE FROM`` statement, possibly with ``WHERE`` and ``RETURNING`` clauses.

    Example:
        >>> delete_from("Dummy").where_("x > $1").returning("id").to_sql()
        'DELETE FROM Dummy WHERE x > $1 RETURNING id'
    """

    table_name: TableName
    _with: "WithClause | None" = None
    _where: "tuple[Condition, ...]" = field(default=())
    _returning: "tuple[OutputExpression, ...]" = field(default=())

    def _render_parts(self) -> "Iterator[str]":
        if self._with is not None:
            yield self._with._render()  # noqa: SLF001
        yield f"DELETE FROM {self.table_name}"
        yield from self._render_where()
        yield from self._render_returning()


def delete_from(table_name: TableNameLike) -> DeleteFrom:
    """Start a ``DELETE FROM`` statement."""
    return DeleteFrom(TableName.of(table_name))
