"""SELECT statement builder.

Every clause method returns a new :class:`Select`. Clauses render in SQL order no matter the
order of the calls that built them.

Example::

    (
        select((Expression("country.name").as_("name"), Expression("COUNT(*)").as_("count")))
        .from_(table("Country").as_("country").inner_join(table("City").as_("city")).on("city.country_id = country.id"))
        .where_("city.population > 1000000")
        .group_by("country.name")
        .order_by(Expression("count").desc())
        .limit(10)
        .to_sql()
    )
"""

from collections.abc import Iterator
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING

from typing_extensions import Self

from sqlchain.builder._arity import to_sequence
from sqlchain.builder._base import QueryStatement, joined
from sqlchain.builder._fragments import Alias, Condition, Expression, ExpressionLike
from sqlchain.builder._join import FromItem, FromItemLike
from sqlchain.builder._order_by import OrderBy, OrderByLike
from sqlchain.builder.mixins import WhereClauseMixin
from sqlchain.exceptions import SQLBuilderError
from sqlchain.typing import OneOrMany

if TYPE_CHECKING:
    from sqlchain.builder._with import WithClause

__all__ = (
    "Distinct",
    "DistinctKind",
    "FromSelectBuilder",
    "Select",
    "from_",
    "select",
)


class DistinctKind(str, Enum):
    ALL = "ALL"
    DISTINCT = "DISTINCT"
    DISTINCT_ON = "DISTINCT ON"


@dataclass(frozen=True)
class Distinct:
    """``ALL`` | ``DISTINCT`` | ``DISTINCT ON (...)``."""

    kind: DistinctKind
    expressions: "tuple[Expression, ...]" = ()

    def __str__(self) -> str:
        if self.kind is DistinctKind.DISTINCT_ON:
            return f"DISTINCT ON ({joined(self.expressions)})"
        return self.kind.value


def _row_count(value: "int | ExpressionLike", clause: str) -> Expression:
    if isinstance(value, int) and not isinstance(value, bool) and value < 0:
        msg = f"{clause} cannot be negative, got {value}."
        raise SQLBuilderError(msg)
    return Expression.of(value)


@dataclass(frozen=True)
class Select(WhereClauseMixin, QueryStatement):
    """``SELECT`` statement, possibly with additional clauses.

    Any instance is renderable, including the empty ``SELECT``.
    """

    _with: "WithClause | None" = None
    _expressions: "tuple[Expression, ...]" = field(default=())
    _from: "tuple[FromItem, ...]" = field(default=())
    _where: "tuple[Condition, ...]" = field(default=())
    _group_by: "tuple[Expression, ...]" = field(default=())
    _having: "tuple[Condition, ...]" = field(default=())
    _order_by: "tuple[OrderBy, ...]" = field(default=())
    _limit: "Expression | None" = None
    _offset: "Expression | None" = None
    _distinct: "Distinct | None" = None

    def and_select(self, expressions: "OneOrMany[ExpressionLike]") -> Self:
        """Add more expressions to the select list."""
        return replace(self, _expressions=(*self._expressions, *to_sequence(expressions, Expression.of)))

    def all(self) -> Self:
        """Explicitly select ``ALL`` rows. Replaces any distinct mode."""
        return replace(self, _distinct=Distinct(DistinctKind.ALL))

    def distinct(self) -> Self:
        """Select ``DISTINCT`` rows. Replaces any distinct mode."""
        return replace(self, _distinct=Distinct(DistinctKind.DISTINCT))

    def distinct_on(self, expressions: "OneOrMany[ExpressionLike]") -> Self:
        """Select ``DISTINCT ON (...)`` the given expressions. Replaces any distinct mode."""
        return replace(
            self, _distinct=Distinct(DistinctKind.DISTINCT_ON, to_sequence(expressions, Expression.of))
        )

    def from_(self, items: "OneOrMany[FromItemLike]") -> Self:
        """Add one or more ``FROM`` items.

        Sub-selects are accepted once aliased: ``select("id").from_("City").as_("x")``.
        """
        return replace(self, _from=(*self._from, *to_sequence(items, FromItem.of)))

    def group_by(self, groupings: "OneOrMany[ExpressionLike]") -> Self:
        return replace(self, _group_by=(*self._group_by, *to_sequence(groupings, Expression.of)))

    def having(self, conditions: "OneOrMany[ExpressionLike]") -> Self:
        """Add one or more ``HAVING`` conditions, ``AND``-ed together."""
        return replace(self, _having=(*self._having, *to_sequence(conditions, Expression.of)))

    def order_by(self, order_bys: "OneOrMany[OrderByLike]") -> Self:
        return replace(self, _order_by=(*self._order_by, *to_sequence(order_bys, OrderBy.of)))

    def limit(self, count: "int | ExpressionLike") -> Self:
        """Set the ``LIMIT``. Accepts a row count or an expression such as a placeholder.

        Raises:
            SQLBuilderError: If the row count is negative.
        """
        return replace(self, _limit=_row_count(count, "LIMIT"))

    def offset(self, count: "int | ExpressionLike") -> Self:
        """Set the ``OFFSET``. Accepts a row count or an expression such as a placeholder.

        Raises:
            SQLBuilderError: If the row count is negative.
        """
        return replace(self, _offset=_row_count(count, "OFFSET"))

    def as_(self, alias: str) -> Alias:
        """Alias this statement as a sub-select: ``(SELECT ...) AS <alias>``."""
        return Alias(f"({self.to_sql()})", alias)

    def _render_parts(self) -> "Iterator[str]":
        if self._with is not None:
            yield self._with._render()  # noqa: SLF001
        yield "SELECT"
        if self._distinct is not None:
            yield str(self._distinct)
        if self._expressions:
            yield joined(self._expressions)
        if self._from:
            yield f"FROM {joined(self._from)}"
        yield from self._render_where()
        if self._group_by:
            yield f"GROUP BY {joined(self._group_by)}"
        if self._having:
            yield f"HAVING {joined(self._having, ' AND ')}"
        if self._order_by:
            yield f"ORDER BY {joined(self._order_by)}"
        if self._limit is not None:
            yield f"LIMIT {self._limit}"
        if self._offset is not None:
            yield f"OFFSET {self._offset}"


@dataclass(frozen=True)
class FromSelectBuilder:
    """A ``FROM`` list waiting for its select list."""

    items: "tuple[FromItem, ...]"

    def select(self, expressions: "OneOrMany[ExpressionLike]" = ()) -> Select:
        return Select(_from=self.items).and_select(expressions)


def select(expressions: "OneOrMany[ExpressionLike]" = ()) -> Select:
    """Start a ``SELECT`` statement with the given expressions.

    Example:
        >>> select(("id", "name")).from_("Person").to_sql()
        'SELECT id, name FROM Person'
    """
    return Select(_expressions=to_sequence(expressions, Expression.of))


def from_(items: "OneOrMany[FromItemLike]") -> FromSelectBuilder:
    """Start a ``SELECT`` statement from its ``FROM`` clause.

    Example:
        >>> from_("City").select("*").to_sql()
        'SELECT * FROM City'
    """
    return FromSelectBuilder(to_sequence(items, FromItem.of))
