"""``FROM`` items and the join tree hanging off them."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from typing_extensions import TypeAlias

from sqlchain.builder._arity import to_sequence
from sqlchain.builder._base import Statement
from sqlchain.builder._fragments import Alias, Column, ColumnLike, Condition, Expression, ExpressionLike, TableName
from sqlchain.exceptions import SQLBuilderError
from sqlchain.typing import OneOrMany
from sqlchain.utils.logging import get_logger

__all__ = (
    "FromItem",
    "FromItemLike",
    "Join",
    "JoinBuilder",
    "JoinCondition",
    "JoinType",
    "table",
)

logger = get_logger("builder.join")


class JoinType(str, Enum):
    """Join kinds and their keywords."""

    UNSPECIFIED = "JOIN"
    INNER = "INNER JOIN"
    LEFT = "LEFT JOIN"
    LEFT_OUTER = "LEFT OUTER JOIN"
    RIGHT = "RIGHT JOIN"
    RIGHT_OUTER = "RIGHT OUTER JOIN"
    FULL = "FULL JOIN"
    FULL_OUTER = "FULL OUTER JOIN"
    CROSS = "CROSS JOIN"


@dataclass(frozen=True)
class JoinCondition:
    """``ON <condition>`` or ``USING (<columns>)``. Exactly one of the two is set."""

    on: "Condition | None" = None
    using: "tuple[Column, ...]" = ()

    def __str__(self) -> str:
        if self.on is not None:
            return f"ON {self.on}"
        return f"USING ({', '.join(str(column) for column in self.using)})"


@dataclass(frozen=True)
class Join:
    type_: JoinType
    target: "FromItem"
    condition: "JoinCondition | None" = None

    def __str__(self) -> str:
        target = f"({self.target})" if self.target.has_joins else str(self.target)
        if self.condition is None:
            return f"{self.type_.value} {target}"
        return f"{self.type_.value} {target} {self.condition}"


@dataclass(frozen=True)
class FromItem:
    """A ``FROM`` source plus its chain of joins.

    Example:
        >>> item = table("Person p").inner_join("City c").on("c.id = p.city_id")
        >>> str(item)
        'Person p INNER JOIN City c ON c.id = p.city_id'
    """

    source: str
    joins: "tuple[Join, ...]" = field(default=())

    def __str__(self) -> str:
        if not self.joins:
            return self.source
        return " ".join((self.source, *(str(join) for join in self.joins)))

    @property
    def has_joins(self) -> bool:
        return bool(self.joins)

    @classmethod
    def of(cls, value: "FromItemLike") -> "FromItem":
        """Convert table names, aliases and aliased sub-selects.

        Raises:
            SQLBuilderError: For un-aliased statements and unsupported types.
        """
        if isinstance(value, FromItem):
            return value
        if isinstance(value, (str, TableName, Alias)):
            return cls(str(value))
        if isinstance(value, Statement):
            msg = "Sub-selects in FROM must be aliased, call .as_(<name>) on the statement first."
            logger.debug("Rejected un-aliased %s in FROM", type(value).__name__)
            raise SQLBuilderError(msg)
        msg = f"Cannot use a value of type {type(value).__name__} as a FROM item."
        raise SQLBuilderError(msg)

    def add_join(self, join: Join) -> "FromItem":
        """Return a copy with ``join`` appended to the chain."""
        return FromItem(self.source, (*self.joins, join))

    def _start(self, type_: JoinType, target: "FromItemLike") -> "JoinBuilder":
        return JoinBuilder(self, FromItem.of(target), type_)

    def join(self, target: "FromItemLike") -> "JoinBuilder":
        return self._start(JoinType.UNSPECIFIED, target)

    def inner_join(self, target: "FromItemLike") -> "JoinBuilder":
        return self._start(JoinType.INNER, target)

    def left_join(self, target: "FromItemLike") -> "JoinBuilder":
        return self._start(JoinType.LEFT, target)

    def left_outer_join(self, target: "FromItemLike") -> "JoinBuilder":
        return self._start(JoinType.LEFT_OUTER, target)

    def right_join(self, target: "FromItemLike") -> "JoinBuilder":
        return self._start(JoinType.RIGHT, target)

    def right_outer_join(self, target: "FromItemLike") -> "JoinBuilder":
        return self._start(JoinType.RIGHT_OUTER, target)

    def full_join(self, target: "FromItemLike") -> "JoinBuilder":
        return self._start(JoinType.FULL, target)

    def full_outer_join(self, target: "FromItemLike") -> "JoinBuilder":
        return self._start(JoinType.FULL_OUTER, target)

    def cross_join(self, target: "FromItemLike") -> "FromItem":
        """Append a ``CROSS JOIN``, which takes no condition."""
        return self.add_join(Join(JoinType.CROSS, FromItem.of(target)))


@dataclass(frozen=True)
class JoinBuilder:
    """A join waiting for its condition.

    Only :meth:`on` and :meth:`using` are offered, so a conditional join cannot reach a
    statement without one.
    """

    source: FromItem
    target: FromItem
    type_: JoinType

    def on(self, condition: ExpressionLike) -> FromItem:
        return self.source.add_join(Join(self.type_, self.target, JoinCondition(on=Expression.of(condition))))

    def using(self, columns: "OneOrMany[ColumnLike]") -> FromItem:
        """Join on equally named columns.

        Raises:
            SQLBuilderError: If no column is given.
        """
        using = to_sequence(columns, Column.of)
        if not using:
            msg = "USING needs at least one column."
            raise SQLBuilderError(msg)
        return self.source.add_join(Join(self.type_, self.target, JoinCondition(using=using)))


def table(name: "str | TableName") -> TableName:
    """Start a joinable table reference.

    Args:
        name: Table name, optionally followed by an alias (``"Person p"``).

    Returns:
        The table name fragment, offering ``join``/``inner_join``/... and ``as_``.
    """
    return TableName.of(name)


FromItemLike: TypeAlias = Union[FromItem, str, TableName, Alias]
