"""Typed wrappers over raw SQL text.

Fragments never validate or escape their text. They exist so that a table name cannot be passed
where a value expression is expected, and so that the builders know how to combine them.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Union

from mypy_extensions import trait
from typing_extensions import TypeAlias

from sqlchain.exceptions import SQLBuilderError
from sqlchain.utils.logging import get_logger
from sqlchain.utils.type_guards import is_number, is_text

if TYPE_CHECKING:
    from sqlchain.builder._join import FromItem, JoinBuilder
    from sqlchain.builder._order_by import OrderBy

__all__ = (
    "Alias",
    "Aliasable",
    "Column",
    "ColumnLike",
    "ColumnValuePair",
    "Condition",
    "Expression",
    "ExpressionLike",
    "Fragment",
    "Joinable",
    "Orderable",
    "OutputExpression",
    "SortExpression",
    "TableName",
    "TableNameLike",
    "render_literal",
)

logger = get_logger("builder.fragments")


def render_literal(value: "int | float | Decimal") -> str:
    """Render a numeric literal as SQL text.

    Args:
        value: Number to render. Booleans render as ``TRUE``/``FALSE``.

    Returns:
        The literal text.
    """
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    return str(value)


def _unsupported(target: type, value: Any) -> SQLBuilderError:
    logger.debug("Rejected %s value for %s", type(value).__name__, target.__name__)
    return SQLBuilderError(f"Cannot use a value of type {type(value).__name__} as {target.__name__}.")


class Fragment:
    """Base class of all typed SQL text wrappers."""

    __slots__ = ()

    def __str__(self) -> str:
        raise NotImplementedError


@trait
class Aliasable:
    """Fragments that can be given a name with ``AS``."""

    __slots__ = ()

    def as_(self, alias: str) -> "Alias":
        """Alias this fragment.

        Args:
            alias: The name to give.

        Returns:
            ``<self> AS <alias>``
        """
        return Alias(str(self), alias)


@trait
class Orderable:
    """Fragments that can be used as sort keys."""

    __slots__ = ()

    def asc(self) -> "OrderBy":
        from sqlchain.builder._order_by import OrderBy

        return OrderBy.of(self).asc()  # type: ignore[arg-type]

    def desc(self) -> "OrderBy":
        from sqlchain.builder._order_by import OrderBy

        return OrderBy.of(self).desc()  # type: ignore[arg-type]

    def nulls_first(self) -> "OrderBy":
        from sqlchain.builder._order_by import OrderBy

        return OrderBy.of(self).nulls_first()  # type: ignore[arg-type]

    def nulls_last(self) -> "OrderBy":
        from sqlchain.builder._order_by import OrderBy

        return OrderBy.of(self).nulls_last()  # type: ignore[arg-type]


@trait
class Joinable:
    """Fragments naming a source that joins can start from.

    Every method converts the fragment into a :class:`~sqlchain.builder.FromItem` first.
    """

    __slots__ = ()

    def _as_from_item(self) -> "FromItem":
        from sqlchain.builder._join import FromItem

        return FromItem.of(self)  # type: ignore[arg-type]

    def join(self, target: "Any") -> "JoinBuilder":
        return self._as_from_item().join(target)

    def inner_join(self, target: "Any") -> "JoinBuilder":
        return self._as_from_item().inner_join(target)

    def left_join(self, target: "Any") -> "JoinBuilder":
        return self._as_from_item().left_join(target)

    def left_outer_join(self, target: "Any") -> "JoinBuilder":
        return self._as_from_item().left_outer_join(target)

    def right_join(self, target: "Any") -> "JoinBuilder":
        return self._as_from_item().right_join(target)

    def right_outer_join(self, target: "Any") -> "JoinBuilder":
        return self._as_from_item().right_outer_join(target)

    def full_join(self, target: "Any") -> "JoinBuilder":
        return self._as_from_item().full_join(target)

    def full_outer_join(self, target: "Any") -> "JoinBuilder":
        return self._as_from_item().full_outer_join(target)

    def cross_join(self, target: "Any") -> "FromItem":
        return self._as_from_item().cross_join(target)


@dataclass(frozen=True)
class Alias(Joinable, Fragment):
    """``<original> AS <alias>``, for columns, tables and sub-selects alike."""

    original: str
    alias: str

    def __str__(self) -> str:
        return f"{self.original} AS {self.alias}"


@dataclass(frozen=True)
class Column(Aliasable, Orderable, Fragment):
    """Column name."""

    text: str

    def __str__(self) -> str:
        return self.text

    @classmethod
    def of(cls, value: "ColumnLike") -> "Column":
        """Convert column-like input.

        Raises:
            SQLBuilderError: If the value cannot name a column.
        """
        if isinstance(value, Column):
            return value
        if is_text(value):
            return cls(value)
        raise _unsupported(cls, value)


@dataclass(frozen=True)
class Expression(Aliasable, Orderable, Fragment):
    """Value expression: anything that can be selected, compared, or assigned."""

    text: str

    def __str__(self) -> str:
        return self.text

    @classmethod
    def of(cls, value: "ExpressionLike") -> "Expression":
        """Convert expression-like input.

        Text is used verbatim, numbers are rendered as literals, columns and aliases keep their
        rendered form.

        Raises:
            SQLBuilderError: If the value is not expression-like (table names included).
        """
        if isinstance(value, Expression):
            return value
        if is_text(value):
            return cls(value)
        if is_number(value):
            return cls(render_literal(value))
        if isinstance(value, (Column, Alias)):
            return cls(str(value))
        raise _unsupported(cls, value)


@dataclass(frozen=True)
class TableName(Aliasable, Joinable, Fragment):
    """Table name, optionally followed by a bare alias (``Person p``)."""

    text: str

    def __str__(self) -> str:
        return self.text

    @classmethod
    def of(cls, value: "TableNameLike") -> "TableName":
        """Convert table-like input.

        Raises:
            SQLBuilderError: If the value cannot name a table.
        """
        if isinstance(value, TableName):
            return value
        if is_text(value):
            return cls(value)
        if isinstance(value, Alias):
            return cls(str(value))
        raise _unsupported(cls, value)


Condition: TypeAlias = Expression
SortExpression: TypeAlias = Expression
OutputExpression: TypeAlias = Expression

ColumnLike: TypeAlias = Union[str, Column]
ExpressionLike: TypeAlias = Union[str, int, float, Decimal, Expression, Column, Alias]
TableNameLike: TypeAlias = Union[str, TableName, Alias]


@dataclass(frozen=True)
class ColumnValuePair:
    """``<column> = <expression>`` assignment used by ``SET`` clauses."""

    column: Column
    expression: Expression

    def __str__(self) -> str:
        return f"{self.column} = {self.expression}"

    @classmethod
    def of(cls, value: "ColumnValuePair | tuple[ColumnLike, ExpressionLike]") -> "ColumnValuePair":
        """Convert a ``(column, value)`` pair.

        Raises:
            SQLBuilderError: If the value is not a pair.
        """
        if isinstance(value, ColumnValuePair):
            return value
        if isinstance(value, tuple) and len(value) == 2:  # noqa: PLR2004
            column, expression = value
            return cls(Column.of(column), Expression.of(expression))
        raise _unsupported(cls, value)
