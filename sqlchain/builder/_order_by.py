from dataclasses import dataclass, replace
from enum import Enum
from typing import Union

from typing_extensions import Self, TypeAlias

from sqlchain.builder._fragments import Expression, ExpressionLike, SortExpression

__all__ = (
    "Direction",
    "Nulls",
    "OrderBy",
    "OrderByLike",
)


class Direction(str, Enum):
    """Sort direction."""

    ASC = "ASC"
    DESC = "DESC"


class Nulls(str, Enum):
    """Placement of ``NULL`` values in a sort."""

    FIRST = "NULLS FIRST"
    LAST = "NULLS LAST"


@dataclass(frozen=True)
class OrderBy:
    """One ``ORDER BY`` entry: ``<expression> [ASC|DESC] [NULLS FIRST|NULLS LAST]``.

    Direction and null placement are each set at most once; later calls overwrite.

    Example:
        >>> str(OrderBy.of("created_at").desc().nulls_last())
        'created_at DESC NULLS LAST'
    """

    expression: SortExpression
    direction: "Direction | None" = None
    nulls: "Nulls | None" = None

    def __str__(self) -> str:
        parts = [str(self.expression)]
        if self.direction is not None:
            parts.append(self.direction.value)
        if self.nulls is not None:
            parts.append(self.nulls.value)
        return " ".join(parts)

    @classmethod
    def of(cls, value: "OrderByLike") -> "OrderBy":
        if isinstance(value, OrderBy):
            return value
        return cls(Expression.of(value))

    def asc(self) -> Self:
        return replace(self, direction=Direction.ASC)

    def desc(self) -> Self:
        return replace(self, direction=Direction.DESC)

    def nulls_first(self) -> Self:
        return replace(self, nulls=Nulls.FIRST)

    def nulls_last(self) -> Self:
        return replace(self, nulls=Nulls.LAST)


OrderByLike: TypeAlias = Union[OrderBy, ExpressionLike]
