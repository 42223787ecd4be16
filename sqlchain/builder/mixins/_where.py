from collections.abc import Iterator
from dataclasses import replace

from mypy_extensions import trait
from typing_extensions import Self

from sqlchain.builder._arity import to_sequence
from sqlchain.builder._fragments import Condition, Expression, ExpressionLike
from sqlchain.typing import OneOrMany

__all__ = ("WhereClauseMixin",)


@trait
class WhereClauseMixin:
    """Mixin providing the WHERE clause for SELECT, UPDATE and DELETE builders."""

    __slots__ = ()

    _where: "tuple[Condition, ...]"

    def where_(self, conditions: "OneOrMany[ExpressionLike]") -> Self:
        """Add one or more conditions, ``AND``-ed with each other and with existing ones.

        Args:
            conditions: A condition, or a collection of conditions.

        Returns:
            A new builder with the conditions appended.
        """
        return replace(self, _where=(*self._where, *to_sequence(conditions, Expression.of)))  # type: ignore[type-var]

    def _render_where(self) -> "Iterator[str]":
        if self._where:
            yield "WHERE " + " AND ".join(str(condition) for condition in self._where)
