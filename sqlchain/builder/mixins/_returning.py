from collections.abc import Iterator
from dataclasses import replace

from mypy_extensions import trait
from typing_extensions import Self

from sqlchain.builder._arity import to_sequence
from sqlchain.builder._base import joined
from sqlchain.builder._fragments import Expression, ExpressionLike, OutputExpression
from sqlchain.typing import OneOrMany

__all__ = ("ReturningClauseMixin",)


@trait
class ReturningClauseMixin:
    """Mixin providing the RETURNING clause for INSERT, UPDATE and DELETE builders."""

    __slots__ = ()

    _returning: "tuple[OutputExpression, ...]"

    def returning(self, expressions: "OneOrMany[ExpressionLike]") -> Self:
        """Add one or more output expressions.

        Args:
            expressions: An expression, or a collection of expressions.

        Returns:
            A new builder with the expressions appended.
        """
        return replace(self, _returning=(*self._returning, *to_sequence(expressions, Expression.of)))  # type: ignore[type-var]

    def _render_returning(self) -> "Iterator[str]":
        if self._returning:
            yield f"RETURNING {joined(self._returning)}"
