"""Base classes shared by all statement builders.

Builders are frozen dataclasses: every method returns a new builder and leaves the receiver
untouched, so partially built statements can be branched and reused freely.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from typing import Any

from sqlchain.utils.logging import get_logger

__all__ = (
    "QueryStatement",
    "Statement",
    "joined",
)

logger = get_logger("builder")


def joined(items: "Iterable[Any]", separator: str = ", ") -> str:
    """Render items with ``str`` and join them."""
    return separator.join(str(item) for item in items)


class Statement(ABC):
    """A complete, renderable SQL statement."""

    __slots__ = ()

    @abstractmethod
    def _render_parts(self) -> "Iterator[str]":
        """Yield the statement's clauses in output order.

        Clauses are joined with single spaces, so none of them may be empty.
        """

    def to_sql(self) -> str:
        """Render the statement.

        Returns:
            Single-line SQL text.
        """
        sql = " ".join(self._render_parts())
        logger.debug("Rendered %s statement: %s", type(self).__name__, sql)
        return sql

    def __str__(self) -> str:
        return self.to_sql()


class QueryStatement(Statement):
    """Statements that may define a ``WITH`` query: ``SELECT``, ``INSERT``, ``UPDATE``, ``DELETE``."""

    __slots__ = ()
