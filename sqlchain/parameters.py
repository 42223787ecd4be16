"""Positional placeholder generator for PostgreSQL (``$1``, ``$2``, ...)."""

from sqlchain.exceptions import SQLBuilderError

__all__ = ("Parameters",)


class Parameters:
    """Sequential ``$N`` placeholder generator.

    Use one instance per statement. Every call consumes placeholders, so no two calls on the same
    instance return the same one. Not thread-safe.

    Example:
        >>> params = Parameters()
        >>> update("Person").set("name", params.next()).where_(f"id = {params.next()}").to_sql()
        'UPDATE Person SET name = $1 WHERE id = $2'
    """

    __slots__ = ("_current",)

    def __init__(self, start: int = 1) -> None:
        if start < 1:
            msg = f"Placeholder numbering starts at 1 or higher, got {start}."
            raise SQLBuilderError(msg)
        self._current = start

    @classmethod
    def starting_from(cls, start: int) -> "Parameters":
        return cls(start)

    @property
    def current(self) -> int:
        """Number of the placeholder the next call returns."""
        return self._current

    def next(self) -> str:
        """Return the next placeholder."""
        placeholder = f"${self._current}"
        self._current += 1
        return placeholder

    def next_n(self, count: int) -> str:
        """Return the next ``count`` placeholders joined with ``", "``.

        Example:
            >>> Parameters().next_n(3)
            '$1, $2, $3'
        """
        return ", ".join(self.next_array(count))

    def next_array(self, count: int) -> "tuple[str, ...]":
        """Return the next ``count`` placeholders, ready to be used as an ``INSERT`` row.

        Raises:
            SQLBuilderError: If ``count`` is negative.
        """
        if count < 0:
            msg = f"Cannot generate a negative number of placeholders, got {count}."
            raise SQLBuilderError(msg)
        return tuple(self.next() for _ in range(count))

    def __iter__(self) -> "Parameters":
        return self

    def __next__(self) -> str:
        return self.next()

    def __repr__(self) -> str:
        return f"Parameters(current={self._current})"
