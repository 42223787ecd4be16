from typing import Any

__all__ = (
    "ArityMismatchError",
    "ColumnConstraintError",
    "SQLBuilderError",
    "SQLChainError",
)


class SQLChainError(Exception):
    """Base exception class from which all sqlchain exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``SQLChainError``.

        Args:
            *args: args are converted to :class:`str` before passing to :class:`Exception`
            detail: detail of the exception.
        """
        str_args = [str(arg) for arg in args if arg]
        if not detail:
            if str_args:
                detail, *str_args = str_args
            elif hasattr(self, "detail"):
                detail = self.detail
        self.detail = detail
        super().__init__(*str_args)

    def __repr__(self) -> str:
        if self.detail:
            return f"{self.__class__.__name__} - {self.detail}"
        return self.__class__.__name__

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()


class SQLBuilderError(SQLChainError):
    """Issues building SQL statements."""

    def __init__(self, message: str | None = None) -> None:
        if message is None:
            message = "Issues building SQL statement."
        super().__init__(message)


class ArityMismatchError(SQLBuilderError):
    """A row of values does not match the arity fixed for an ``INSERT`` statement."""

    expected: int | None
    actual: int

    def __init__(self, actual: int, expected: int | None = None) -> None:
        self.expected = expected
        self.actual = actual
        if expected is None:
            message = f"INSERT rows and column lists need at least one item, got {actual}."
        else:
            message = f"Expected a row of {expected} value(s), got {actual}."
        super().__init__(message)


class ColumnConstraintError(SQLBuilderError, AttributeError):
    """A column constraint category was set twice.

    Subclasses :class:`AttributeError` because the occupied category's methods are absent from
    the builder, so ``hasattr`` reports them as missing.
    """

    category: str

    def __init__(self, category: str, method: str) -> None:
        self.category = category
        super().__init__(f"Column {category} constraint is already set, {method}() is not available.")
