import pytest

from sqlchain.exceptions import ArityMismatchError, ColumnConstraintError, SQLBuilderError, SQLChainError


def test_exception_hierarchy() -> None:
    """Test builder exceptions inherit correctly."""
    assert issubclass(SQLBuilderError, SQLChainError)
    assert issubclass(ArityMismatchError, SQLBuilderError)
    assert issubclass(ColumnConstraintError, SQLBuilderError)
    assert issubclass(ColumnConstraintError, AttributeError)


def test_detail_from_first_argument() -> None:
    exc = SQLChainError("Something broke")
    assert exc.detail == "Something broke"
    assert str(exc) == "Something broke"
    assert repr(exc) == "SQLChainError - Something broke"


def test_detail_keyword() -> None:
    exc = SQLChainError("context", detail="the detail")
    assert str(exc) == "context the detail"


def test_builder_error_default_message() -> None:
    assert str(SQLBuilderError()) == "Issues building SQL statement."
    assert str(SQLBuilderError("Bad input.")) == "Bad input."


def test_arity_mismatch_messages() -> None:
    mismatch = ArityMismatchError(actual=3, expected=2)
    assert (mismatch.actual, mismatch.expected) == (3, 2)
    assert str(mismatch) == "Expected a row of 2 value(s), got 3."

    empty = ArityMismatchError(actual=0)
    assert empty.expected is None
    assert str(empty) == "INSERT rows and column lists need at least one item, got 0."


def test_column_constraint_error() -> None:
    exc = ColumnConstraintError("nullability", "not_null")
    assert exc.category == "nullability"
    assert str(exc) == "Column nullability constraint is already set, not_null() is not available."


def test_exception_chaining() -> None:
    """Test exceptions support chaining with 'from'."""
    with pytest.raises(SQLBuilderError) as exc_info:
        try:
            raise ValueError("Original error")
        except ValueError as e:
            raise SQLBuilderError("Mapped error") from e
    assert isinstance(exc_info.value.__cause__, ValueError)
