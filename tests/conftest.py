from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest
from sqlglot import parse_one

if TYPE_CHECKING:
    from collections.abc import Callable

here = Path(__file__).parent
root_path = here.parent


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--validate-syntax",
        action="store_true",
        default=False,
        help="Also parse every expected statement with sqlglot's postgres dialect.",
    )


@pytest.fixture
def validate_syntax(request: pytest.FixtureRequest) -> bool:
    return bool(request.config.getoption("--validate-syntax"))


@pytest.fixture
def assert_sql(validate_syntax: bool) -> Callable[..., None]:
    """Compare a rendered statement with the exact expected text.

    Statements PostgreSQL accepts but sqlglot cannot parse (an empty select list) pass
    ``parse=False``.
    """

    def check(statement: Any, expected: str, *, parse: bool = True) -> None:
        assert str(statement) == expected
        if validate_syntax and parse:
            parse_one(expected, read="postgres")

    return check
