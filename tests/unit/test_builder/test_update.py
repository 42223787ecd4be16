"""Unit tests for the UPDATE builder."""

from collections.abc import Callable

import pytest

from sqlchain import Parameters
from sqlchain.builder import BareUpdate, Column, ColumnValuePair, Expression, Update, select, update, with_
from sqlchain.exceptions import SQLBuilderError

AssertSQL = Callable[..., None]


def test_update_single_value(assert_sql: AssertSQL) -> None:
    assert_sql(update("Dummy").set("x", "y"), "UPDATE Dummy SET x = y")


def test_update_multi_call(assert_sql: AssertSQL) -> None:
    assert_sql(update("Dummy").set("x", "y").set("a", "b"), "UPDATE Dummy SET x = y, a = b")


def test_update_mapping(assert_sql: AssertSQL) -> None:
    assert_sql(update("Dummy").set({"x": 1, "y": "x + 1"}), "UPDATE Dummy SET x = 1, y = x + 1")


def test_update_pairs(assert_sql: AssertSQL) -> None:
    assert_sql(
        update("Dummy").set([("x", 1), ColumnValuePair(Column("y"), Expression("2"))]),
        "UPDATE Dummy SET x = 1, y = 2",
    )


def test_update_where(assert_sql: AssertSQL) -> None:
    assert_sql(update("Dummy").set("x", "y").where_("id = 5"), "UPDATE Dummy SET x = y WHERE id = 5")
    assert_sql(update("Dummy").set("x", 1).where_("x > 0"), "UPDATE Dummy SET x = 1 WHERE x > 0")


def test_update_where_many(assert_sql: AssertSQL) -> None:
    assert_sql(
        update("Dummy").set("x", "y").where_(("a > 1", "b > 1")).where_("c > 1"),
        "UPDATE Dummy SET x = y WHERE a > 1 AND b > 1 AND c > 1",
    )


def test_update_returning(assert_sql: AssertSQL) -> None:
    assert_sql(update("Dummy").set("x", "y").returning("x"), "UPDATE Dummy SET x = y RETURNING x")
    assert_sql(
        update("Dummy").set("x", "y").returning(("id", "x")).returning("y"),
        "UPDATE Dummy SET x = y RETURNING id, x, y",
    )


def test_clause_order_is_fixed(assert_sql: AssertSQL) -> None:
    assert_sql(
        update("Dummy").set("x", "y").returning("id").where_("id = 5").set("a", "b"),
        "UPDATE Dummy SET x = y, a = b WHERE id = 5 RETURNING id",
    )


def test_with_clause(assert_sql: AssertSQL) -> None:
    assert_sql(
        with_("thing").as_(select("1 + 1")).update("Dummy").set("x", "y"),
        "WITH thing AS (SELECT 1 + 1) UPDATE Dummy SET x = y",
    )


def test_placeholders(assert_sql: AssertSQL) -> None:
    params = Parameters()
    assert_sql(
        update("Person").set("name", params.next()).where_(f"id = {params.next()}"),
        "UPDATE Person SET name = $1 WHERE id = $2",
    )


def test_bare_update_only_offers_set() -> None:
    bare = update("Dummy")
    assert isinstance(bare, BareUpdate)
    assert not hasattr(bare, "to_sql")
    assert not hasattr(bare, "where_")
    assert not hasattr(bare, "returning")
    assert isinstance(bare.set("x", 1), Update)


@pytest.mark.parametrize("assignments", [{}, [], ()], ids=["mapping", "list", "tuple"])
def test_empty_set_is_rejected(assignments: object) -> None:
    with pytest.raises(SQLBuilderError, match="at least one assignment"):
        update("Dummy").set(assignments)
    with pytest.raises(SQLBuilderError, match="at least one assignment"):
        update("Dummy").set("x", 1).set(assignments)


def test_column_without_value_is_rejected() -> None:
    with pytest.raises(SQLBuilderError):
        update("Dummy").set("x")
