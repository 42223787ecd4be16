"""Unit tests for the DELETE builder."""

from collections.abc import Callable

from sqlchain.builder import delete_from, select, with_

AssertSQL = Callable[..., None]


def test_everything(assert_sql: AssertSQL) -> None:
    assert_sql(delete_from("Dummy"), "DELETE FROM Dummy")


def test_where_one(assert_sql: AssertSQL) -> None:
    assert_sql(delete_from("Dummy").where_("x > 0"), "DELETE FROM Dummy WHERE x > 0")


def test_where_many(assert_sql: AssertSQL) -> None:
    assert_sql(delete_from("Dummy").where_(("x > 0", "y > 30")), "DELETE FROM Dummy WHERE x > 0 AND y > 30")


def test_where_chain(assert_sql: AssertSQL) -> None:
    assert_sql(delete_from("Dummy").where_("x > 0").where_("y < 10"), "DELETE FROM Dummy WHERE x > 0 AND y < 10")


def test_where_append_matches_collection() -> None:
    chained = delete_from("Dummy").where_(("x > 1", "y > 1")).where_("z > 1")
    collected = delete_from("Dummy").where_(["x > 1", "y > 1", "z > 1"])
    assert chained == collected
    assert chained.to_sql() == "DELETE FROM Dummy WHERE x > 1 AND y > 1 AND z > 1"


def test_returning(assert_sql: AssertSQL) -> None:
    assert_sql(delete_from("Dummy").returning("id"), "DELETE FROM Dummy RETURNING id")
    assert_sql(delete_from("Dummy").returning(("id", "place")), "DELETE FROM Dummy RETURNING id, place")
    assert_sql(
        delete_from("Dummy").returning("id").returning(("width", "height")),
        "DELETE FROM Dummy RETURNING id, width, height",
    )


def test_where_and_returning(assert_sql: AssertSQL) -> None:
    assert_sql(
        delete_from("Dummy").returning("id").where_("x > 0").where_("y < 10"),
        "DELETE FROM Dummy WHERE x > 0 AND y < 10 RETURNING id",
    )


def test_with_clause(assert_sql: AssertSQL) -> None:
    assert_sql(
        with_("thing").as_(select("1 + 1")).delete_from("Dummy"),
        "WITH thing AS (SELECT 1 + 1) DELETE FROM Dummy",
    )
