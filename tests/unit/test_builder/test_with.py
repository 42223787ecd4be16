"""Unit tests for WITH clauses."""

from collections.abc import Callable

import pytest

from sqlchain.builder import (
    Expression,
    WithClause,
    WithQueryBuilder,
    create_table,
    delete_from,
    insert_into,
    select,
    update,
    with_,
    with_recursive,
)
from sqlchain.exceptions import SQLBuilderError

AssertSQL = Callable[..., None]


def test_with_select(assert_sql: AssertSQL) -> None:
    assert_sql(
        with_("thing").as_(select("1 + 1")).select("x").from_("thing"),
        "WITH thing AS (SELECT 1 + 1) SELECT x FROM thing",
    )


def test_with_two_selects(assert_sql: AssertSQL) -> None:
    statement = (
        with_("one")
        .as_(select("1 + 1"))
        .and_("two")
        .as_(select("2 + 2"))
        .select(("one.x", "two.x"))
        .from_(("one", "two"))
    )
    assert_sql(statement, "WITH one AS (SELECT 1 + 1), two AS (SELECT 2 + 2) SELECT one.x, two.x FROM one, two")


def test_column_list(assert_sql: AssertSQL) -> None:
    assert_sql(
        with_("pairs").columns(("a", "b")).as_(select(("1", "2"))).select("a").from_("pairs"),
        "WITH pairs(a, b) AS (SELECT 1, 2) SELECT a FROM pairs",
    )


def test_recursive(assert_sql: AssertSQL) -> None:
    statement = (
        with_recursive("t")
        .columns("n")
        .as_(select("1").from_("(VALUES (0)) AS seed"))
        .select("sum(n)")
        .from_("t")
    )
    assert_sql(statement, "WITH RECURSIVE t(n) AS (SELECT 1 FROM (VALUES (0)) AS seed) SELECT sum(n) FROM t")


def test_data_modifying_queries(assert_sql: AssertSQL) -> None:
    statement = (
        with_("moved")
        .as_(delete_from("products").where_("date >= '2010-10-01'").returning("*"))
        .and_("priced")
        .as_(update("products").set("price", "price * 1.05").returning("*"))
        .and_("logged")
        .as_(insert_into("log").columns("note").values(["'moved'"]).returning("id"))
        .insert_into("products_log")
        .values([("(SELECT count(*) FROM moved)", "(SELECT count(*) FROM priced)")])
    )
    assert_sql(
        statement,
        "WITH moved AS (DELETE FROM products WHERE date >= '2010-10-01' RETURNING *), "
        "priced AS (UPDATE products SET price = price * 1.05 RETURNING *), "
        "logged AS (INSERT INTO log (note) VALUES ('moved') RETURNING id) "
        "INSERT INTO products_log VALUES ((SELECT count(*) FROM moved), (SELECT count(*) FROM priced))",
    )


def test_complex_cte(assert_sql: AssertSQL) -> None:
    statement = (
        with_("regional_sales")
        .as_(select(("region", Expression("SUM(amount)").as_("total_sales"))).from_("orders").group_by("region"))
        .and_("top_regions")
        .as_(
            select("region")
            .from_("regional_sales")
            .where_(f"total_sales > ({select('SUM(total_sales)/10').from_('regional_sales')})")
        )
        .select((
            "region",
            "product",
            Expression("SUM(quantity)").as_("product_units"),
            Expression("SUM(amount)").as_("product_sales"),
        ))
        .from_("orders")
        .where_(f"region IN ({select('region').from_('top_regions')})")
        .group_by(("region", "product"))
    )
    assert_sql(
        statement,
        "WITH regional_sales AS (SELECT region, SUM(amount) AS total_sales FROM orders GROUP BY region), "
        "top_regions AS (SELECT region FROM regional_sales WHERE total_sales > "
        "(SELECT SUM(total_sales)/10 FROM regional_sales)) "
        "SELECT region, product, SUM(quantity) AS product_units, SUM(amount) AS product_sales FROM orders "
        "WHERE region IN (SELECT region FROM top_regions) GROUP BY region, product",
    )


def test_entry_waits_for_statement() -> None:
    pending = with_("thing")
    assert isinstance(pending, WithQueryBuilder)
    assert not hasattr(pending, "select")
    assert isinstance(pending.as_(select("1")), WithClause)


def test_clause_has_no_render_of_its_own() -> None:
    clause = with_("thing").as_(select("1"))
    assert not hasattr(clause, "to_sql")


@pytest.mark.parametrize(
    "statement",
    [
        "SELECT 1",
        create_table("T").columns(("id", "integer")),
        insert_into("T"),
        update("T"),
    ],
    ids=["text", "create-table", "bare-insert", "bare-update"],
)
def test_only_query_statements_define_entries(statement: object) -> None:
    with pytest.raises(SQLBuilderError, match="WITH query thing"):
        with_("thing").as_(statement)  # type: ignore[arg-type]


def test_clause_is_reusable(assert_sql: AssertSQL) -> None:
    clause = with_("thing").as_(select("1 + 1"))
    assert_sql(clause.select("*").from_("thing"), "WITH thing AS (SELECT 1 + 1) SELECT * FROM thing")
    assert_sql(clause.delete_from("Dummy"), "WITH thing AS (SELECT 1 + 1) DELETE FROM Dummy")
