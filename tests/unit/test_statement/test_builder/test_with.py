"""Unit tests for the WITH clause builder."""

from querybuilder import Select, With
from querybuilder.statement.builder import CommonTableExpression


def test_single_cte() -> None:
    query = With().sub_select(Select("id").from_("users"), "u")
    assert query.render() == "WITH u AS (SELECT id FROM users)"


def test_multiple_ctes_with_columns() -> None:
    query = (
        With()
        .sub_select(Select("a", "b").from_("t1"), "x", ["c1", "c2"])
        .sub_select(Select("a").from_("x"), "y")
    )
    assert query.render() == "WITH x (c1,c2) AS (SELECT a, b FROM t1),y AS (SELECT a FROM x)"


def test_recursive() -> None:
    query = With().recursive().sub_select(Select("1"), "r", ("n",))
    assert query.render() == "WITH RECURSIVE r (n) AS (SELECT 1)"


def test_ctes_are_exposed_in_order() -> None:
    first = Select("a").from_("t")
    query = With().sub_select(first, "one").sub_select(Select("b").from_("t"), "two")
    assert [cte.name for cte in query.ctes] == ["one", "two"]
    assert query.ctes[0] == CommonTableExpression("one", first)


def test_prefixes_select() -> None:
    cte = With().sub_select(Select("id").from_("users").where("active = 1"), "active_users")
    query = Select("*").with_(cte).from_("active_users")
    assert query.render() == "WITH active_users AS (SELECT id FROM users WHERE active = 1) SELECT * FROM active_users"
