"""Unit tests for the Delete builder."""

from sqlglot import exp

from querybuilder import Delete


def test_basic_delete() -> None:
    assert Delete("users").render() == "DELETE FROM users"


def test_alias() -> None:
    assert Delete("users", "u").where("u.id = 1").render() == "DELETE FROM users AS u WHERE u.id = 1"


def test_modifiers_in_order() -> None:
    query = Delete("t").ignore().quick().low_priority()
    assert query.render() == "DELETE LOW_PRIORITY QUICK IGNORE FROM t"


def test_where_order_limit() -> None:
    query = Delete("sessions").where("expired = 1").where("user_id = 7", "AND").order("id").limit(500)
    assert query.render() == "DELETE FROM sessions WHERE expired = 1 AND user_id = 7 ORDER BY id LIMIT 500"


def test_orders_replace() -> None:
    assert Delete("t").order("a").orders("b", "c").render() == "DELETE FROM t ORDER BY b,c"


def test_rendered_sql_parses_as_mysql() -> None:
    parsed = Delete("users").where("id = 1").to_expression()
    assert isinstance(parsed, exp.Delete)
