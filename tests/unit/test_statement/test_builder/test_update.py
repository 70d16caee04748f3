"""Unit tests for the Update builder."""

from sqlglot import exp

from querybuilder import NULL, Raw, Update


def test_set_appends_assignments() -> None:
    query = Update("users").set("name", "alice").set("age", 30).set("note", NULL).set("seen", Raw("NOW()"))
    assert query.render() == "UPDATE users SET name = 'alice',age = 30,note = NULL,seen = NOW()"


def test_sets_replaces_assignments() -> None:
    query = Update("users").set("x", 1).sets(("a", 1), ("b", "null"))
    assert query.render() == "UPDATE users SET a = 1,b = NULL"
    assert query.assignments == (("a", 1), ("b", "null"))


def test_sets_skips_malformed_pairs() -> None:
    query = Update("t").sets(("a", 1), ("b",), ("c", 2, 3), ["d", 4])  # type: ignore[arg-type]
    assert query.render() == "UPDATE t SET a = 1,d = 4"
    assert len(query.diagnostics) == 2


def test_where_order_limit() -> None:
    query = Update("t").set("a", 1).where("b = 2").where("c = 3", "OR").order("id DESC").limit()
    assert query.render() == "UPDATE t SET a = 1 WHERE b = 2 OR c = 3 ORDER BY id DESC LIMIT 1"


def test_wheres_replaces() -> None:
    query = Update("t").set("a", 1).where("x").wheres("b = 2", "AND", "c = 3")
    assert query.render() == "UPDATE t SET a = 1 WHERE b = 2 AND c = 3"


def test_modifiers() -> None:
    query = Update("t").ignore().low_priority().set("a", 1)
    assert query.render() == "UPDATE LOW_PRIORITY IGNORE t SET a = 1"


def test_rendered_sql_parses_as_mysql() -> None:
    parsed = Update("users").set("name", "bob").where("id = 1").to_expression()
    assert isinstance(parsed, exp.Update)
