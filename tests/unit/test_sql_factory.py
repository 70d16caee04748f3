"""Unit tests for QueryFactory and the package-level protocols."""

from unittest.mock import MagicMock

import pytest

from querybuilder import (
    Batch,
    Call,
    Delete,
    Do,
    DriverAdapterProtocol,
    Insert,
    Join,
    QueryFactory,
    Replace,
    Select,
    StatementProtocol,
    Union,
    Update,
    With,
    sql,
)
from querybuilder.adapters import GenericDriverAdapter


@pytest.fixture
def factory(mock_driver: MagicMock) -> QueryFactory:
    return QueryFactory(mock_driver)


@pytest.mark.parametrize(
    "method,args,builder_type",
    [
        ("select", ("a",), Select),
        ("insert", ("a",), Insert),
        ("replace", ("a",), Replace),
        ("update", ("t",), Update),
        ("delete", ("t",), Delete),
        ("call", ("p",), Call),
        ("do", ("1",), Do),
        ("with_", (), With),
        ("join", ("left",), Join),
        ("union", (), Union),
        ("batch", (), Batch),
    ],
)
def test_builders_share_driver(
    factory: QueryFactory, mock_driver: MagicMock, method: str, args: tuple, builder_type: type
) -> None:
    builder = getattr(factory, method)(*args)
    assert isinstance(builder, builder_type)
    assert builder.driver is mock_driver


def test_factory_rendering(factory: QueryFactory) -> None:
    assert factory.call("archive", 2024, "eu").render() == "CALL archive(2024,'eu')"
    assert factory.delete("t", "x").render() == "DELETE FROM t AS x"
    assert factory.join("inner").table("t").render() == "INNER JOIN t"
    assert factory.do("SLEEP(1)").render() == "DO SLEEP(1)"


def test_batch_separator(factory: QueryFactory) -> None:
    assert factory.batch(Delete("a"), Delete("b")).separator == ";"
    assert factory.batch(Delete("a"), Delete("b"), separator="\n").render() == "DELETE FROM a\nDELETE FROM b"


def test_union(factory: QueryFactory) -> None:
    query = factory.union(factory.select("a").from_("x"), factory.select("a").from_("y")).all()
    assert query.render() == "SELECT a FROM x UNION ALL SELECT a FROM y"


def test_execute_through_factory(factory: QueryFactory, mock_driver: MagicMock) -> None:
    assert factory.update("t").set("a", 1).execute() == 1
    mock_driver.execute.assert_called_once_with("UPDATE t SET a = 1")


def test_default_factory_has_no_driver() -> None:
    assert sql.driver is None
    assert sql.select("1").driver is None


def test_protocols(mock_connection: MagicMock) -> None:
    assert isinstance(Select("1"), StatementProtocol)
    assert isinstance(Batch(), StatementProtocol)
    assert isinstance(GenericDriverAdapter(mock_connection), DriverAdapterProtocol)
