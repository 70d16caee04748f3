"""Unit tests for the PyMySQL configuration and driver."""

import sys
from unittest.mock import MagicMock

import pytest

from querybuilder import MissingDependencyError
from querybuilder.adapters.pymysql import PyMysqlConfig, PyMysqlDriver


@pytest.fixture
def fake_pymysql(monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    module = MagicMock(name="pymysql")
    monkeypatch.setitem(sys.modules, "pymysql", module)
    return module


def test_defaults() -> None:
    config = PyMysqlConfig()
    assert config.connection_config == {"port": 3306, "charset": "utf8"}
    assert config.connection_instance is None


def test_overrides_defaults() -> None:
    config = PyMysqlConfig({"host": "db", "port": 3307, "user": "app"})
    assert config.connection_config == {"port": 3307, "charset": "utf8", "host": "db", "user": "app"}


def test_create_connection(fake_pymysql: MagicMock) -> None:
    config = PyMysqlConfig({"host": "db", "database": "shop"})
    assert config.create_connection() is fake_pymysql.connect.return_value
    fake_pymysql.connect.assert_called_once_with(port=3306, charset="utf8", host="db", database="shop")


def test_provide_connection_is_cached(fake_pymysql: MagicMock) -> None:
    config = PyMysqlConfig()
    first = config.provide_connection()
    assert config.provide_connection() is first
    assert fake_pymysql.connect.call_count == 1


def test_provide_driver(fake_pymysql: MagicMock) -> None:
    driver = PyMysqlConfig().provide_driver()
    assert isinstance(driver, PyMysqlDriver)
    assert driver.connection is fake_pymysql.connect.return_value


def test_close(fake_pymysql: MagicMock) -> None:
    config = PyMysqlConfig()
    connection = config.provide_connection()
    config.close()
    connection.close.assert_called_once_with()
    assert config.connection_instance is None
    config.close()


def test_missing_pymysql(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "pymysql", None)
    with pytest.raises(MissingDependencyError, match="pip install querybuilder\\[pymysql\\]"):
        PyMysqlConfig().create_connection()
