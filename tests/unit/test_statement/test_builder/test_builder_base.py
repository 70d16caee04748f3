"""Unit tests for driver plumbing, diagnostics and introspection on QueryBuilder."""

import logging
from unittest.mock import MagicMock

import pytest
from sqlglot import exp

from querybuilder import Batch, Delete, DriverError, ImproperConfigurationError, Select, SQLParsingError


class TestDriverPlumbing:
    def test_execute_passes_rendered_sql(self, mock_driver: MagicMock) -> None:
        query = Delete("t").where("id = 1").using_driver(mock_driver)
        assert query.execute() == 1
        mock_driver.execute.assert_called_once_with("DELETE FROM t WHERE id = 1")

    def test_query_returns_driver_result(self, mock_driver: MagicMock) -> None:
        query = Select("*", driver=mock_driver).from_("t")
        assert query.query() is mock_driver.query.return_value
        mock_driver.query.assert_called_once_with("SELECT * FROM t")

    def test_prepare_forwards_options(self, mock_driver: MagicMock) -> None:
        query = Select("*", driver=mock_driver).from_("t").where("id = %s")
        assert query.prepare({"buffered": True}) is mock_driver.prepare.return_value
        mock_driver.prepare.assert_called_once_with("SELECT * FROM t WHERE id = %s", {"buffered": True})

    @pytest.mark.parametrize("method", ["execute", "query", "prepare"])
    def test_missing_driver(self, method: str) -> None:
        with pytest.raises(ImproperConfigurationError, match="no driver attached"):
            getattr(Delete("t"), method)()

    @pytest.mark.parametrize("method", ["execute", "query", "prepare"])
    def test_driver_errors_are_wrapped(self, mock_driver: MagicMock, method: str) -> None:
        cause = RuntimeError("server has gone away")
        getattr(mock_driver, method).side_effect = cause
        with pytest.raises(DriverError) as excinfo:
            getattr(Delete("t", driver=mock_driver), method)()
        assert excinfo.value.__cause__ is cause
        assert excinfo.value.sql == "DELETE FROM t"
        assert "server has gone away" in str(excinfo.value)

    def test_using_driver_returns_builder(self, mock_driver: MagicMock) -> None:
        query = Delete("t")
        assert query.using_driver(mock_driver) is query
        assert query.driver is mock_driver


class TestDiagnostics:
    def test_empty_by_default(self) -> None:
        assert Select("*").from_("t").diagnostics == ()

    def test_ignored_calls_are_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="querybuilder.builder")
        Batch().remove(0)
        assert "Batch: remove() ignored: no statement at index 0" in caplog.text


class TestIntrospection:
    def test_str_is_render(self) -> None:
        query = Select("a").from_("t")
        assert str(query) == query.render() == "SELECT a FROM t"

    def test_to_expression(self) -> None:
        parsed = Select("a").from_("t").where("a > 1").to_expression()
        assert isinstance(parsed, exp.Select)
        assert parsed.find(exp.Where) is not None

    def test_unparseable_sql(self) -> None:
        with pytest.raises(SQLParsingError, match="could not be parsed"):
            Select("*").from_("t").where("(a = 1").to_expression()

    def test_pretty(self) -> None:
        pretty = Select("a", "b").from_("t").pretty()
        assert pretty.startswith("SELECT")
        assert "\n" in pretty
        assert "FROM t" in pretty
