"""Unit tests for QueryResult and PreparedStatement."""

from unittest.mock import MagicMock

from querybuilder import PreparedStatement, QueryResult


class TestQueryResult:
    def test_fetch_helpers(self, mock_cursor: MagicMock) -> None:
        result = QueryResult(mock_cursor, "SELECT id, name FROM users")
        assert result.cursor is mock_cursor
        assert result.first() == (1, "alice")
        assert result.all() == [(1, "alice"), (2, "bob")]
        assert result.columns == ["id", "name"]
        assert result.rowcount == 3
        assert result.has_results() is True

    def test_iteration(self, mock_cursor: MagicMock) -> None:
        assert list(QueryResult(mock_cursor, "SELECT 1")) == [(1, "alice"), (2, "bob")]

    def test_no_description(self, mock_cursor: MagicMock) -> None:
        mock_cursor.description = None
        mock_cursor.rowcount = 0
        result = QueryResult(mock_cursor, "DO 1")
        assert result.columns == []
        assert result.has_results() is False

    def test_context_manager_closes(self, mock_cursor: MagicMock) -> None:
        with QueryResult(mock_cursor, "SELECT 1") as result:
            assert result.sql == "SELECT 1"
        mock_cursor.close.assert_called_once_with()


class TestPreparedStatement:
    def test_execute_binds_parameters(self, mock_connection: MagicMock, mock_cursor: MagicMock) -> None:
        statement = PreparedStatement(mock_connection, "SELECT * FROM t WHERE id = %s", {"unbuffered": True})
        result = statement.execute((7,))
        mock_connection.cursor.assert_called_once_with(unbuffered=True)
        mock_cursor.execute.assert_called_once_with("SELECT * FROM t WHERE id = %s", (7,))
        assert isinstance(result, QueryResult)
        assert result.cursor is mock_cursor
        mock_cursor.close.assert_not_called()

    def test_execute_many(self, mock_connection: MagicMock, mock_cursor: MagicMock) -> None:
        statement = PreparedStatement(mock_connection, "INSERT INTO t (a) VALUES (%s)")
        assert statement.options == {}
        assert statement.execute_many([(1,), (2,), (3,)]) == 3
        mock_cursor.executemany.assert_called_once_with("INSERT INTO t (a) VALUES (%s)", [(1,), (2,), (3,)])
        mock_cursor.close.assert_called_once_with()
