from __future__ import annotations

from unittest.mock import MagicMock

import pytest


@pytest.fixture
def mock_cursor() -> MagicMock:
    cursor = MagicMock(name="cursor")
    cursor.rowcount = 3
    cursor.description = (("id", None), ("name", None))
    cursor.fetchone.return_value = (1, "alice")
    cursor.fetchall.return_value = [(1, "alice"), (2, "bob")]
    cursor.__iter__.return_value = iter([(1, "alice"), (2, "bob")])
    return cursor


@pytest.fixture
def mock_connection(mock_cursor: MagicMock) -> MagicMock:
    connection = MagicMock(name="connection")
    connection.cursor.return_value = mock_cursor
    return connection


@pytest.fixture
def mock_driver() -> MagicMock:
    driver = MagicMock(name="driver")
    driver.execute.return_value = 1
    return driver
