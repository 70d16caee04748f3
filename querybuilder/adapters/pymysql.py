"""PyMySQL connection configuration and driver adapter."""

from typing import TYPE_CHECKING, Optional, TypedDict

from typing_extensions import NotRequired

from querybuilder.adapters.dbapi import GenericDriverAdapter
from querybuilder.exceptions import MissingDependencyError
from querybuilder.utils.logging import get_logger

if TYPE_CHECKING:
    from pymysql.connections import Connection

__all__ = ("PyMysqlConfig", "PyMysqlConnectionConfig", "PyMysqlDriver")

logger = get_logger("adapters.pymysql")


class PyMysqlConnectionConfig(TypedDict, total=False):
    """PyMySQL connection parameters as TypedDict.

    Keys are passed through to ``pymysql.connect()``.
    """

    host: NotRequired[str]
    """Host where the database server is located."""

    user: NotRequired[str]
    """The username used to authenticate with the database."""

    password: NotRequired[str]
    """The password used to authenticate with the database."""

    database: NotRequired[str]
    """The database name to use."""

    port: NotRequired[int]
    """The TCP/IP port of the MySQL server."""

    unix_socket: NotRequired[str]
    """The location of the Unix socket file."""

    charset: NotRequired[str]
    """The character set to use for the connection."""

    connect_timeout: NotRequired[float]
    """Timeout before throwing an error when connecting."""

    autocommit: NotRequired[bool]
    """If True, autocommit mode will be enabled."""

    init_command: NotRequired[str]
    """Initial SQL statement to execute once connected."""


class PyMysqlDriver(GenericDriverAdapter):
    """Driver adapter over a PyMySQL connection."""


class PyMysqlConfig:
    """Configuration for PyMySQL connections.

    Args:
        connection_config: Parameters for ``pymysql.connect()``. ``port`` defaults to
            3306 and ``charset`` to ``utf8``.
    """

    default_connection_config: "PyMysqlConnectionConfig" = {"port": 3306, "charset": "utf8"}

    def __init__(self, connection_config: "Optional[PyMysqlConnectionConfig]" = None) -> None:
        self.connection_config: "PyMysqlConnectionConfig" = {
            **self.default_connection_config,
            **(connection_config or {}),
        }
        self.connection_instance: "Optional[Connection]" = None

    def create_connection(self) -> "Connection":
        """Open a new PyMySQL connection.

        Raises:
            MissingDependencyError: If ``pymysql`` is not installed.

        Returns:
            A new connection.
        """
        try:
            import pymysql
        except ImportError as e:
            raise MissingDependencyError(package="pymysql") from e

        logger.debug(
            "Connecting to MySQL at %s:%s",
            self.connection_config.get("host", "localhost"),
            self.connection_config.get("port"),
        )
        return pymysql.connect(**self.connection_config)

    def provide_connection(self) -> "Connection":
        """Return the shared connection, opening it on first use."""
        if self.connection_instance is None:
            self.connection_instance = self.create_connection()
        return self.connection_instance

    def provide_driver(self) -> PyMysqlDriver:
        return PyMysqlDriver(self.provide_connection())

    def close(self) -> None:
        if self.connection_instance is not None:
            self.connection_instance.close()
            self.connection_instance = None
