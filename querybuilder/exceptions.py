from typing import Any, Optional

__all__ = (
    "DriverError",
    "ImproperConfigurationError",
    "MissingDependencyError",
    "QueryBuilderError",
    "SQLParsingError",
)


class QueryBuilderError(Exception):
    """Base exception class from which all querybuilder exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``QueryBuilderError``.

        Args:
            *args: args are converted to :class:`str` before passing to :class:`Exception`
            detail: detail of the exception.
        """
        str_args = [str(arg) for arg in args if arg]
        if not detail:
            if str_args:
                detail, *str_args = str_args
            elif hasattr(self, "detail"):
                detail = self.detail
        self.detail = detail
        super().__init__(*str_args)

    def __repr__(self) -> str:
        if self.detail:
            return f"{self.__class__.__name__} - {self.detail}"
        return self.__class__.__name__

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()


class MissingDependencyError(QueryBuilderError, ImportError):
    """Missing optional dependency.

    This exception is raised only when a module depends on a dependency that has not been installed.
    """

    def __init__(self, package: str, install_package: Optional[str] = None) -> None:
        super().__init__(
            f"Package {package!r} is not installed but required. You can install it by running "
            f"'pip install querybuilder[{install_package or package}]' to install querybuilder with the required extra "
            f"or 'pip install {install_package or package}' to install the package separately",
        )


class SQLParsingError(QueryBuilderError):
    """Issues parsing rendered SQL statements."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "Issues parsing SQL statement."
        super().__init__(message)


class ImproperConfigurationError(QueryBuilderError):
    """Improper Configuration error.

    Raised when a statement is executed without a driver adapter attached.
    """


class DriverError(QueryBuilderError):
    """The driver adapter rejected a statement.

    The original driver exception is chained as ``__cause__``.
    """

    sql: Optional[str]

    def __init__(self, message: str, sql: Optional[str] = None) -> None:
        detail_message = message
        if sql:
            detail_message = f"{message}\nSQL: {sql}"
        super().__init__(detail=detail_message)
        self.sql = sql
