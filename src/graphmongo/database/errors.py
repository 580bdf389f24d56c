"""
Errors raised while establishing the database connection
"""


class DatabaseConnectionError(Exception):
    """Raised when a connection to the database could not be established."""

    def __init__(self, message: str, target: str | None = None):
        super().__init__(message)
        self.target = target


class MissingConnectionTargetError(DatabaseConnectionError):
    """No connection target was configured."""


class InvalidConnectionTargetError(DatabaseConnectionError):
    """The driver rejected the connection target as malformed."""


class DatabaseConnectionTimeoutError(DatabaseConnectionError):
    """The connection attempt did not resolve within the configured bound."""

    def __init__(self, message: str, target: str | None = None, timeout: float | None = None):
        super().__init__(message, target)
        self.timeout = timeout
