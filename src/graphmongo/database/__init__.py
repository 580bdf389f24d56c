"""
Database module for the graphmongo backend
"""

from .bootstrap import (
    BootstrapOutcome,
    ConnectionState,
    DatabaseBootstrapper,
    bootstrap_database,
    exit_on_failure,
)
from .connection import DatabaseHandle, connect_database, redact_connection_target
from .errors import (
    DatabaseConnectionError,
    DatabaseConnectionTimeoutError,
    InvalidConnectionTargetError,
    MissingConnectionTargetError,
)

__all__ = [
    "BootstrapOutcome",
    "ConnectionState",
    "DatabaseBootstrapper",
    "DatabaseConnectionError",
    "DatabaseConnectionTimeoutError",
    "DatabaseHandle",
    "InvalidConnectionTargetError",
    "MissingConnectionTargetError",
    "bootstrap_database",
    "connect_database",
    "exit_on_failure",
    "redact_connection_target",
]
