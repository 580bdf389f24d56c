"""
One-time database bootstrap performed at process startup.

The bootstrapper makes a single bounded connection attempt and reports the
result as a ``BootstrapOutcome``. It never terminates the process itself;
``exit_on_failure`` is the one place that does, and only the top-level
startup routine calls it.
"""

from __future__ import annotations

import asyncio
import sys
from dataclasses import dataclass
from enum import Enum

from pymongo import AsyncMongoClient

from ..config import Settings
from ..config import settings as default_settings
from ..logging import get_logger
from .connection import ClientFactory, DatabaseHandle, connect_database, redact_connection_target
from .errors import DatabaseConnectionError, DatabaseConnectionTimeoutError

logger = get_logger(__name__)


class ConnectionState(str, Enum):
    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    FAILED = "failed"


@dataclass(frozen=True)
class BootstrapOutcome:
    """Result of a bootstrap: exactly one of ``handle`` or ``error`` is set."""

    handle: DatabaseHandle | None = None
    error: DatabaseConnectionError | None = None

    def __post_init__(self) -> None:
        if (self.handle is None) == (self.error is None):
            raise ValueError("BootstrapOutcome needs exactly one of handle or error")

    @property
    def ok(self) -> bool:
        return self.handle is not None


class DatabaseBootstrapper:
    """Establish the process's single database connection.

    Repeated calls to ``bootstrap`` return the first outcome; the connection
    is attempted at most once per bootstrapper.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        client_factory: ClientFactory | None = None,
    ):
        self._settings = settings or default_settings
        self._client_factory = client_factory or AsyncMongoClient
        self._state = ConnectionState.DISCONNECTED
        self._outcome: BootstrapOutcome | None = None
        self._lock = asyncio.Lock()
        self.attempts = 0

    @property
    def state(self) -> ConnectionState:
        return self._state

    @property
    def outcome(self) -> BootstrapOutcome | None:
        return self._outcome

    async def bootstrap(self) -> BootstrapOutcome:
        """Connect to the configured database, or return the earlier outcome."""
        async with self._lock:
            if self._outcome is not None:
                return self._outcome

            self._state = ConnectionState.CONNECTING
            self.attempts += 1
            self._outcome = await self._attempt()
            self._state = (
                ConnectionState.CONNECTED if self._outcome.ok else ConnectionState.FAILED
            )
            return self._outcome

    async def _attempt(self) -> BootstrapOutcome:
        target = self._settings.mongo_uri
        redacted = redact_connection_target(target)
        timeout = self._settings.mongo_connect_timeout

        logger.info("Connecting to MongoDB", target=redacted, timeout=timeout)

        try:
            handle = await asyncio.wait_for(
                connect_database(
                    target,
                    database_name=self._settings.mongo_database,
                    server_selection_timeout_ms=self._settings.mongo_server_selection_timeout_ms,
                    app_name=self._settings.app_name,
                    client_factory=self._client_factory,
                ),
                timeout=timeout,
            )
        except TimeoutError:
            error: DatabaseConnectionError = DatabaseConnectionTimeoutError(
                f"Timed out after {timeout}s connecting to MongoDB",
                target=redacted,
                timeout=timeout,
            )
        except DatabaseConnectionError as e:
            error = e
        except Exception as e:
            error = DatabaseConnectionError(
                f"Unexpected error connecting to MongoDB: {e}", target=redacted
            )
            error.__cause__ = e
        else:
            logger.info("Connected to MongoDB", host=handle.host, database=handle.name)
            return BootstrapOutcome(handle=handle)

        logger.error(
            "Error connecting to MongoDB",
            target=redacted,
            error=str(error),
            error_type=type(error).__name__,
        )
        return BootstrapOutcome(error=error)


def exit_on_failure(outcome: BootstrapOutcome) -> DatabaseHandle:
    """Return the handle of a successful bootstrap, or exit the process with status 1."""
    if outcome.handle is not None:
        return outcome.handle

    logger.critical(
        "Database bootstrap failed, exiting",
        error_type=type(outcome.error).__name__,
        exit_code=1,
    )
    sys.exit(1)


async def bootstrap_database(
    settings: Settings | None = None,
    client_factory: ClientFactory | None = None,
) -> BootstrapOutcome:
    """Run a one-off bootstrap with a fresh bootstrapper."""
    return await DatabaseBootstrapper(settings, client_factory).bootstrap()
