"""
Database connection management
"""

import asyncio
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from pymongo import AsyncMongoClient
from pymongo.errors import ConfigurationError, PyMongoError

from ..logging import get_logger
from .errors import (
    DatabaseConnectionError,
    InvalidConnectionTargetError,
    MissingConnectionTargetError,
)

logger = get_logger(__name__)

DEFAULT_DATABASE = "graphmongo"
UNSET_TARGET = "<unset>"
INVALID_TARGET = "<invalid>"
_AUTHORITY_RE = re.compile(r"(?P<hosts>[^/?]*)(?:/(?P<path>[^?]*))?")

ClientFactory = Callable[..., Any]


def redact_connection_target(target: str | None) -> str:
    """Return a loggable form of a connection string.

    Credentials and query options are removed; the scheme, host list and
    database path are kept, e.g. ``mongodb://db1:27017,db2:27017/app``.
    A bare ``host:port`` target is returned as its host list.
    """
    if not target or not target.strip():
        return UNSET_TARGET

    target = target.strip()
    scheme, sep, rest = target.partition("://")
    if not sep:
        scheme, rest = "", target
    elif not scheme:
        return INVALID_TARGET

    # Everything before the last "@" is userinfo, whatever characters it holds
    rest = rest.rpartition("@")[2]
    match = _AUTHORITY_RE.match(rest)
    hosts, path = match.group("hosts"), match.group("path")
    if not hosts:
        return INVALID_TARGET

    redacted = f"{scheme}://{hosts}" if scheme else hosts
    if path:
        return f"{redacted}/{path}"
    return redacted


def _first_target_host(redacted: str) -> str:
    rest = redacted.split("://", 1)[-1]
    return rest.split("/", 1)[0].split(",", 1)[0]


def resolve_host(client: Any, redacted_target: str) -> str:
    """Identify the server that answered, as ``host:port``.

    Uses the driver's topology description and falls back to the first host
    named in the target.
    """
    try:
        descriptions = client.topology_description.server_descriptions()
    except (AttributeError, PyMongoError):
        descriptions = {}

    for (host, port), description in descriptions.items():
        if description.is_server_type_known:
            return f"{host}:{port}"

    return _first_target_host(redacted_target)


@dataclass
class DatabaseHandle:
    """A live link to the document database.

    Created once by the bootstrapper and passed explicitly to every
    component that issues queries.
    """

    client: Any
    database: Any
    target: str
    host: str
    connected: bool = field(default=True)

    @property
    def name(self) -> str:
        return self.database.name

    def collection(self, name: str) -> Any:
        """Get a collection from the selected database."""
        return self.database[name]

    async def ping(self) -> bool:
        """Round-trip to the server; False when it does not answer."""
        if not self.connected:
            return False
        try:
            await self.client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.warning("Database ping failed", host=self.host, error=str(e))
            return False

    async def close(self) -> None:
        """Close the underlying client."""
        if not self.connected:
            return
        self.connected = False
        await self.client.close()
        logger.info("Database connection closed", host=self.host)


async def connect_database(
    target: str | None,
    *,
    database_name: str | None = None,
    server_selection_timeout_ms: int = 5000,
    app_name: str | None = None,
    client_factory: ClientFactory = AsyncMongoClient,
) -> DatabaseHandle:
    """Open a client and confirm the server answers with a single ping.

    Raises:
        MissingConnectionTargetError: if no target is configured
        InvalidConnectionTargetError: if the driver rejects the target
        DatabaseConnectionError: if the server cannot be reached
    """
    redacted = redact_connection_target(target)
    if redacted == UNSET_TARGET:
        raise MissingConnectionTargetError("MONGO_URI is not set", target=redacted)

    options: dict[str, Any] = {"serverSelectionTimeoutMS": server_selection_timeout_ms}
    if app_name:
        options["appname"] = app_name

    try:
        client = client_factory(target, **options)
    except ConfigurationError as e:
        # InvalidURI is a ConfigurationError as well
        raise InvalidConnectionTargetError(
            f"Invalid MongoDB connection string: {e}", target=redacted
        ) from e
    except PyMongoError as e:
        raise DatabaseConnectionError(f"Cannot create MongoDB client: {e}", target=redacted) from e

    try:
        await client.admin.command("ping")
        if database_name:
            database = client[database_name]
        else:
            database = client.get_default_database(default=DEFAULT_DATABASE)
    except ConfigurationError as e:
        await client.close()
        raise InvalidConnectionTargetError(
            f"Invalid MongoDB configuration: {e}", target=redacted
        ) from e
    except PyMongoError as e:
        await client.close()
        raise DatabaseConnectionError(f"Cannot connect to MongoDB: {e}", target=redacted) from e
    except asyncio.CancelledError:
        await client.close()
        raise

    return DatabaseHandle(
        client=client,
        database=database,
        target=redacted,
        host=resolve_host(client, redacted),
    )
