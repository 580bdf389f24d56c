"""
GraphQL resolvers
"""

from typing import Any

import strawberry

from ...database import DatabaseHandle


def get_database(info: strawberry.Info) -> DatabaseHandle:
    """Get the connection handle placed in the GraphQL context."""
    database: Any = info.context.get("database")
    if database is None:
        raise RuntimeError("Database handle missing from GraphQL context")
    return database
