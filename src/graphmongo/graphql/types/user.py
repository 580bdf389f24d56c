"""
User GraphQL type definitions
"""

from datetime import datetime
from typing import Any

import strawberry


@strawberry.type
class User:
    """User type for GraphQL API."""

    id: strawberry.ID
    name: str
    email: str
    created_at: datetime | None

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "User":
        """Build a User from a document in the ``users`` collection."""
        return cls(
            id=strawberry.ID(str(document["_id"])),
            name=document.get("name", ""),
            email=document.get("email", ""),
            created_at=document.get("created_at"),
        )
