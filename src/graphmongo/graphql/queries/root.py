"""
Root GraphQL query definitions
"""

import strawberry

from ..types.user import User


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def users(
        self,
        info: strawberry.Info,
        limit: int | None = 50,
        offset: int | None = 0,
    ) -> list[User]:
        """List users, oldest first."""
        from ..resolvers.user import resolve_users

        return await resolve_users(info, limit or 50, offset or 0)

    @strawberry.field
    async def user(self, info: strawberry.Info, id: strawberry.ID) -> User | None:
        """Get a user by ID."""
        from ..resolvers.user import resolve_user_by_id

        return await resolve_user_by_id(info, str(id))
