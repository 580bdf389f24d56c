"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.user import User


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation
    async def create_user(self, info: strawberry.Info, name: str, email: str) -> User:
        """Create a new user."""
        from ..resolvers.user import create_user

        return await create_user(info, name, email)

    @strawberry.mutation
    async def delete_user(self, info: strawberry.Info, id: strawberry.ID) -> bool:
        """Delete a user; false when no user has that ID."""
        from ..resolvers.user import delete_user

        return await delete_user(info, str(id))
