"""
Client GraphQL type definitions
"""

import strawberry


@strawberry.type
class Client:
    """Client type for GraphQL API."""

    id: strawberry.ID
    name: str | None
    email: str | None
    phone: str | None
