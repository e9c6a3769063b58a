"""
Project GraphQL type definitions
"""

from enum import Enum
from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from .client import Client


@strawberry.enum(name="ProjectStatus")
class ProjectStatus(Enum):
    """Project lifecycle stage; GraphQL names map onto the stored labels."""

    new = "Not Started"
    progress = "In Progress"
    completed = "Completed"


@strawberry.enum(name="ProjectStatusUpdate")
class ProjectStatusUpdate(Enum):
    """Status accepted by updateProject; same members as ProjectStatus."""

    new = "Not Started"
    progress = "In Progress"
    completed = "Completed"


@strawberry.type
class Project:
    """Project type for GraphQL API."""

    id: strawberry.ID
    name: str | None
    description: str | None
    status: str | None
    client_id: strawberry.ID | None

    @strawberry.field
    async def client(
        self, info: strawberry.Info
    ) -> Annotated["Client", strawberry.lazy(".client")] | None:
        """Get the client that owns this project."""
        from ..resolvers.project import resolve_project_client

        return await resolve_project_client(self, info)
