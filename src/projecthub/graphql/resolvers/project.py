from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

import strawberry

from ...database import repository
from ...database.connection import get_async_session
from ...dbmodels import Projects
from ...logging import get_logger
from ..ids import parse_id
from .converters import client_from_row, project_from_row

if TYPE_CHECKING:
    from ..types.client import Client
    from ..types.project import Project, ProjectStatus, ProjectStatusUpdate

logger = get_logger(__name__)


# Query resolvers
async def resolve_projects(info: strawberry.Info) -> list[Project]:
    """Resolve every project."""
    async with get_async_session() as session:
        projects = await repository.list_projects(session)
        return [project_from_row(project) for project in projects]


async def resolve_project_by_id(info: strawberry.Info, id: strawberry.ID | None) -> Project | None:
    """
    Resolve a project by its ID.

    A missing or malformed id resolves to None rather than an error.
    """
    project_id = parse_id(id)
    if project_id is None:
        return None

    async with get_async_session() as session:
        project = await repository.get_project(session, project_id)

        if not project:
            logger.info("Project not found", project_id=str(project_id))
            return None

        return project_from_row(project)


# Project field resolvers
async def resolve_project_client(project: Project, info: strawberry.Info) -> Client | None:
    """
    Resolve the client that owns a project.

    Uses the request's client DataLoader when one is in the context so that
    listing many projects issues a single client query.
    """
    client_id = parse_id(project.client_id)
    if client_id is None:
        return None

    loaders = info.context.get("loaders") if isinstance(info.context, dict) else None
    if loaders is not None:
        client = await loaders.client_loader.load(client_id)
    else:
        async with get_async_session() as session:
            client = await repository.get_client(session, client_id)

    if client is None:
        logger.info(
            "Project references a missing client",
            project_id=str(project.id),
            client_id=str(client_id),
        )
        return None

    return client_from_row(client)


# Mutation resolvers
async def add_project(
    info: strawberry.Info,
    name: str,
    client_id: strawberry.ID,
    description: str | None,
    status: ProjectStatus,
) -> Project:
    """Create a new project owned by ``client_id``."""
    parsed_client_id = parse_id(client_id)
    if parsed_client_id is None:
        raise RuntimeError(f"Invalid client id: {client_id}")

    async with get_async_session() as session:
        project = await repository.create_project(
            session,
            name=name,
            description=description,
            status=status.value,
            client_id=parsed_client_id,
        )

        logger.info(
            "Project created",
            project_id=str(project.id),
            client_id=str(parsed_client_id),
            status=project.status,
        )

        return project_from_row(project)


async def remove_project(project_id: UUID) -> Projects | None:
    """Delete one project in its own session and return the removed row."""
    async with get_async_session() as session:
        project = await repository.delete_project(session, project_id)

    if project is not None:
        logger.info("Project deleted", project_id=str(project_id))
    return project


async def delete_project(info: strawberry.Info, id: strawberry.ID) -> Project | None:
    """Delete a project, returning the removed record or None if it did not exist."""
    project_id = parse_id(id)
    if project_id is None:
        return None

    project = await remove_project(project_id)
    if project is None:
        logger.info("Project not found for deletion", project_id=str(project_id))
        return None

    return project_from_row(project)


async def update_project(
    info: strawberry.Info,
    id: strawberry.ID,
    name: str | None = strawberry.UNSET,
    description: str | None = strawberry.UNSET,
    status: ProjectStatusUpdate | None = strawberry.UNSET,
) -> Project | None:
    """
    Update the supplied fields of a project.

    Arguments left as ``UNSET`` keep their stored value, while an explicit
    None clears the field. Returns the updated project, or None when no
    project has the given id.
    """
    project_id = parse_id(id)
    if project_id is None:
        return None

    fields = {
        key: value
        for key, value in {"name": name, "description": description, "status": status}.items()
        if value is not strawberry.UNSET
    }
    if fields.get("status") is not None:
        fields["status"] = fields["status"].value

    async with get_async_session() as session:
        project = await repository.update_project(session, project_id, fields)

        if project is None:
            logger.info("Project not found for update", project_id=str(project_id))
            return None

        logger.info("Project updated", project_id=str(project_id), updated_fields=sorted(fields))

        return project_from_row(project)
