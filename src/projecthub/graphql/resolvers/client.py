from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import strawberry

from ...database import repository
from ...database.connection import get_async_session
from ...logging import get_logger
from ..ids import parse_id
from .converters import client_from_row
from .project import remove_project

if TYPE_CHECKING:
    from ..types.client import Client

logger = get_logger(__name__)


# Query resolvers
async def resolve_clients(info: strawberry.Info) -> list[Client]:
    """Resolve every client."""
    async with get_async_session() as session:
        clients = await repository.list_clients(session)
        return [client_from_row(client) for client in clients]


async def resolve_client_by_id(info: strawberry.Info, id: strawberry.ID | None) -> Client | None:
    """
    Resolve a client by its ID.

    A missing or malformed id resolves to None rather than an error.
    """
    client_id = parse_id(id)
    if client_id is None:
        return None

    async with get_async_session() as session:
        client = await repository.get_client(session, client_id)

        if not client:
            logger.info("Client not found", client_id=str(client_id))
            return None

        return client_from_row(client)


# Mutation resolvers
async def add_client(info: strawberry.Info, name: str, email: str, phone: str) -> Client:
    """Create a new client."""
    async with get_async_session() as session:
        client = await repository.create_client(session, name=name, email=email, phone=phone)

        logger.info("Client created", client_id=str(client.id))

        return client_from_row(client)


async def delete_client(info: strawberry.Info, id: strawberry.ID) -> Client | None:
    """
    Delete a client together with every project that references it.

    The client's projects are deleted concurrently, each in its own session,
    and the client is deleted once they have all finished. The sequence is
    not atomic: projects removed before a later failure stay removed. Any
    failure is re-raised as a single generic error.
    """
    client_id = parse_id(id)
    if client_id is None:
        return None

    try:
        async with get_async_session() as session:
            projects = await repository.list_projects(session, client_id=client_id)
            project_ids = [project.id for project in projects]

        if project_ids:
            await asyncio.gather(*(remove_project(project_id) for project_id in project_ids))

        async with get_async_session() as session:
            client = await repository.delete_client(session, client_id)
    except Exception as e:
        logger.error("Client deletion failed", client_id=str(client_id), error=str(e))
        raise RuntimeError(f"Error deleting client: {e}") from e

    if client is None:
        logger.info(
            "Client not found for deletion",
            client_id=str(client_id),
            projects_deleted=len(project_ids),
        )
        return None

    logger.info("Client deleted", client_id=str(client_id), projects_deleted=len(project_ids))

    return client_from_row(client)
