"""Repository helpers for project and client persistence.

Every helper takes the caller's session and only flushes; committing is left
to the ``get_async_session`` scope that owns the session.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..dbmodels import DEFAULT_PROJECT_STATUS, Clients, Projects


# Clients
async def list_clients(session: AsyncSession) -> Sequence[Clients]:
    stmt = select(Clients).order_by(Clients.created_at)
    res = await session.execute(stmt)
    return res.scalars().all()


async def get_client(session: AsyncSession, client_id: UUID) -> Clients | None:
    return await session.get(Clients, client_id)


async def get_clients_by_ids(session: AsyncSession, client_ids: Sequence[UUID]) -> list[Clients]:
    stmt = select(Clients).where(Clients.id.in_(client_ids))
    res = await session.execute(stmt)
    return list(res.scalars().all())


async def create_client(session: AsyncSession, *, name: str, email: str, phone: str) -> Clients:
    client = Clients(name=name, email=email, phone=phone)
    session.add(client)
    await session.flush()
    return client


async def delete_client(session: AsyncSession, client_id: UUID) -> Clients | None:
    """Delete a client by id and return the removed row, or None if absent."""
    client = await session.get(Clients, client_id)
    if client is None:
        return None
    await session.delete(client)
    await session.flush()
    return client


# Projects
async def list_projects(
    session: AsyncSession, *, client_id: UUID | None = None
) -> Sequence[Projects]:
    stmt = select(Projects).order_by(Projects.created_at)
    if client_id is not None:
        stmt = stmt.where(Projects.client_id == client_id)
    res = await session.execute(stmt)
    return res.scalars().all()


async def get_project(session: AsyncSession, project_id: UUID) -> Projects | None:
    return await session.get(Projects, project_id)


async def create_project(
    session: AsyncSession,
    *,
    name: str,
    client_id: UUID,
    description: str | None = None,
    status: str = DEFAULT_PROJECT_STATUS,
) -> Projects:
    project = Projects(name=name, description=description, status=status, client_id=client_id)
    session.add(project)
    await session.flush()
    return project


async def delete_project(session: AsyncSession, project_id: UUID) -> Projects | None:
    """Delete a project by id and return the removed row, or None if absent."""
    project = await session.get(Projects, project_id)
    if project is None:
        return None
    await session.delete(project)
    await session.flush()
    return project


UPDATABLE_PROJECT_FIELDS = frozenset({"name", "description", "status"})


async def update_project(
    session: AsyncSession, project_id: UUID, fields: dict[str, Any]
) -> Projects | None:
    """Set exactly the given fields on a project and return the updated row.

    A field absent from ``fields`` keeps its stored value; a field mapped to
    None is cleared.
    """
    unknown = set(fields) - UPDATABLE_PROJECT_FIELDS
    if unknown:
        raise ValueError(f"Cannot update project fields: {sorted(unknown)}")

    project = await session.get(Projects, project_id)
    if project is None:
        return None

    for field, value in fields.items():
        setattr(project, field, value)

    await session.flush()
    return project
