"""Conversion of ORM rows into GraphQL types."""

from __future__ import annotations

from ...dbmodels import Clients, Projects
from ..ids import to_global_id
from ..types.client import Client
from ..types.project import Project


def client_from_row(client: Clients) -> Client:
    return Client(
        id=to_global_id(client.id),
        name=client.name,
        email=client.email,
        phone=client.phone,
    )


def project_from_row(project: Projects) -> Project:
    return Project(
        id=to_global_id(project.id),
        name=project.name,
        description=project.description,
        status=project.status,
        client_id=to_global_id(project.client_id) if project.client_id else None,
    )
