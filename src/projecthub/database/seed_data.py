"""
Sample data for local development.

Seeding is idempotent: a client is only inserted when no client with the
same email exists, and its projects are only inserted alongside it.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..dbmodels import Clients
from ..logging import get_logger
from . import repository

logger = get_logger(__name__)

SAMPLE_DATA: list[dict[str, Any]] = [
    {
        "client": {"name": "Tony Stark", "email": "ironman@gmail.com", "phone": "343-567-4333"},
        "projects": [
            {
                "name": "eCommerce Website",
                "description": "Storefront with cart, checkout and order tracking.",
                "status": "In Progress",
            },
            {
                "name": "Mobile App",
                "description": "Companion app for the storefront.",
                "status": "Not Started",
            },
        ],
    },
    {
        "client": {
            "name": "Natasha Romanova",
            "email": "blackwidow@gmail.com",
            "phone": "223-567-3322",
        },
        "projects": [
            {
                "name": "Dating App",
                "description": "Matching service with chat.",
                "status": "Completed",
            },
        ],
    },
    {
        "client": {"name": "Bruce Banner", "email": "hulk@gmail.com", "phone": "324-331-4333"},
        "projects": [
            {
                "name": "SEO Project",
                "description": "Search ranking audit and content plan.",
                "status": "In Progress",
            },
        ],
    },
]


async def seed_sample_data(db: AsyncSession) -> tuple[int, int]:
    """
    Insert the sample clients and their projects.

    Returns:
        (clients_created, projects_created)
    """
    clients_created = 0
    projects_created = 0

    for entry in SAMPLE_DATA:
        client_data = entry["client"]
        stmt = select(Clients).where(Clients.email == client_data["email"])
        existing = (await db.execute(stmt)).scalar_one_or_none()
        if existing is not None:
            logger.debug("Sample client already present", email=client_data["email"])
            continue

        client = await repository.create_client(db, **client_data)
        clients_created += 1

        for project_data in entry["projects"]:
            await repository.create_project(db, client_id=client.id, **project_data)
            projects_created += 1

    logger.info(
        "Sample data seeded",
        clients_created=clients_created,
        projects_created=projects_created,
    )
    return clients_created, projects_created
