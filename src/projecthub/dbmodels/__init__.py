"""
Database models for projecthub (authoritative ORM definitions).

``Projects.client_id`` has no foreign key constraint. The
link to its owning client is kept consistent only by the ``deleteClient``
cascade in the GraphQL layer.
"""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from sqlalchemy import DateTime, Index, MetaData, PrimaryKeyConstraint, String, Text, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# Naming convention for deterministic constraint/index names
naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

PROJECT_STATUSES = ("Not Started", "In Progress", "Completed")
DEFAULT_PROJECT_STATUS = PROJECT_STATUSES[0]


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Base(DeclarativeBase):
    """Base class for all database models with type checking support."""

    metadata = MetaData(naming_convention=naming_convention)


class Clients(Base):
    __tablename__ = "clients"
    __table_args__ = (PrimaryKeyConstraint("id", name="clients_pkey"),)

    id: Mapped[UUID] = mapped_column(Uuid, default=uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str] = mapped_column(String(64), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(True), default=_utcnow)


class Projects(Base):
    __tablename__ = "projects"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="projects_pkey"),
        Index("idx_projects_client", "client_id"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, default=uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    status: Mapped[str] = mapped_column(
        String(32), nullable=False, default=DEFAULT_PROJECT_STATUS
    )
    client_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(True), default=_utcnow)


__all__ = [
    "Base",
    "Clients",
    "DEFAULT_PROJECT_STATUS",
    "PROJECT_STATUSES",
    "Projects",
]
