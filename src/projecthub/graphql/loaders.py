from uuid import UUID

from strawberry.dataloader import DataLoader

from ..database import repository
from ..database.connection import get_async_session
from ..dbmodels import Clients


async def load_clients(keys: list[UUID]) -> list[Clients | None]:
    """Batch load clients by ID."""
    async with get_async_session() as session:
        clients = await repository.get_clients_by_ids(session, keys)
        clients_map = {client.id: client for client in clients}
        return [clients_map.get(key) for key in keys]


class Loaders:
    def __init__(self):
        self.client_loader = DataLoader(load_fn=load_clients)
