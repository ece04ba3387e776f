from sqlalchemy import select

from src.app.core.domain.models import Client, NewClient
from src.shared.database.base_repo import BaseRepository
from src.shared.database.database import Database

from src.app.infrastructure.entities.client_entity import ClientEntity
from src.app.infrastructure.mappers.client_mapper import ClientMapper


class ClientRepository(BaseRepository[ClientEntity, Client]):
    """Repository for Client operations. Clients are append-only."""

    def __init__(self, db: Database, mapper: ClientMapper):
        super().__init__(db, mapper)

    async def insert(self, client: NewClient) -> Client:
        """Store a new client and return it with its assigned ID."""
        return await self.add(client)

    async def list_all(self) -> list[Client]:
        """Get every client in insertion order."""
        return await self.find_all(
            select(ClientEntity).order_by(ClientEntity.id)
        )
