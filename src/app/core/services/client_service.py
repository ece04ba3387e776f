from collections.abc import Mapping
from typing import Any, Protocol

from src.app.core.domain.models import AgeStatistics, Client, NewClient, ProjectedClient
from src.app.core.services.client_validator import ClientValidator
from src.app.core.services.projection import DEFAULT_LIFE_EXPECTANCY_YEARS, project_date
from src.app.core.services.statistics import compute_age_statistics
from src.app.logging import get_logger
from src.shared.exceptions import NoRecordsFound

logger = get_logger(__name__)


class ClientStore(Protocol):
    """Persistence operations the client service relies on."""

    async def insert(self, client: NewClient) -> Client: ...

    async def list_all(self) -> list[Client]: ...


class ClientService:
    """Service for handling Client business logic."""

    def __init__(
        self,
        repository: ClientStore,
        validator: ClientValidator,
        life_expectancy_years: int = DEFAULT_LIFE_EXPECTANCY_YEARS,
    ):
        self.repository = repository
        self.validator = validator
        self.life_expectancy_years = life_expectancy_years

    async def create_client(self, raw: Mapping[str, Any]) -> Client:
        """Validate raw input and store the resulting client."""
        # Raises ClientValidationError before anything is persisted
        new_client = self.validator.validate(raw)
        client = await self.repository.insert(new_client)
        logger.info("Created client %s", client.id)
        return client

    async def list_clients(self) -> list[ProjectedClient]:
        """List every client in insertion order with its projected date of death."""
        clients = await self._all_clients()
        return [
            ProjectedClient(
                client=client,
                projected_death_date=project_date(client.birth_date, self.life_expectancy_years),
            )
            for client in clients
        ]

    async def get_age_statistics(self) -> AgeStatistics:
        """Mean age and population standard deviation over all clients."""
        clients = await self._all_clients()
        return compute_age_statistics([client.age for client in clients])

    async def _all_clients(self) -> list[Client]:
        clients = await self.repository.list_all()
        if not clients:
            raise NoRecordsFound("Client")
        return clients
