"""Clientes HTTP Client for consuming the Clientes API."""
from typing import Optional
from httpx import AsyncClient, Response

from src.client.schemas import (
    CreateClientRequest,
    CreateClientResponse,
    ClientListItemResponse,
    ClientStatisticsResponse,
)


class ClientesClient:
    """HTTP client for interacting with the Clientes API."""

    def __init__(self, base_url: str, client: Optional[AsyncClient] = None, api_prefix: str = ""):
        """
        Initialize the Clientes client.

        Args:
            base_url: Base URL of the Clientes API (e.g., "http://localhost:8000")
            client: Optional httpx.AsyncClient instance. If not provided, a new one will be created.
            api_prefix: Prefix the server mounts the client endpoints under (e.g., "/api")
        """
        self.base_url = base_url.rstrip("/")
        self.api_prefix = api_prefix.rstrip("/")
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self):
        """Async context manager entry."""
        if self._owns_client:
            self._client = AsyncClient(base_url=self.base_url)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        if self._owns_client and self._client:
            await self._client.aclose()

    @property
    def client(self) -> AsyncClient:
        """Get the underlying httpx client."""
        if self._client is None:
            raise RuntimeError("Client not initialized. Use async context manager.")
        return self._client

    async def create_client(self, request: CreateClientRequest) -> CreateClientResponse:
        """
        Register a new client.

        Args:
            request: Client creation request

        Returns:
            Confirmation message with the stored client

        Raises:
            httpx.HTTPStatusError: If the request fails (422 with per-field errors on invalid input)
        """
        response: Response = await self.client.post(
            f"{self.api_prefix}/crearcliente",
            json=request.model_dump(mode="json", exclude_none=True),
        )
        response.raise_for_status()
        return CreateClientResponse(**response.json())

    async def list_clients(self) -> list[ClientListItemResponse]:
        """
        List all clients with their projected date of death.

        Raises:
            httpx.HTTPStatusError: If the request fails (404 if no clients are registered)
        """
        response: Response = await self.client.get(f"{self.api_prefix}/listclientes")
        response.raise_for_status()
        return [ClientListItemResponse(**item) for item in response.json()]

    async def get_statistics(self) -> ClientStatisticsResponse:
        """
        Get the mean age and standard deviation of all clients.

        Raises:
            httpx.HTTPStatusError: If the request fails (404 if no clients are registered)
        """
        response: Response = await self.client.get(f"{self.api_prefix}/kpideclientes")
        response.raise_for_status()
        return ClientStatisticsResponse(**response.json())
