"""Python client for the Clientes API."""
from src.client.clientes_client import ClientesClient
from src.client.schemas import (
    CreateClientRequest,
    CreateClientResponse,
    ClientResponse,
    ClientListItemResponse,
    ClientStatisticsResponse,
)

__all__ = [
    "ClientesClient",
    "CreateClientRequest",
    "CreateClientResponse",
    "ClientResponse",
    "ClientListItemResponse",
    "ClientStatisticsResponse",
]
