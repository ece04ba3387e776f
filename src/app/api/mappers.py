"""Mappers for converting between domain models and API schemas."""
from src.app.core.domain.models import AgeStatistics, Client, ProjectedClient
from src.client.schemas import (
    ClientListItemResponse,
    ClientResponse,
    ClientStatisticsResponse,
    CreateClientResponse,
)


def to_client_response(client: Client, date_format: str) -> ClientResponse:
    """
    Convert a Client domain model to ClientResponse API schema.

    Args:
        client: Domain model
        date_format: Format used to render the birth date

    Returns:
        API response schema
    """
    return ClientResponse(
        id=client.id,
        nombre=client.first_name,
        apellido=client.last_name,
        edad=client.age,
        fecha_nacimiento=client.birth_date.strftime(date_format),
        created_at=client.created_at,
    )


def to_create_client_response(client: Client, date_format: str) -> CreateClientResponse:
    return CreateClientResponse(cliente_creado=to_client_response(client, date_format))


def to_client_list_item_response(projected: ProjectedClient, date_format: str) -> ClientListItemResponse:
    """
    Convert a ProjectedClient domain model to a listing entry.

    Both dates are rendered with the same format.
    """
    client = projected.client
    return ClientListItemResponse(
        nombre=client.first_name,
        apellido=client.last_name,
        edad=client.age,
        fecha_nacimiento=client.birth_date.strftime(date_format),
        fecha_probable_muerte=projected.projected_death_date.strftime(date_format),
    )


def to_statistics_response(statistics: AgeStatistics) -> ClientStatisticsResponse:
    return ClientStatisticsResponse(
        promedio_edad=statistics.mean_age,
        desviacion_estandar=statistics.std_dev,
    )
