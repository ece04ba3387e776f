"""Client registration, listing and statistics endpoints."""
import json
from typing import Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from dependency_injector.wiring import Provide, inject

from src.app.containers import Container
from src.app.config import Settings
from src.app.core.services.client_service import ClientService
from src.app.api.mappers import (
    to_client_list_item_response,
    to_create_client_response,
    to_statistics_response,
)
from src.client.schemas import (
    NO_CLIENTS_MESSAGE,
    ClientListItemResponse,
    ClientStatisticsResponse,
    CreateClientResponse,
    MessageResponse,
    ValidationErrorResponse,
)
from src.shared.exceptions import ClientValidationError, NoRecordsFound
from src.app.logging import get_logger

router = APIRouter(tags=["clients"])
logger = get_logger(__name__)

NOT_FOUND_RESPONSE = {status.HTTP_404_NOT_FOUND: {"model": MessageResponse}}


def no_clients_response() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"mensaje": NO_CLIENTS_MESSAGE},
    )


async def read_json_object(request: Request) -> dict[str, Any]:
    """Decode the request body; anything but a JSON object counts as empty input."""
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return {}
    return payload if isinstance(payload, dict) else {}


@router.post(
    "/crearcliente",
    response_model=CreateClientResponse,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_422_UNPROCESSABLE_ENTITY: {"model": ValidationErrorResponse}},
)
@inject
async def create_client(
    request: Request,
    service: ClientService = Depends(Provide[Container.client_service]),
    config: Settings = Depends(Provide[Container.config]),
):
    """
    Register a new client.

    The body carries nombre, apellido, edad and fecha_nacimiento. Every field
    is validated; on failure all messages are returned per field and nothing
    is stored.
    """
    payload = await read_json_object(request)
    try:
        client = await service.create_client(payload)
    except ClientValidationError as e:
        logger.warning(f"Failed to create client due to validation error: {e}")
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"errors": e.errors},
        )
    return to_create_client_response(client, config.clients.date_format)


@router.get(
    "/listclientes",
    response_model=list[ClientListItemResponse],
    responses=NOT_FOUND_RESPONSE,
)
@inject
async def list_clients(
    service: ClientService = Depends(Provide[Container.client_service]),
    config: Settings = Depends(Provide[Container.config]),
):
    """List every client in registration order with its projected date of death."""
    try:
        clients = await service.list_clients()
    except NoRecordsFound as e:
        logger.info(f"No clients to list: {e}")
        return no_clients_response()
    return [to_client_list_item_response(client, config.clients.date_format) for client in clients]


@router.get(
    "/kpideclientes",
    response_model=ClientStatisticsResponse,
    responses=NOT_FOUND_RESPONSE,
)
@inject
async def get_client_statistics(
    service: ClientService = Depends(Provide[Container.client_service]),
):
    """Mean age and population standard deviation of all clients."""
    try:
        statistics = await service.get_age_statistics()
    except NoRecordsFound as e:
        logger.info(f"No clients to aggregate: {e}")
        return no_clients_response()
    return to_statistics_response(statistics)
