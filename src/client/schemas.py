"""API schemas for client requests and responses."""
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

NO_CLIENTS_MESSAGE = "No hay clientes registrados"
CLIENT_CREATED_MESSAGE = "Cliente creado con éxito"


class CreateClientRequest(BaseModel):
    """
    Request schema for creating a new client.

    Values are deliberately loosely typed: the server validates them and
    reports every failing field at once.
    """
    nombre: Any = None
    apellido: Any = None
    edad: Any = None
    fecha_nacimiento: Any = None


class ClientResponse(BaseModel):
    """Response schema for a stored client."""
    id: int
    nombre: str = Field(..., min_length=1)
    apellido: str = Field(..., min_length=1)
    edad: int = Field(..., ge=0)
    fecha_nacimiento: str = Field(..., description="Birth date in the deployment's date format")
    created_at: datetime


class CreateClientResponse(BaseModel):
    """Response schema returned after a client is created."""
    mensaje: str = CLIENT_CREATED_MESSAGE
    cliente_creado: ClientResponse


class ClientListItemResponse(BaseModel):
    """A listed client with its projected date of death."""
    nombre: str
    apellido: str
    edad: int
    fecha_nacimiento: str
    fecha_probable_muerte: str


class ClientStatisticsResponse(BaseModel):
    """Age statistics over all registered clients."""
    promedio_edad: float
    desviacion_estandar: float


class ValidationErrorResponse(BaseModel):
    """Body of a rejected create request: messages per failing field."""
    errors: dict[str, list[str]]


class MessageResponse(BaseModel):
    """Plain message body, used for the empty-store response."""
    mensaje: str
