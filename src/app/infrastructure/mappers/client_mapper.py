from src.shared.database.base_mapper import BaseEntityMapper
from src.app.core.domain.models import Client, NewClient
from src.app.infrastructure.entities.client_entity import ClientEntity


class ClientMapper(BaseEntityMapper[Client, ClientEntity]):
    """Mapper for converting between Client domain models and ClientEntity."""

    @staticmethod
    def to_entity(model_instance: NewClient) -> ClientEntity:
        """Convert a NewClient or Client (domain model) to ClientEntity (database entity)."""
        entity = ClientEntity(
            first_name=model_instance.first_name,
            last_name=model_instance.last_name,
            age=model_instance.age,
            birth_date=model_instance.birth_date,
            created_at=model_instance.created_at,
        )
        if isinstance(model_instance, Client):
            entity.id = model_instance.id
        return entity

    @staticmethod
    def to_model(entity: ClientEntity) -> Client:
        """Convert a ClientEntity (database entity) to Client (domain model)."""
        return Client(
            id=entity.id,
            first_name=entity.first_name,
            last_name=entity.last_name,
            age=entity.age,
            birth_date=entity.birth_date,
            created_at=entity.created_at,
        )
