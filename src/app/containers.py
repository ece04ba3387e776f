"""Dependency injection container using dependency-injector library."""
from dependency_injector import containers, providers

from src.app.config import get_settings
from src.shared.database.database import Database, DatabaseSettings

from src.app.infrastructure.mappers.client_mapper import ClientMapper
from src.app.infrastructure.client_repository import ClientRepository

from src.app.core.services.clock import SystemClock
from src.app.core.services.client_validator import ClientValidator
from src.app.core.services.client_service import ClientService


class Container(containers.DeclarativeContainer):
    """Main application dependency injection container."""

    wiring_config = containers.WiringConfiguration(
        modules=[
            "src.app.api.clients",
        ]
    )

    # =========================================================================
    # CONFIGURATION - Singleton (loaded once, cached)
    # =========================================================================
    config = providers.Singleton(get_settings)

    # =========================================================================
    # SINGLETONS - Clock and stateless mappers (reusable across all requests)
    # =========================================================================
    clock = providers.Singleton(
        SystemClock,
        timezone=config.provided.clients.timezone,
    )

    client_mapper = providers.Singleton(ClientMapper)

    # =========================================================================
    # SINGLETON - Database (shared connection pool)
    # =========================================================================
    database_settings = providers.Singleton(
        DatabaseSettings,
        db_url=config.provided.database_url,
        echo=config.provided.database_echo,
    )

    database = providers.Singleton(
        Database,
        db_settings=database_settings,
    )

    # =========================================================================
    # FACTORIES - Repositories (per-request, share database singleton)
    # =========================================================================
    client_repository = providers.Factory(
        ClientRepository,
        db=database,
        mapper=client_mapper,
    )

    # =========================================================================
    # FACTORIES - Services
    # =========================================================================
    client_validator = providers.Factory(
        ClientValidator,
        clock=clock,
        date_format=config.provided.clients.date_format,
    )

    client_service = providers.Factory(
        ClientService,
        repository=client_repository,
        validator=client_validator,
        life_expectancy_years=config.provided.clients.life_expectancy_years,
    )
