"""Application configuration with structured settings groups."""
import logging
from functools import lru_cache

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


# =============================================================================
# Nested Settings Models
# =============================================================================


class ClientSettings(BaseModel):
    """
    Client registration settings.

    date_format: strftime/strptime format used to parse birth dates and to
        render every date in responses. Fixed per deployment.
    life_expectancy_years: Offset added to the birth date for the projected date of death.
    timezone: IANA timezone that defines "today" for age and birth date checks.
    """

    date_format: str = "%Y-%m-%d"
    life_expectancy_years: int = Field(default=80, ge=0)
    timezone: str = "UTC"


# =============================================================================
# Main Settings Class
# =============================================================================


class Settings(BaseSettings):
    """
    Application settings with nested configuration groups.

    Environment variables use double underscore as delimiter for nested values.
    Example: CLIENTS__DATE_FORMAT=%d-%m-%Y, CLIENTS__TIMEZONE=America/Bogota
    """

    # Application metadata
    app_name: str = "Clientes API"
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    # Prefix under which the client endpoints are mounted (e.g. "/api")
    api_prefix: str = ""

    # Database
    database_url: str = "postgresql+asyncpg://localhost/clientes"
    database_echo: bool = False

    # Nested settings groups
    clients: ClientSettings = ClientSettings()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
