"""Domain models used in business logic."""
from datetime import date, datetime

from pydantic import BaseModel, Field


class NewClient(BaseModel):
    """A validated, normalized client that has not been stored yet."""
    first_name: str = Field(..., min_length=1, description="Normalized first name")
    last_name: str = Field(..., min_length=1, description="Normalized last name")
    age: int = Field(..., ge=0, description="Age in whole years")
    birth_date: date = Field(..., description="Birth date, consistent with age")
    created_at: datetime = Field(..., description="Creation timestamp")


class Client(NewClient):
    """Domain model for a stored Client used in business logic."""
    id: int = Field(..., description="Identifier assigned by the store on insert")

    model_config = {"from_attributes": True}


class ProjectedClient(BaseModel):
    """A stored client together with its projected date of death."""
    client: Client
    projected_death_date: date


class AgeStatistics(BaseModel):
    """Aggregate statistics over the ages of all stored clients."""
    mean_age: float = Field(..., description="Arithmetic mean, rounded to 2 decimals")
    std_dev: float = Field(..., ge=0, description="Population standard deviation, rounded to 2 decimals")
