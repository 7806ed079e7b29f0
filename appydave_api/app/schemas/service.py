"""
Pydantic schemas for service records.

A service record is a short ``name`` label with a free text
``description``.  Both are required and must contain more than
whitespace; neither is unique.  Records are append-only, so there is
no update schema.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ServiceCreate(BaseModel):
    """Schema for creating a new service record."""

    name: str = Field(..., description="Short label for the service")
    description: str = Field(..., description="Free text describing the service")

    @field_validator("name", "description")
    @classmethod
    def not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value


class ServiceRead(BaseModel):
    """Schema for reading a service record."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str
