"""Pydantic DTOs (Data Transfer Objects) for the Service feature."""

from pydantic import BaseModel, Field


class ServiceCreate(BaseModel):
    """Schema for adding a service to the menu."""

    name: str = Field(..., min_length=1, max_length=255, examples=["Corte Masculino"])
    price: float = Field(..., ge=0, examples=[25.0])
    duration: int = Field(..., gt=0, description="Duration in minutes", examples=[30])
    description: str | None = Field(None, examples=["Corte na tesoura e máquina"])


class ServiceUpdate(BaseModel):
    """Schema for updating an existing service — all fields optional."""

    name: str | None = Field(None, min_length=1, max_length=255)
    price: float | None = Field(None, ge=0)
    duration: int | None = Field(None, gt=0)
    description: str | None = None


class ServiceResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    name: str
    price: float
    duration: int
    description: str | None

    model_config = {"from_attributes": True}
