"""Pydantic request schemas for API endpoints."""

from pydantic import BaseModel, Field


class CreateGalaxyRequest(BaseModel):
    """Request to create a galaxy and generate its tree."""

    ownerId: str = Field(description="UUID of the owning user")  # noqa: N815
    name: str = Field(description="Galaxy name, 5-15 characters")
    shape: str | None = Field(
        default=None,
        description="'spherical', '3-arm spiral', '5-arm spiral' or 'irregular'; random if omitted",
    )
    systemCount: int = Field(  # noqa: N815
        default=1, ge=1, le=1000, description="Number of systems to generate"
    )


class ChangeGalaxyShapeRequest(BaseModel):
    """Request to reshape a galaxy."""

    shape: str


class RenameGalaxyRequest(BaseModel):
    """Request to rename a galaxy."""

    name: str
