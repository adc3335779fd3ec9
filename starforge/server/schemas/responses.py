"""Pydantic response schemas for API endpoints."""

from datetime import datetime

from pydantic import BaseModel

from ...models import Galaxy, GalaxyTree


class GalaxyResponse(BaseModel):
    """A galaxy without its tree."""

    id: str
    ownerId: str  # noqa: N815
    name: str
    shape: str
    systemCount: int  # noqa: N815
    createdAt: datetime  # noqa: N815

    @classmethod
    def from_galaxy(cls, galaxy: Galaxy) -> "GalaxyResponse":
        return cls(
            id=galaxy.id,
            ownerId=galaxy.owner_id,
            name=galaxy.name,
            shape=galaxy.shape.value,
            systemCount=galaxy.system_count,
            createdAt=galaxy.created_at,
        )


class GalaxyTreeResponse(BaseModel):
    """A galaxy with every system and body under it."""

    galaxy: GalaxyResponse
    counts: dict[str, int]
    systems: list[dict]

    @classmethod
    def from_tree(cls, tree: GalaxyTree) -> "GalaxyTreeResponse":
        return cls(
            galaxy=GalaxyResponse.from_galaxy(tree.galaxy),
            counts=tree.counts(),
            systems=[node.to_dict() for node in tree.systems],
        )


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    details: dict | None = None
