"""Galaxy aggregate."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from ..utils.constants import MIN_SYSTEM_COUNT
from ..utils.errors import domain_error
from ..utils.ids import ensure_id
from ..utils.naming import is_valid_galaxy_name
from ..utils.rng import CelestialRNG
from .values import coerce_enum, is_finite_number


class GalaxyShape(str, Enum):
    SPHERICAL = "spherical"
    THREE_ARM_SPIRAL = "3-arm spiral"
    FIVE_ARM_SPIRAL = "5-arm spiral"
    IRREGULAR = "irregular"

    @property
    def arm_count(self) -> int:
        """Number of spiral arms, 0 for non-spiral shapes."""
        return {GalaxyShape.THREE_ARM_SPIRAL: 3, GalaxyShape.FIVE_ARM_SPIRAL: 5}.get(self, 0)


@dataclass
class Galaxy:
    """Root of a generated tree.

    Systems are not held here; they are found through the system
    repository by galaxy id.
    """

    id: str
    owner_id: str
    name: str
    shape: GalaxyShape
    system_count: int
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        """Validate galaxy data after initialization."""
        self.id = ensure_id(self.id)
        self.owner_id = ensure_id(self.owner_id)
        self.name = _validate_name(self.name)
        self.shape = _validate_shape(self.shape)
        self.system_count = _clamp_system_count(self.system_count)
        if isinstance(self.created_at, str):
            self.created_at = datetime.fromisoformat(self.created_at)
        if not isinstance(self.created_at, datetime):
            raise domain_error("DOMAIN.INVALID_GALAXY_VALUE", field="created_at")

    @classmethod
    def create(
        cls,
        owner_id: str,
        name: str,
        rng: CelestialRNG,
        *,
        id: str | None = None,
        shape: GalaxyShape | str | None = None,
        system_count: int = MIN_SYSTEM_COUNT,
    ) -> "Galaxy":
        """Create a galaxy, picking a shape uniformly when none is given."""
        if shape is None:
            shape = rng.choice(list(GalaxyShape))
        return cls(id=id, owner_id=owner_id, name=name, shape=shape, system_count=system_count)

    @classmethod
    def rehydrate(cls, record: dict[str, Any]) -> "Galaxy":
        return cls(
            id=record["id"],
            owner_id=record["owner_id"],
            name=record["name"],
            shape=record["shape"],
            system_count=record["system_count"],
            created_at=record["created_at"],
        )

    def rename(self, value: str) -> None:
        self.name = _validate_name(value)

    def change_shape(self, value: GalaxyShape | str) -> None:
        self.shape = _validate_shape(value)

    def change_system_count(self, value: int) -> None:
        self.system_count = _clamp_system_count(value)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "owner_id": self.owner_id,
            "name": self.name,
            "shape": self.shape.value,
            "system_count": self.system_count,
            "created_at": self.created_at.isoformat(),
        }


def _validate_name(value: str) -> str:
    normalized = value.strip() if isinstance(value, str) else ""
    if not is_valid_galaxy_name(normalized):
        raise domain_error("DOMAIN.INVALID_GALAXY_NAME", name=value)
    return normalized


def _validate_shape(value) -> GalaxyShape:
    return coerce_enum(GalaxyShape, value, "DOMAIN.INVALID_GALAXY_SHAPE", "shape")


def _clamp_system_count(value) -> int:
    if not is_finite_number(value):
        raise domain_error("DOMAIN.INVALID_GALAXY_VALUE", field="system_count")
    return max(MIN_SYSTEM_COUNT, int(value))
