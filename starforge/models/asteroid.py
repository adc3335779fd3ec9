"""Asteroid aggregate."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..utils.errors import domain_error
from ..utils.ids import ensure_id
from ..utils.naming import generate_special_name, is_special_name
from ..utils.rng import CelestialRNG
from .values import coerce_enum, ensure_ring


class AsteroidType(str, Enum):
    SINGLE = "single"
    CLUSTER = "cluster"


class AsteroidSize(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    BIG = "big"
    MASSIVE = "massive"


@dataclass
class Asteroid:
    """An asteroid (or cluster) on a half-integer ring between planets.

    Asteroids are always named with a catalog designation such as "KOI-317".
    """

    id: str
    system_id: str
    name: str
    orbital: float  # e.g. 2.5, 3.5
    asteroid_type: AsteroidType = AsteroidType.SINGLE
    size: AsteroidSize = AsteroidSize.SMALL

    def __post_init__(self):
        """Validate asteroid data after initialization."""
        self.id = ensure_id(self.id)
        self.system_id = ensure_id(self.system_id)
        self.name = _validate_name(self.name)
        self.orbital = ensure_ring("DOMAIN.INVALID_ASTEROID_ORBITAL", self.orbital, half=True)
        self.asteroid_type = coerce_enum(
            AsteroidType, self.asteroid_type, "DOMAIN.INVALID_ASTEROID_TYPE", "type"
        )
        self.size = coerce_enum(AsteroidSize, self.size, "DOMAIN.INVALID_ASTEROID_SIZE", "size")

    @classmethod
    def create(
        cls,
        system_id: str,
        orbital: float,
        rng: CelestialRNG,
        *,
        id: str | None = None,
        name: str | None = None,
        asteroid_type: AsteroidType | str = AsteroidType.SINGLE,
        size: AsteroidSize | str = AsteroidSize.SMALL,
    ) -> "Asteroid":
        return cls(
            id=id,
            system_id=system_id,
            name=name if name is not None else generate_special_name(rng),
            orbital=orbital,
            asteroid_type=asteroid_type,
            size=size,
        )

    @classmethod
    def rehydrate(cls, record: dict[str, Any]) -> "Asteroid":
        return cls(
            id=record["id"],
            system_id=record["system_id"],
            name=record["name"],
            orbital=record["orbital"],
            asteroid_type=record["asteroid_type"],
            size=record["size"],
        )

    def rename(self, value: str) -> None:
        self.name = _validate_name(value)

    def change_type(self, value: AsteroidType | str) -> None:
        self.asteroid_type = coerce_enum(
            AsteroidType, value, "DOMAIN.INVALID_ASTEROID_TYPE", "type"
        )

    def change_size(self, value: AsteroidSize | str) -> None:
        self.size = coerce_enum(AsteroidSize, value, "DOMAIN.INVALID_ASTEROID_SIZE", "size")

    def change_orbital(self, value: float) -> None:
        self.orbital = ensure_ring("DOMAIN.INVALID_ASTEROID_ORBITAL", value, half=True)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "system_id": self.system_id,
            "name": self.name,
            "orbital": self.orbital,
            "asteroid_type": self.asteroid_type.value,
            "size": self.size.value,
        }


def _validate_name(value: str) -> str:
    normalized = value.strip() if isinstance(value, str) else ""
    if not is_special_name(normalized):
        raise domain_error("DOMAIN.INVALID_ASTEROID_NAME", name=value)
    return normalized
