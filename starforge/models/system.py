"""System aggregate and its position value."""

from dataclasses import dataclass
from typing import Any

from ..utils.errors import domain_error
from ..utils.ids import ensure_id
from ..utils.naming import NameGenerator, is_valid_celestial_name
from ..utils.rng import CelestialRNG
from .values import is_finite_number


@dataclass(frozen=True)
class Position:
    """3-D coordinates of a system inside its galaxy."""

    x: float
    y: float
    z: float

    def __post_init__(self):
        if not all(is_finite_number(v) for v in (self.x, self.y, self.z)):
            raise domain_error(
                "DOMAIN.INVALID_SYSTEM_POSITION", position=(self.x, self.y, self.z)
            )

    @classmethod
    def from_value(cls, value) -> "Position":
        """Accept a Position, a {x, y, z} mapping or an (x, y, z) sequence."""
        if isinstance(value, Position):
            return value
        if isinstance(value, dict):
            try:
                return cls(value["x"], value["y"], value["z"])
            except KeyError:
                raise domain_error("DOMAIN.INVALID_SYSTEM_POSITION", position=value) from None
        if isinstance(value, (list, tuple)) and len(value) == 3:
            return cls(*value)
        raise domain_error("DOMAIN.INVALID_SYSTEM_POSITION", position=value)

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y, "z": self.z}


@dataclass
class System:
    """A star system.

    Its position comes from the galaxy shape positioner at creation and only
    changes through move().
    """

    id: str
    galaxy_id: str
    name: str
    position: Position

    def __post_init__(self):
        self.id = ensure_id(self.id)
        self.galaxy_id = ensure_id(self.galaxy_id)
        self.name = _validate_name(self.name)
        self.position = Position.from_value(self.position)

    @classmethod
    def create(
        cls,
        galaxy_id: str,
        position: Position,
        rng: CelestialRNG,
        *,
        id: str | None = None,
        name: str | None = None,
    ) -> "System":
        return cls(
            id=id,
            galaxy_id=galaxy_id,
            name=name if name is not None else NameGenerator(rng).generate(),
            position=position,
        )

    @classmethod
    def rehydrate(cls, record: dict[str, Any]) -> "System":
        return cls(
            id=record["id"],
            galaxy_id=record["galaxy_id"],
            name=record["name"],
            position=record["position"],
        )

    def rename(self, value: str) -> None:
        self.name = _validate_name(value)

    def move(self, position) -> None:
        self.position = Position.from_value(position)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "galaxy_id": self.galaxy_id,
            "name": self.name,
            "position": self.position.to_dict(),
        }


def _validate_name(value: str) -> str:
    normalized = value.strip() if isinstance(value, str) else ""
    if not is_valid_celestial_name(normalized):
        raise domain_error("DOMAIN.INVALID_SYSTEM_NAME", name=value)
    return normalized
