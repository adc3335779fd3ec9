"""Moon aggregate."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..utils.constants import (
    MOON_GRAVITY,
    MOON_MASS,
    MOON_RADIUS,
    MOON_SIZE_MASS,
    MOON_SIZE_RADIUS,
    MOON_TEMPERATURE,
)
from ..utils.errors import domain_error
from ..utils.ids import ensure_id
from ..utils.naming import NameGenerator, is_valid_celestial_name
from ..utils.rng import CelestialRNG
from .values import coerce_enum, derive_body_physics, ensure_positive, is_finite_number

VALUE_ERROR = "DOMAIN.INVALID_MOON_VALUE"
LUNAR_REFERENCE = (MOON_MASS, MOON_RADIUS, MOON_GRAVITY)


class MoonSize(str, Enum):
    DWARF = "dwarf"
    MEDIUM = "medium"
    GIANT = "giant"


@dataclass
class Moon:
    """A moon orbiting a planet.

    Moon rings are numbered per planet, independently of the system's
    planetary rings. Mass and radius are relative to Earth's moon.
    """

    id: str
    planet_id: str
    name: str
    orbital: int  # ring index local to the planet, > 0
    size: MoonSize
    relative_mass: float
    relative_radius: float
    temperature: float
    absolute_mass: float = field(init=False)
    absolute_radius: float = field(init=False)
    gravity: float = field(init=False)

    def __post_init__(self):
        """Validate moon data and derive physical quantities."""
        self.id = ensure_id(self.id)
        self.planet_id = ensure_id(self.planet_id)
        self.name = _validate_name(self.name)
        self.orbital = _validate_orbital(self.orbital)
        self.size = coerce_enum(MoonSize, self.size, "DOMAIN.INVALID_MOON_SIZE", "size")
        ensure_positive(VALUE_ERROR, "relative_mass", self.relative_mass)
        ensure_positive(VALUE_ERROR, "relative_radius", self.relative_radius)
        ensure_positive(VALUE_ERROR, "temperature", self.temperature)
        self.absolute_mass, self.absolute_radius, self.gravity = derive_body_physics(
            self.relative_mass, self.relative_radius, LUNAR_REFERENCE
        )

    @classmethod
    def create(
        cls,
        planet_id: str,
        orbital: int,
        rng: CelestialRNG,
        *,
        id: str | None = None,
        name: str | None = None,
        size: MoonSize | str = MoonSize.MEDIUM,
        relative_mass: float | None = None,
        relative_radius: float | None = None,
        temperature: float | None = None,
    ) -> "Moon":
        size = coerce_enum(MoonSize, size, "DOMAIN.INVALID_MOON_SIZE", "size")
        if relative_mass is None:
            relative_mass = rng.uniform(*MOON_SIZE_MASS[size.value])
        if relative_radius is None:
            relative_radius = rng.uniform(*MOON_SIZE_RADIUS[size.value])
        if temperature is None:
            temperature = rng.uniform(*MOON_TEMPERATURE)

        return cls(
            id=id,
            planet_id=planet_id,
            name=name if name is not None else NameGenerator(rng).generate(),
            orbital=orbital,
            size=size,
            relative_mass=relative_mass,
            relative_radius=relative_radius,
            temperature=temperature,
        )

    @classmethod
    def rehydrate(cls, record: dict[str, Any]) -> "Moon":
        return cls(
            id=record["id"],
            planet_id=record["planet_id"],
            name=record["name"],
            orbital=record["orbital"],
            size=record["size"],
            relative_mass=record["relative_mass"],
            relative_radius=record["relative_radius"],
            temperature=record["temperature"],
        )

    def rename(self, value: str) -> None:
        self.name = _validate_name(value)

    def change_size(self, value: MoonSize | str) -> None:
        self.size = coerce_enum(MoonSize, value, "DOMAIN.INVALID_MOON_SIZE", "size")

    def change_orbital(self, value: int) -> None:
        self.orbital = _validate_orbital(value)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "planet_id": self.planet_id,
            "name": self.name,
            "orbital": self.orbital,
            "size": self.size.value,
            "relative_mass": self.relative_mass,
            "absolute_mass": self.absolute_mass,
            "relative_radius": self.relative_radius,
            "absolute_radius": self.absolute_radius,
            "gravity": self.gravity,
            "temperature": self.temperature,
        }


def _validate_name(value: str) -> str:
    normalized = value.strip() if isinstance(value, str) else ""
    if not is_valid_celestial_name(normalized):
        raise domain_error("DOMAIN.INVALID_MOON_NAME", name=value)
    return normalized


def _validate_orbital(value):
    if not is_finite_number(value) or value <= 0:
        raise domain_error("DOMAIN.INVALID_MOON_ORBITAL", orbital=value)
    return value
