"""Planet aggregate."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..utils.constants import (
    EARTH_GRAVITY,
    EARTH_MASS,
    EARTH_RADIUS,
    PLANET_BIOME_TEMPERATURE,
    PLANET_SIZE_MASS,
    PLANET_SIZE_RADIUS,
)
from ..utils.errors import domain_error
from ..utils.ids import ensure_id
from ..utils.naming import NameGenerator, is_valid_celestial_name
from ..utils.rng import CelestialRNG
from .values import coerce_enum, derive_body_physics, ensure_positive, ensure_ring

VALUE_ERROR = "DOMAIN.INVALID_PLANET_VALUE"
EARTH_REFERENCE = (EARTH_MASS, EARTH_RADIUS, EARTH_GRAVITY)


class PlanetType(str, Enum):
    SOLID = "solid"
    GAS = "gas"


class PlanetSize(str, Enum):
    PROTO = "proto"
    DWARF = "dwarf"
    MEDIUM = "medium"
    GIANT = "giant"
    SUPERGIANT = "supergiant"


class PlanetBiome(str, Enum):
    TEMPERATE = "temperate"
    DESERT = "desert"
    OCEAN = "ocean"
    ICE = "ice"
    TOXIC = "toxic"
    RADIOACTIVE = "radioactive"
    CRYSTAL = "crystal"


@dataclass
class Planet:
    """A planet orbiting a system on a whole-numbered ring.

    Mass and radius are relative to Earth. Absolute values and gravity are
    derived in __post_init__ and cannot be supplied.
    """

    id: str
    system_id: str
    name: str
    orbital: int  # ring index, > 0
    planet_type: PlanetType
    size: PlanetSize
    biome: PlanetBiome
    relative_mass: float  # Earth masses
    relative_radius: float  # Earth radii
    temperature: float  # kelvin
    absolute_mass: float = field(init=False)
    absolute_radius: float = field(init=False)
    gravity: float = field(init=False)

    def __post_init__(self):
        """Validate planet data and derive physical quantities."""
        self.id = ensure_id(self.id)
        self.system_id = ensure_id(self.system_id)
        self.name = _validate_name(self.name)
        self.orbital = ensure_ring("DOMAIN.INVALID_PLANET_ORBITAL", self.orbital)
        self.planet_type = coerce_enum(
            PlanetType, self.planet_type, "DOMAIN.INVALID_PLANET_TYPE", "type"
        )
        self.size = coerce_enum(PlanetSize, self.size, "DOMAIN.INVALID_PLANET_SIZE", "size")
        self.biome = coerce_enum(PlanetBiome, self.biome, "DOMAIN.INVALID_PLANET_BIOME", "biome")
        self._derive()

    def _derive(self) -> None:
        ensure_positive(VALUE_ERROR, "relative_mass", self.relative_mass)
        ensure_positive(VALUE_ERROR, "relative_radius", self.relative_radius)
        ensure_positive(VALUE_ERROR, "temperature", self.temperature)
        self.absolute_mass, self.absolute_radius, self.gravity = derive_body_physics(
            self.relative_mass, self.relative_radius, EARTH_REFERENCE
        )

    @classmethod
    def create(
        cls,
        system_id: str,
        orbital: int,
        rng: CelestialRNG,
        *,
        id: str | None = None,
        name: str | None = None,
        planet_type: PlanetType | str = PlanetType.SOLID,
        size: PlanetSize | str = PlanetSize.MEDIUM,
        biome: PlanetBiome | str = PlanetBiome.TEMPERATE,
        relative_mass: float | None = None,
        relative_radius: float | None = None,
        temperature: float | None = None,
    ) -> "Planet":
        """Create a planet, sampling mass and radius by size and temperature by biome."""
        size = coerce_enum(PlanetSize, size, "DOMAIN.INVALID_PLANET_SIZE", "size")
        biome = coerce_enum(PlanetBiome, biome, "DOMAIN.INVALID_PLANET_BIOME", "biome")
        if relative_mass is None:
            relative_mass = rng.uniform(*PLANET_SIZE_MASS[size.value])
        if relative_radius is None:
            relative_radius = rng.uniform(*PLANET_SIZE_RADIUS[size.value])
        if temperature is None:
            temperature = rng.uniform(*PLANET_BIOME_TEMPERATURE[biome.value])

        return cls(
            id=id,
            system_id=system_id,
            name=name if name is not None else NameGenerator(rng).generate(),
            orbital=orbital,
            planet_type=planet_type,
            size=size,
            biome=biome,
            relative_mass=relative_mass,
            relative_radius=relative_radius,
            temperature=temperature,
        )

    @classmethod
    def rehydrate(cls, record: dict[str, Any]) -> "Planet":
        return cls(
            id=record["id"],
            system_id=record["system_id"],
            name=record["name"],
            orbital=record["orbital"],
            planet_type=record["planet_type"],
            size=record["size"],
            biome=record["biome"],
            relative_mass=record["relative_mass"],
            relative_radius=record["relative_radius"],
            temperature=record["temperature"],
        )

    def rename(self, value: str) -> None:
        self.name = _validate_name(value)

    def change_biome(self, value: PlanetBiome | str) -> None:
        """Switch biome; temperature is kept as is."""
        self.biome = coerce_enum(PlanetBiome, value, "DOMAIN.INVALID_PLANET_BIOME", "biome")

    def change_orbital(self, value: int) -> None:
        self.orbital = ensure_ring("DOMAIN.INVALID_PLANET_ORBITAL", value)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "system_id": self.system_id,
            "name": self.name,
            "orbital": self.orbital,
            "planet_type": self.planet_type.value,
            "size": self.size.value,
            "biome": self.biome.value,
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
        raise domain_error("DOMAIN.INVALID_PLANET_NAME", name=value)
    return normalized
