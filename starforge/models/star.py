"""Star aggregate."""

from dataclasses import dataclass, field
from typing import Any

from ..utils.errors import domain_error
from ..utils.ids import ensure_id
from ..utils.naming import NameGenerator, is_valid_celestial_name
from ..utils.rng import CelestialRNG
from .classification import (
    StarClass,
    StarColor,
    StarType,
    derive_stellar_physics,
    profile_for,
    sample_star_type,
)
from .values import coerce_enum, ensure_non_negative, ensure_positive

VALUE_ERROR = "DOMAIN.INVALID_STAR_VALUE"


@dataclass
class Star:
    """A star belonging to a system.

    Type, class and color are checked against the stellar profile table, and
    absolute mass, absolute radius and gravity are always derived from the
    relative values in __post_init__. For black holes and neutron stars the
    supplied relative_radius is ignored and replaced by the mass-derived one.
    """

    id: str
    system_id: str
    name: str
    star_type: StarType
    star_class: StarClass
    color: StarColor
    surface_temperature: float  # kelvin
    relative_mass: float  # solar masses
    relative_radius: float | None  # solar radii (derived for compact stars)
    is_main: bool = True
    orbital: int = 0  # 0 for the primary, 1 for companions
    orbital_starter: int = 0  # capacity consumed by this star
    absolute_mass: float = field(init=False)  # kg
    absolute_radius: float = field(init=False)  # m
    gravity: float = field(init=False)  # m/s^2

    def __post_init__(self):
        """Validate classification and derive physical quantities."""
        self.id = ensure_id(self.id)
        self.system_id = ensure_id(self.system_id)
        self.name = _validate_name(self.name)

        self.star_type = coerce_enum(StarType, self.star_type, "DOMAIN.INVALID_STAR_TYPE", "type")
        self.star_class = coerce_enum(
            StarClass, self.star_class, "DOMAIN.INVALID_STAR_CLASS", "star_class"
        )
        self.color = coerce_enum(StarColor, self.color, "DOMAIN.INVALID_STAR_COLOR", "color")

        profile = profile_for(self.star_type)
        if self.star_class != profile.star_class:
            raise domain_error("DOMAIN.INVALID_STAR_CLASS", star_class=self.star_class.value)
        if self.color != profile.color:
            raise domain_error("DOMAIN.INVALID_STAR_COLOR", color=self.color.value)

        ensure_positive(VALUE_ERROR, "relative_mass", self.relative_mass)
        ensure_positive(VALUE_ERROR, "surface_temperature", self.surface_temperature)
        if not profile.is_compact:
            ensure_positive(VALUE_ERROR, "relative_radius", self.relative_radius)
        ensure_non_negative(VALUE_ERROR, "orbital", self.orbital)
        ensure_non_negative(VALUE_ERROR, "orbital_starter", self.orbital_starter)

        physics = derive_stellar_physics(self.star_class, self.relative_mass, self.relative_radius)
        ensure_positive(VALUE_ERROR, "relative_radius", physics.relative_radius)
        self.relative_radius = physics.relative_radius
        self.absolute_mass = physics.absolute_mass
        self.absolute_radius = physics.absolute_radius
        self.gravity = physics.gravity

    @classmethod
    def create(
        cls,
        system_id: str,
        rng: CelestialRNG,
        *,
        id: str | None = None,
        name: str | None = None,
        star_type: StarType | str | None = None,
        star_class: StarClass | str | None = None,
        color: StarColor | str | None = None,
        surface_temperature: float | None = None,
        relative_mass: float | None = None,
        relative_radius: float | None = None,
        is_main: bool = True,
        orbital: int = 0,
        orbital_starter: int = 0,
    ) -> "Star":
        """Create a star, sampling whatever is not supplied.

        The type is drawn from the weighted table when omitted. Class and
        color default to the values the type determines; supplying
        different ones raises. Mass, temperature and (for non-compact stars)
        radius are drawn uniformly from the class ranges.

        Raises:
            DomainError: On any invalid or inconsistent value
        """
        if star_type is None:
            star_type = sample_star_type(rng)
        star_type = coerce_enum(StarType, star_type, "DOMAIN.INVALID_STAR_TYPE", "type")
        profile = profile_for(star_type)
        ranges = profile.ranges

        if relative_mass is None:
            relative_mass = rng.uniform(*ranges.mass)
        if surface_temperature is None:
            surface_temperature = rng.uniform(*ranges.temperature)
        if relative_radius is None and not profile.is_compact:
            relative_radius = rng.uniform(*ranges.radius)

        return cls(
            id=id,
            system_id=system_id,
            name=name if name is not None else NameGenerator(rng).generate(),
            star_type=star_type,
            star_class=star_class if star_class is not None else profile.star_class,
            color=color if color is not None else profile.color,
            surface_temperature=surface_temperature,
            relative_mass=relative_mass,
            relative_radius=relative_radius,
            is_main=is_main,
            orbital=orbital,
            orbital_starter=orbital_starter,
        )

    @classmethod
    def rehydrate(cls, record: dict[str, Any]) -> "Star":
        """Rebuild a stored star.

        Stored absolute values and gravity are not trusted; they are derived
        again from relative mass and radius.
        """
        return cls(
            id=record["id"],
            system_id=record["system_id"],
            name=record["name"],
            star_type=record["star_type"],
            star_class=record["star_class"],
            color=record["color"],
            surface_temperature=record["surface_temperature"],
            relative_mass=record["relative_mass"],
            relative_radius=record.get("relative_radius"),
            is_main=bool(record.get("is_main", True)),
            orbital=record.get("orbital", 0),
            orbital_starter=record.get("orbital_starter", 0),
        )

    def change_main_status(self, value: bool) -> None:
        self.is_main = bool(value)

    def rename(self, value: str) -> None:
        self.name = _validate_name(value)

    def change_orbital(self, value: int) -> None:
        self.orbital = ensure_non_negative(VALUE_ERROR, "orbital", value)

    def change_orbital_starter(self, value: int) -> None:
        self.orbital_starter = ensure_non_negative(VALUE_ERROR, "orbital_starter", value)

    @property
    def is_compact(self) -> bool:
        return profile_for(self.star_type).is_compact

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "system_id": self.system_id,
            "name": self.name,
            "star_type": self.star_type.value,
            "star_class": self.star_class.value,
            "color": self.color.value,
            "surface_temperature": self.surface_temperature,
            "relative_mass": self.relative_mass,
            "absolute_mass": self.absolute_mass,
            "relative_radius": self.relative_radius,
            "absolute_radius": self.absolute_radius,
            "gravity": self.gravity,
            "is_main": self.is_main,
            "orbital": self.orbital,
            "orbital_starter": self.orbital_starter,
        }


def _validate_name(value: str) -> str:
    normalized = value.strip() if isinstance(value, str) else ""
    if not is_valid_celestial_name(normalized):
        raise domain_error(VALUE_ERROR, field="name")
    return normalized
