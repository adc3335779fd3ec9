"""Stellar classification: star types, classes, colors and their ranges.

A star's type fully determines its spectral class, and the class fully
determines its color. STELLAR_PROFILES is the single lookup table for both
mappings and for the class-conditioned physical ranges, so consistency
checks elsewhere reduce to comparing against one profile.
"""

from dataclasses import dataclass
from enum import Enum

from ..utils.constants import (
    GRAVITATIONAL_CONSTANT,
    NEUTRON_STAR_BASE_RADIUS_KM,
    NEUTRON_STAR_RADIUS_RANGE_KM,
    NEUTRON_STAR_RADIUS_SLOPE_KM,
    NEUTRON_STAR_REFERENCE_MASS,
    SPEED_OF_LIGHT,
    SUN_MASS,
    SUN_RADIUS,
    SUN_SURFACE_GRAVITY,
)
from ..utils.rng import CelestialRNG


class StarType(str, Enum):
    BLUE_SUPERGIANT = "Blue supergiant"
    BLUE_GIANT = "Blue giant"
    WHITE_DWARF = "White dwarf"
    BROWN_DWARF = "Brown dwarf"
    YELLOW_DWARF = "Yellow dwarf"
    SUBDWARF = "Subdwarf"
    RED_DWARF = "Red dwarf"
    BLACK_HOLE = "Black hole"
    NEUTRON_STAR = "Neutron star"


class StarClass(str, Enum):
    O = "O"  # noqa: E741
    B = "B"
    A = "A"
    F = "F"
    G = "G"
    K = "K"
    M = "M"
    BH = "BH"
    N = "N"


class StarColor(str, Enum):
    BLUE = "blue"
    BLUE_WHITE = "blue-white"
    WHITE = "white"
    YELLOW_WHITE = "yellow-white"
    YELLOW = "yellow"
    ORANGE = "orange"
    RED = "red"
    BLACK = "black"


@dataclass(frozen=True)
class ClassRanges:
    """Physical ranges for one spectral class.

    radius is None for compact objects whose radius is computed from mass.
    """

    mass: tuple[float, float]  # solar masses
    radius: tuple[float, float] | None  # solar radii
    temperature: tuple[float, float]  # kelvin
    color: StarColor


CLASS_RANGES: dict[StarClass, ClassRanges] = {
    StarClass.O: ClassRanges((16, 60), (6, 15), (30000, 50000), StarColor.BLUE),
    StarClass.B: ClassRanges((2.1, 16), (1.8, 6), (10000, 30000), StarColor.BLUE_WHITE),
    StarClass.A: ClassRanges((1.4, 2.1), (1.4, 2.5), (7500, 10000), StarColor.WHITE),
    StarClass.F: ClassRanges((1.04, 1.4), (1.15, 1.4), (6000, 7500), StarColor.YELLOW_WHITE),
    StarClass.G: ClassRanges((0.8, 1.04), (0.96, 1.15), (5200, 6000), StarColor.YELLOW),
    StarClass.K: ClassRanges((0.45, 0.8), (0.7, 0.96), (3700, 5200), StarColor.ORANGE),
    StarClass.M: ClassRanges((0.08, 0.45), (0.1, 0.7), (2400, 3700), StarColor.RED),
    StarClass.BH: ClassRanges((3, 20), None, (1, 100), StarColor.BLACK),
    StarClass.N: ClassRanges((1.1, 2.1), None, (500000, 1000000), StarColor.BLUE_WHITE),
}


@dataclass(frozen=True)
class StellarProfile:
    """Everything a star type determines."""

    star_type: StarType
    star_class: StarClass
    weight: float  # sampling probability

    @property
    def ranges(self) -> ClassRanges:
        return CLASS_RANGES[self.star_class]

    @property
    def color(self) -> StarColor:
        return self.ranges.color

    @property
    def is_compact(self) -> bool:
        """Black holes and neutron stars: radius derived from mass."""
        return self.ranges.radius is None


STELLAR_PROFILES: dict[StarType, StellarProfile] = {
    profile.star_type: profile
    for profile in (
        StellarProfile(StarType.BLUE_SUPERGIANT, StarClass.O, 0.043),
        StellarProfile(StarType.BLUE_GIANT, StarClass.B, 0.05),
        StellarProfile(StarType.WHITE_DWARF, StarClass.A, 0.074),
        StellarProfile(StarType.BROWN_DWARF, StarClass.M, 0.06),
        StellarProfile(StarType.YELLOW_DWARF, StarClass.G, 0.277),
        StellarProfile(StarType.SUBDWARF, StarClass.K, 0.3),
        StellarProfile(StarType.RED_DWARF, StarClass.M, 0.2445),
        StellarProfile(StarType.BLACK_HOLE, StarClass.BH, 0.05333),
        StellarProfile(StarType.NEUTRON_STAR, StarClass.N, 0.05117),
    )
}


def profile_for(star_type: StarType) -> StellarProfile:
    return STELLAR_PROFILES[StarType(star_type)]


def valid_triples() -> set[tuple[StarType, StarClass, StarColor]]:
    """All (type, class, color) combinations a star may have."""
    return {(p.star_type, p.star_class, p.color) for p in STELLAR_PROFILES.values()}


def sample_star_type(rng: CelestialRNG, exclude: tuple = ()) -> StarType:
    """Weighted draw from the star type table.

    Weights are renormalized over the remaining types when some are excluded.

    Args:
        rng: Random source
        exclude: Star types (or their string values) that may not be drawn

    Returns:
        Sampled StarType
    """
    excluded = {StarType(t) for t in exclude}
    candidates = [p for p in STELLAR_PROFILES.values() if p.star_type not in excluded]
    total = sum(p.weight for p in candidates)
    roll = rng.roll(total)
    cursor = 0.0
    for profile in candidates:
        cursor += profile.weight
        if roll <= cursor:
            return profile.star_type
    return candidates[-1].star_type


def schwarzschild_radius(absolute_mass: float) -> float:
    """Event horizon radius in metres: 2GM / c^2."""
    return 2 * GRAVITATIONAL_CONSTANT * absolute_mass / SPEED_OF_LIGHT**2


def neutron_star_radius(absolute_mass: float) -> float:
    """Empirical radius in metres, clamped to 10-14 km."""
    solar_masses = absolute_mass / SUN_MASS
    radius_km = NEUTRON_STAR_BASE_RADIUS_KM - (
        solar_masses - NEUTRON_STAR_REFERENCE_MASS
    ) * NEUTRON_STAR_RADIUS_SLOPE_KM
    low, high = NEUTRON_STAR_RADIUS_RANGE_KM
    return min(high, max(low, radius_km)) * 1000


@dataclass(frozen=True)
class StellarPhysics:
    """Derived physical quantities of a star."""

    relative_mass: float
    absolute_mass: float
    relative_radius: float
    absolute_radius: float
    gravity: float


def derive_stellar_physics(
    star_class: StarClass, relative_mass: float, relative_radius: float | None
) -> StellarPhysics:
    """Derive absolute values and surface gravity for a star.

    Black holes use the Schwarzschild radius, neutron stars the empirical
    mass-scaled radius; relative_radius is ignored for both. Every other
    class converts relative_radius through the solar radius.
    """
    absolute_mass = relative_mass * SUN_MASS
    if star_class == StarClass.BH:
        absolute_radius = schwarzschild_radius(absolute_mass)
        relative_radius = absolute_radius / SUN_RADIUS
    elif star_class == StarClass.N:
        absolute_radius = neutron_star_radius(absolute_mass)
        relative_radius = absolute_radius / SUN_RADIUS
    else:
        absolute_radius = relative_radius * SUN_RADIUS
    gravity = SUN_SURFACE_GRAVITY * (relative_mass / (relative_radius * relative_radius))
    return StellarPhysics(
        relative_mass=relative_mass,
        absolute_mass=absolute_mass,
        relative_radius=relative_radius,
        absolute_radius=absolute_radius,
        gravity=gravity,
    )
