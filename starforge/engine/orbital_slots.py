"""Orbital slot allocation from a system's starter budget.

The main star's orbital starter s (clamped to 1-8) bounds everything else
in the system:

- planets: count in [0, max(0, 9 - s)], rings s, s+1, ... up to 8
- asteroids: same count cap, rings s + 0.5, s + 1.5, ... up to 8.5
- moons: per planet, count in [0, min(5, 6 - s)], rings 1..n local to it

Planet rings are whole and asteroid rings are half-integers, so the two
kinds interleave and never collide.
"""

import math
from dataclasses import dataclass, field
from enum import Enum

from ..utils.constants import (
    ASTEROID_RING_OFFSET,
    MAX_ASTEROID_RING,
    MAX_MOONS_PER_PLANET,
    MAX_PLANET_RING,
    MOON_RING_CAPACITY,
    PLANET_RING_CAPACITY,
    STARTER_RANGE,
)
from ..utils.errors import domain_error
from ..utils.rng import CelestialRNG


class SlotKind(str, Enum):
    PLANET = "planet"
    ASTEROID = "asteroid"
    MOON = "moon"


@dataclass(frozen=True)
class OrbitalSlot:
    kind: SlotKind
    ring: float


@dataclass(frozen=True)
class PlannedPlanet:
    """A planet slot together with the moon slots it hosts."""

    slot: OrbitalSlot
    moons: tuple[OrbitalSlot, ...] = ()


@dataclass(frozen=True)
class SystemSlotPlan:
    """Validated slot assignments for one system.

    Construction fails with DOMAIN.INVALID_SLOT_PLAN when any ring is
    duplicated, of the wrong kind, or outside the bounds the starter allows.
    """

    starter: int
    planets: tuple[PlannedPlanet, ...] = field(default_factory=tuple)
    asteroids: tuple[OrbitalSlot, ...] = field(default_factory=tuple)

    def __post_init__(self):
        low, high = STARTER_RANGE
        if not low <= self.starter <= high:
            raise domain_error("DOMAIN.INVALID_SLOT_PLAN", reason=f"starter {self.starter}")

        planet_rings = [p.slot.ring for p in self.planets]
        self._check_unique(planet_rings, "planet")
        for planned in self.planets:
            ring = planned.slot.ring
            if planned.slot.kind != SlotKind.PLANET or ring != int(ring):
                raise domain_error("DOMAIN.INVALID_SLOT_PLAN", reason=f"planet ring {ring}")
            if not self.starter <= ring <= MAX_PLANET_RING:
                raise domain_error("DOMAIN.INVALID_SLOT_PLAN", reason=f"planet ring {ring}")
            self._check_moons(planned.moons)

        asteroid_rings = [a.ring for a in self.asteroids]
        self._check_unique(asteroid_rings, "asteroid")
        for slot in self.asteroids:
            offset = slot.ring - self.starter - ASTEROID_RING_OFFSET
            if slot.kind != SlotKind.ASTEROID or offset < 0 or offset != int(offset):
                raise domain_error("DOMAIN.INVALID_SLOT_PLAN", reason=f"asteroid ring {slot.ring}")
            if slot.ring > MAX_ASTEROID_RING:
                raise domain_error("DOMAIN.INVALID_SLOT_PLAN", reason=f"asteroid ring {slot.ring}")

    def _check_moons(self, moons: tuple[OrbitalSlot, ...]) -> None:
        self._check_unique([m.ring for m in moons], "moon")
        if len(moons) > max_moons(self.starter):
            raise domain_error("DOMAIN.INVALID_SLOT_PLAN", reason=f"{len(moons)} moons")
        for slot in moons:
            if slot.kind != SlotKind.MOON or not 1 <= slot.ring <= MAX_MOONS_PER_PLANET:
                raise domain_error("DOMAIN.INVALID_SLOT_PLAN", reason=f"moon ring {slot.ring}")

    @staticmethod
    def _check_unique(rings: list[float], kind: str) -> None:
        if len(rings) != len(set(rings)):
            raise domain_error("DOMAIN.INVALID_SLOT_PLAN", reason=f"duplicate {kind} ring")

    @property
    def slots(self) -> list[OrbitalSlot]:
        """Every slot in the plan, planets (with their moons) first."""
        result: list[OrbitalSlot] = []
        for planned in self.planets:
            result.append(planned.slot)
            result.extend(planned.moons)
        result.extend(self.asteroids)
        return result


def normalize_starter(value: float) -> int:
    """Round half up, then clamp into the 1-8 starter range."""
    low, high = STARTER_RANGE
    return max(low, min(high, math.floor(value + 0.5)))


def max_planets(starter: int) -> int:
    return max(0, PLANET_RING_CAPACITY - starter)


def max_asteroids(starter: int) -> int:
    return max(0, PLANET_RING_CAPACITY - starter)


def max_moons(starter: int) -> int:
    return max(0, min(MAX_MOONS_PER_PLANET, MOON_RING_CAPACITY - starter))


class OrbitalSlotAllocator:
    """Draw body counts from the starter budget and assign their rings."""

    def __init__(self, rng: CelestialRNG):
        self.rng = rng

    def allocate(self, starter: float) -> SystemSlotPlan:
        """Build the slot plan for a system whose main star has this starter.

        Args:
            starter: Raw orbital starter of the main star; normalized first

        Returns:
            Validated SystemSlotPlan
        """
        starter = normalize_starter(starter)

        planets = []
        for p in range(self.rng.randint(0, max_planets(starter))):
            ring = starter + p
            if ring > MAX_PLANET_RING:
                break
            moon_count = self.rng.randint(0, max_moons(starter))
            moons = tuple(OrbitalSlot(SlotKind.MOON, m) for m in range(1, moon_count + 1))
            planets.append(PlannedPlanet(OrbitalSlot(SlotKind.PLANET, ring), moons))

        asteroids = []
        for a in range(self.rng.randint(0, max_asteroids(starter))):
            ring = starter + ASTEROID_RING_OFFSET + a
            if ring > MAX_ASTEROID_RING:
                break
            asteroids.append(OrbitalSlot(SlotKind.ASTEROID, ring))

        return SystemSlotPlan(starter=starter, planets=tuple(planets), asteroids=tuple(asteroids))
