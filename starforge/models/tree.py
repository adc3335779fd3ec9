"""Read-side snapshot of a whole galaxy tree."""

from dataclasses import dataclass, field
from typing import Any

from .asteroid import Asteroid
from .galaxy import Galaxy
from .moon import Moon
from .planet import Planet
from .star import Star
from .system import System


@dataclass
class PlanetNode:
    planet: Planet
    moons: list[Moon] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        data = self.planet.to_dict()
        data["moons"] = [moon.to_dict() for moon in self.moons]
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PlanetNode":
        return cls(
            planet=Planet.rehydrate(data),
            moons=[Moon.rehydrate(m) for m in data.get("moons", [])],
        )


@dataclass
class SystemNode:
    system: System
    stars: list[Star] = field(default_factory=list)
    planets: list[PlanetNode] = field(default_factory=list)
    asteroids: list[Asteroid] = field(default_factory=list)

    @property
    def main_star(self) -> Star | None:
        return next((s for s in self.stars if s.is_main), None)

    def to_dict(self) -> dict[str, Any]:
        data = self.system.to_dict()
        data["stars"] = [s.to_dict() for s in self.stars]
        data["planets"] = [p.to_dict() for p in self.planets]
        data["asteroids"] = [a.to_dict() for a in self.asteroids]
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SystemNode":
        return cls(
            system=System.rehydrate(data),
            stars=[Star.rehydrate(s) for s in data.get("stars", [])],
            planets=[PlanetNode.from_dict(p) for p in data.get("planets", [])],
            asteroids=[Asteroid.rehydrate(a) for a in data.get("asteroids", [])],
        )


@dataclass
class GalaxyTree:
    """A galaxy with every system, star, planet, moon and asteroid under it.

    Nested dictionaries from to_dict() can be fed back to from_dict(), which
    rehydrates every aggregate (and so re-derives physical quantities).
    """

    galaxy: Galaxy
    systems: list[SystemNode] = field(default_factory=list)

    def counts(self) -> dict[str, int]:
        """Number of entities of each kind in the tree."""
        planets = [p for node in self.systems for p in node.planets]
        return {
            "systems": len(self.systems),
            "stars": sum(len(node.stars) for node in self.systems),
            "planets": len(planets),
            "moons": sum(len(p.moons) for p in planets),
            "asteroids": sum(len(node.asteroids) for node in self.systems),
        }

    def to_dict(self) -> dict[str, Any]:
        data = self.galaxy.to_dict()
        data["systems"] = [node.to_dict() for node in self.systems]
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GalaxyTree":
        return cls(
            galaxy=Galaxy.rehydrate(data),
            systems=[SystemNode.from_dict(s) for s in data.get("systems", [])],
        )
