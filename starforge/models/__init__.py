"""Celestial aggregates."""

from .asteroid import Asteroid, AsteroidSize, AsteroidType
from .classification import (
    STELLAR_PROFILES,
    StarClass,
    StarColor,
    StarType,
    StellarProfile,
    profile_for,
    sample_star_type,
    valid_triples,
)
from .galaxy import Galaxy, GalaxyShape
from .moon import Moon, MoonSize
from .planet import Planet, PlanetBiome, PlanetSize, PlanetType
from .star import Star
from .system import Position, System
from .tree import GalaxyTree, PlanetNode, SystemNode

__all__ = [
    "Asteroid",
    "AsteroidSize",
    "AsteroidType",
    "STELLAR_PROFILES",
    "StarClass",
    "StarColor",
    "StarType",
    "StellarProfile",
    "profile_for",
    "sample_star_type",
    "valid_triples",
    "Galaxy",
    "GalaxyShape",
    "Moon",
    "MoonSize",
    "Planet",
    "PlanetBiome",
    "PlanetSize",
    "PlanetType",
    "Star",
    "Position",
    "System",
    "GalaxyTree",
    "PlanetNode",
    "SystemNode",
]
