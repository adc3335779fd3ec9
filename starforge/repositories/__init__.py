"""Repository ports and their in-memory implementation."""

from .memory import (
    InMemoryStore,
    InMemoryUnitOfWork,
    InMemoryUnitOfWorkFactory,
    build_repos,
)
from .ports import (
    AsteroidRepository,
    GalaxyRepository,
    MoonRepository,
    PlanetRepository,
    RepoBundle,
    StarRepository,
    SystemRepository,
)

__all__ = [
    "InMemoryStore",
    "InMemoryUnitOfWork",
    "InMemoryUnitOfWorkFactory",
    "build_repos",
    "AsteroidRepository",
    "GalaxyRepository",
    "MoonRepository",
    "PlanetRepository",
    "RepoBundle",
    "StarRepository",
    "SystemRepository",
]
