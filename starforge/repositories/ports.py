"""Repository ports consumed by the generation engine.

Each port persists one aggregate type. Implementations may be backed by a
database or, as in repositories.memory, by plain dictionaries; the engine
only relies on the methods declared here.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, Iterable, TypeVar

from ..models import Asteroid, Galaxy, Moon, Planet, Star, System

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Operations shared by every port."""

    @abstractmethod
    async def save(self, entity: T) -> T:
        """Insert or update an entity, returning it."""

    async def save_many(self, entities: Iterable[T]) -> list[T]:
        """Persist several siblings; stores without batching save one by one."""
        return [await self.save(entity) for entity in entities]

    @abstractmethod
    async def find_by_id(self, id: str) -> T | None:
        ...

    @abstractmethod
    async def delete(self, id: str) -> None:
        ...


class GalaxyRepository(Repository[Galaxy]):
    @abstractmethod
    async def find_by_name(self, name: str) -> Galaxy | None:
        ...

    @abstractmethod
    async def find_by_owner(self, owner_id: str) -> list[Galaxy]:
        ...


class SystemRepository(Repository[System]):
    @abstractmethod
    async def find_by_galaxy(self, galaxy_id: str) -> list[System]:
        """Systems of a galaxy in creation order."""


class StarRepository(Repository[Star]):
    @abstractmethod
    async def find_by_system(self, system_id: str) -> list[Star]:
        ...


class PlanetRepository(Repository[Planet]):
    @abstractmethod
    async def find_by_system(self, system_id: str) -> list[Planet]:
        ...


class MoonRepository(Repository[Moon]):
    @abstractmethod
    async def find_by_planet(self, planet_id: str) -> list[Moon]:
        ...


class AsteroidRepository(Repository[Asteroid]):
    @abstractmethod
    async def find_by_system(self, system_id: str) -> list[Asteroid]:
        ...


@dataclass
class RepoBundle:
    """The six ports, all bound to the same transactional scope."""

    galaxy: GalaxyRepository
    system: SystemRepository
    star: StarRepository
    planet: PlanetRepository
    moon: MoonRepository
    asteroid: AsteroidRepository
