"""Dictionary-backed repositories and unit of work.

Entities are deep-copied on the way in and on the way out, so an aggregate
mutated by a caller is only visible to others after it is saved again.
"""

import asyncio
import copy
import logging
from collections.abc import MutableMapping
from typing import Callable, Generic, TypeVar

from ..models import Asteroid, Galaxy, Moon, Planet, Star, System
from .ports import (
    AsteroidRepository,
    GalaxyRepository,
    MoonRepository,
    PlanetRepository,
    RepoBundle,
    StarRepository,
    SystemRepository,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

TABLES = ("galaxy", "system", "star", "planet", "moon", "asteroid")


class InMemoryStore:
    """One dictionary per entity kind, keyed by id, in insertion order."""

    def __init__(self):
        self.tables: dict[str, dict[str, object]] = {name: {} for name in TABLES}

    def count(self, table: str) -> int:
        return len(self.tables[table])

    def is_empty(self) -> bool:
        return all(not rows for rows in self.tables.values())


class _TableRepository(Generic[T]):
    table: str = ""

    def __init__(self, tables: dict[str, MutableMapping]):
        self._rows: MutableMapping[str, T] = tables[self.table]

    async def save(self, entity: T) -> T:
        self._rows[entity.id] = copy.deepcopy(entity)
        return entity

    async def find_by_id(self, id: str) -> T | None:
        entity = self._rows.get(id)
        return copy.deepcopy(entity) if entity is not None else None

    async def delete(self, id: str) -> None:
        self._rows.pop(id, None)

    def _where(self, predicate: Callable[[T], bool]) -> list[T]:
        return [copy.deepcopy(e) for e in self._rows.values() if predicate(e)]


class InMemoryGalaxyRepository(_TableRepository[Galaxy], GalaxyRepository):
    table = "galaxy"

    async def find_by_name(self, name: str) -> Galaxy | None:
        matches = self._where(lambda g: g.name.lower() == name.strip().lower())
        return matches[0] if matches else None

    async def find_by_owner(self, owner_id: str) -> list[Galaxy]:
        return self._where(lambda g: g.owner_id == owner_id)


class InMemorySystemRepository(_TableRepository[System], SystemRepository):
    table = "system"

    async def find_by_galaxy(self, galaxy_id: str) -> list[System]:
        return self._where(lambda s: s.galaxy_id == galaxy_id)


class InMemoryStarRepository(_TableRepository[Star], StarRepository):
    table = "star"

    async def find_by_system(self, system_id: str) -> list[Star]:
        return self._where(lambda s: s.system_id == system_id)


class InMemoryPlanetRepository(_TableRepository[Planet], PlanetRepository):
    table = "planet"

    async def find_by_system(self, system_id: str) -> list[Planet]:
        return self._where(lambda p: p.system_id == system_id)


class InMemoryMoonRepository(_TableRepository[Moon], MoonRepository):
    table = "moon"

    async def find_by_planet(self, planet_id: str) -> list[Moon]:
        return self._where(lambda m: m.planet_id == planet_id)


class InMemoryAsteroidRepository(_TableRepository[Asteroid], AsteroidRepository):
    table = "asteroid"

    async def find_by_system(self, system_id: str) -> list[Asteroid]:
        return self._where(lambda a: a.system_id == system_id)


def build_repos(tables: dict[str, MutableMapping]) -> RepoBundle:
    """Bundle in-memory repositories over the given tables."""
    return RepoBundle(
        galaxy=InMemoryGalaxyRepository(tables),
        system=InMemorySystemRepository(tables),
        star=InMemoryStarRepository(tables),
        planet=InMemoryPlanetRepository(tables),
        moon=InMemoryMoonRepository(tables),
        asteroid=InMemoryAsteroidRepository(tables),
    )


class _PendingTable(MutableMapping):
    """Write overlay over one live table.

    Reads fall through to the live rows; saves and deletes are held back
    until apply() writes them into the live table.
    """

    def __init__(self, live: dict[str, object]):
        self.live = live
        self.saved: dict[str, object] = {}
        self.deleted: set[str] = set()

    def __getitem__(self, key: str):
        if key in self.saved:
            return self.saved[key]
        if key in self.deleted:
            raise KeyError(key)
        return self.live[key]

    def __setitem__(self, key: str, value) -> None:
        self.saved[key] = value
        self.deleted.discard(key)

    def __delitem__(self, key: str) -> None:
        if key not in self:
            raise KeyError(key)
        self.saved.pop(key, None)
        self.deleted.add(key)

    def __iter__(self):
        for key in list(self.live):
            if key not in self.deleted:
                yield key
        for key in list(self.saved):
            if key not in self.live:
                yield key

    def __len__(self) -> int:
        return sum(1 for _ in self)

    @property
    def dirty(self) -> bool:
        return bool(self.saved or self.deleted)

    def apply(self) -> None:
        for key in self.deleted:
            self.live.pop(key, None)
        self.live.update(self.saved)


class InMemoryUnitOfWork:
    """Transactional scope over an InMemoryStore.

    Repositories read the live tables through a per-table overlay that holds
    this unit of work's saves and deletes. commit() applies only those
    changes; leaving the async context without a commit (including on
    exception) drops them. Units of work on one store run one at a time.

    Example:
        async with factory.start() as uow:
            await uow.repos.galaxy.save(galaxy)
            await uow.commit()
    """

    def __init__(
        self,
        store: InMemoryStore,
        repos_builder: Callable[..., RepoBundle] = build_repos,
        lock: asyncio.Lock | None = None,
    ):
        self.store = store
        self._repos_builder = repos_builder
        self._lock = lock
        self._pending: dict[str, _PendingTable] | None = None
        self.repos: RepoBundle | None = None
        self.committed = False

    async def __aenter__(self) -> "InMemoryUnitOfWork":
        if self._lock is not None:
            await self._lock.acquire()
        self._begin()
        self.committed = False
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        try:
            if not self.committed:
                await self.rollback()
        finally:
            self._pending = None
            if self._lock is not None:
                self._lock.release()

    def _begin(self) -> None:
        self._pending = {name: _PendingTable(rows) for name, rows in self.store.tables.items()}
        self.repos = self._repos_builder(self._pending)

    async def commit(self) -> None:
        if self._pending is None:
            raise RuntimeError("Unit of work is not active")
        for table in self._pending.values():
            table.apply()
        self._begin()
        self.committed = True

    async def rollback(self) -> None:
        if self._pending is None:
            return
        if any(table.dirty for table in self._pending.values()):
            logger.debug("Rolling back unit of work")
        self._begin()


class InMemoryUnitOfWorkFactory:
    """Hands out units of work sharing one store and its lock."""

    def __init__(
        self,
        store: InMemoryStore | None = None,
        repos_builder: Callable[..., RepoBundle] = build_repos,
    ):
        self.store = store or InMemoryStore()
        self.repos_builder = repos_builder
        self._loop: asyncio.AbstractEventLoop | None = None
        self._lock: asyncio.Lock | None = None

    def _lock_for_running_loop(self) -> asyncio.Lock:
        # asyncio.Lock binds to the loop that first waits on it
        loop = asyncio.get_running_loop()
        if self._lock is None or self._loop is not loop:
            self._loop = loop
            self._lock = asyncio.Lock()
        return self._lock

    def start(self) -> InMemoryUnitOfWork:
        """New unit of work; call from inside a running event loop."""
        return InMemoryUnitOfWork(self.store, self.repos_builder, self._lock_for_running_loop())
