"""Galaxy commands and the populate query.

Every command runs inside one unit of work: the whole tree is written (or
removed) and committed together, and any failure leaves the store as it was.
"""

import logging

from ..models import Galaxy, GalaxyShape, GalaxyTree
from ..repositories.memory import InMemoryUnitOfWorkFactory
from ..repositories.ports import RepoBundle
from ..utils.constants import MIN_SYSTEM_COUNT
from ..utils.errors import application_error
from ..utils.ids import ensure_id
from ..utils.rng import CelestialRNG
from .lifecycle import GalaxyLifecycleService

logger = logging.getLogger(__name__)


class GalaxyCommands:
    """Application entry points over the generation engine.

    Args:
        uow_factory: Source of units of work (anything with a start() that
            returns an async context manager exposing repos/commit/rollback)
        seed: Seed for each generation run's CelestialRNG; None for entropy
    """

    def __init__(self, uow_factory: InMemoryUnitOfWorkFactory, seed: int | None = None):
        self.uow_factory = uow_factory
        self.seed = seed

    def _lifecycle(self) -> GalaxyLifecycleService:
        return GalaxyLifecycleService(CelestialRNG(self.seed))

    async def create_galaxy(
        self,
        owner_id: str,
        name: str,
        shape: GalaxyShape | str | None = None,
        system_count: int = MIN_SYSTEM_COUNT,
    ) -> Galaxy:
        """Create a galaxy and generate its whole tree in one transaction.

        Raises:
            ApplicationError: GALAXY.NAME_ALREADY_EXIST if the name is taken
            DomainError: On invalid owner id, name, shape or count
        """
        lifecycle = self._lifecycle()
        async with self.uow_factory.start() as uow:
            galaxy = Galaxy.create(
                owner_id, name, lifecycle.rng, shape=shape, system_count=system_count
            )
            await self._ensure_name_free(uow.repos, galaxy.name)
            await lifecycle.create_galaxy_tree(galaxy, uow.repos)
            await uow.commit()
        return galaxy

    async def delete_galaxy(self, galaxy_id: str) -> None:
        """Remove a galaxy and every entity under it.

        Raises:
            ApplicationError: GALAXY.NOT_FOUND
        """
        galaxy_id = ensure_id(galaxy_id)
        async with self.uow_factory.start() as uow:
            await self._get_galaxy(uow.repos, galaxy_id)
            await self._lifecycle().delete_galaxy_tree(galaxy_id, uow.repos)
            await uow.commit()

    async def change_galaxy_shape(self, galaxy_id: str, shape: GalaxyShape | str) -> Galaxy:
        """Switch the galaxy's shape and reposition its existing systems.

        No entity is recreated. Choosing the current shape changes nothing.
        """
        galaxy_id = ensure_id(galaxy_id)
        async with self.uow_factory.start() as uow:
            galaxy = await self._get_galaxy(uow.repos, galaxy_id)
            previous = galaxy.shape
            galaxy.change_shape(shape)
            if galaxy.shape == previous:
                return galaxy
            await uow.repos.galaxy.save(galaxy)
            await self._lifecycle().reposition_systems(galaxy, uow.repos)
            await uow.commit()
        logger.info(f"Galaxy {galaxy.name} reshaped from {previous.value} to {galaxy.shape.value}")
        return galaxy

    async def rename_galaxy(self, galaxy_id: str, name: str) -> Galaxy:
        """Rename a galaxy, keeping names unique.

        Raises:
            ApplicationError: GALAXY.NOT_FOUND or GALAXY.NAME_ALREADY_EXIST
            DomainError: DOMAIN.INVALID_GALAXY_NAME
        """
        galaxy_id = ensure_id(galaxy_id)
        async with self.uow_factory.start() as uow:
            galaxy = await self._get_galaxy(uow.repos, galaxy_id)
            galaxy.rename(name)
            await self._ensure_name_free(uow.repos, galaxy.name, exclude_id=galaxy.id)
            await uow.repos.galaxy.save(galaxy)
            await uow.commit()
        return galaxy

    async def populate_galaxy(self, galaxy_id: str) -> GalaxyTree:
        """Return the galaxy with its full tree.

        Raises:
            ApplicationError: GALAXY.NOT_FOUND
        """
        galaxy_id = ensure_id(galaxy_id)
        async with self.uow_factory.start() as uow:
            tree = await self._lifecycle().populate_galaxy(galaxy_id, uow.repos)
        if tree is None:
            raise application_error("GALAXY.NOT_FOUND", id=galaxy_id)
        return tree

    @staticmethod
    async def _get_galaxy(repos: RepoBundle, galaxy_id: str) -> Galaxy:
        galaxy = await repos.galaxy.find_by_id(galaxy_id)
        if galaxy is None:
            raise application_error("GALAXY.NOT_FOUND", id=galaxy_id)
        return galaxy

    @staticmethod
    async def _ensure_name_free(repos: RepoBundle, name: str, exclude_id: str | None = None) -> None:
        existing = await repos.galaxy.find_by_name(name)
        if existing is not None and existing.id != exclude_id:
            raise application_error("GALAXY.NAME_ALREADY_EXIST", name=name)
