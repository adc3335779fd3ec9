"""Galaxy tree construction and teardown."""

import asyncio
import logging

from ..models import (
    Asteroid,
    Galaxy,
    GalaxyTree,
    Moon,
    Planet,
    PlanetNode,
    System,
    SystemNode,
)
from ..repositories.ports import RepoBundle
from ..utils.naming import NameGenerator
from ..utils.rng import CelestialRNG
from .orbital_slots import OrbitalSlotAllocator, SystemSlotPlan
from .positioning import GalaxyShapePositioner
from .stellar import generate_system_stars

logger = logging.getLogger(__name__)


class GalaxyLifecycleService:
    """Build and tear down complete galaxy trees against repository ports.

    All randomness flows from one CelestialRNG, so a seeded service
    reproduces the same galaxy. Collaborators default to instances sharing
    that RNG.

    Args:
        rng: Random source for the generation run
        positioner: System placement by galaxy shape
        allocator: Orbital slot planning from the main star's starter
        names: Celestial name generator
    """

    def __init__(
        self,
        rng: CelestialRNG | None = None,
        positioner: GalaxyShapePositioner | None = None,
        allocator: OrbitalSlotAllocator | None = None,
        names: NameGenerator | None = None,
    ):
        self.rng = rng or CelestialRNG()
        self.positioner = positioner or GalaxyShapePositioner(self.rng)
        self.allocator = allocator or OrbitalSlotAllocator(self.rng)
        self.names = names or NameGenerator(self.rng)

    async def create_galaxy_tree(self, galaxy: Galaxy, repos: RepoBundle) -> None:
        """Persist a galaxy and generate everything under it.

        For each of galaxy.system_count systems: position it, save it, save
        its 1-3 stars in one batch, plan slots from the main star's starter,
        then save planets (each followed by its moons) and asteroids. Writes
        are awaited one at a time. Repository failures propagate.
        """
        await repos.galaxy.save(galaxy)

        totals = {"stars": 0, "planets": 0, "moons": 0, "asteroids": 0}
        for index in range(galaxy.system_count):
            position = self.positioner.position(galaxy.shape, index, galaxy.system_count)
            system = System.create(galaxy.id, position, self.rng, name=self.names.generate())
            await repos.system.save(system)

            stars = generate_system_stars(system.id, self.rng, self.names)
            await repos.star.save_many(stars)

            main_star = next((s for s in stars if s.is_main), stars[0])
            plan = self.allocator.allocate(main_star.orbital_starter)
            counts = await self._populate_system(system, plan, repos)

            totals["stars"] += len(stars)
            for key, value in counts.items():
                totals[key] += value
            logger.debug(
                f"System {index + 1}/{galaxy.system_count} {system.name}: "
                f"{len(stars)} stars, starter {plan.starter}, {counts}"
            )

        logger.info(
            f"Created galaxy {galaxy.name} ({galaxy.shape.value}) with "
            f"{galaxy.system_count} systems, {totals['stars']} stars, "
            f"{totals['planets']} planets, {totals['moons']} moons, "
            f"{totals['asteroids']} asteroids"
        )

    async def _populate_system(
        self, system: System, plan: SystemSlotPlan, repos: RepoBundle
    ) -> dict[str, int]:
        counts = {"planets": 0, "moons": 0, "asteroids": 0}
        for planned in plan.planets:
            planet = Planet.create(system.id, planned.slot.ring, self.rng, name=self.names.generate())
            await repos.planet.save(planet)
            counts["planets"] += 1
            for moon_slot in planned.moons:
                moon = Moon.create(planet.id, moon_slot.ring, self.rng, name=self.names.generate())
                await repos.moon.save(moon)
                counts["moons"] += 1

        for slot in plan.asteroids:
            await repos.asteroid.save(Asteroid.create(system.id, slot.ring, self.rng))
            counts["asteroids"] += 1
        return counts

    async def delete_galaxy_tree(self, galaxy_id: str, repos: RepoBundle) -> None:
        """Delete a galaxy and everything under it, children before parents.

        Systems are handled one after another; within a system its planets,
        asteroids and stars are fetched concurrently. Each planet's moons go
        before the planet, then asteroids, stars, the system and finally the
        galaxy.
        """
        systems = await repos.system.find_by_galaxy(galaxy_id)
        for system in systems:
            planets, asteroids, stars = await asyncio.gather(
                repos.planet.find_by_system(system.id),
                repos.asteroid.find_by_system(system.id),
                repos.star.find_by_system(system.id),
            )
            for planet in planets:
                for moon in await repos.moon.find_by_planet(planet.id):
                    await repos.moon.delete(moon.id)
                await repos.planet.delete(planet.id)
            for asteroid in asteroids:
                await repos.asteroid.delete(asteroid.id)
            for star in stars:
                await repos.star.delete(star.id)
            await repos.system.delete(system.id)

        await repos.galaxy.delete(galaxy_id)
        logger.info(f"Deleted galaxy {galaxy_id} and {len(systems)} systems")

    async def reposition_systems(self, galaxy: Galaxy, repos: RepoBundle) -> int:
        """Move every system of the galaxy to a position for its current shape.

        Systems keep their ids, names and children; only positions change.
        The index of each system is its creation order.

        Returns:
            Number of systems moved
        """
        systems = await repos.system.find_by_galaxy(galaxy.id)
        total = len(systems)
        for index, system in enumerate(systems):
            system.move(self.positioner.position(galaxy.shape, index, total))
            await repos.system.save(system)
        logger.info(f"Repositioned {total} systems of galaxy {galaxy.name} as {galaxy.shape.value}")
        return total

    async def populate_galaxy(self, galaxy_id: str, repos: RepoBundle) -> GalaxyTree | None:
        """Read the whole tree under a galaxy, fanning out per system.

        Returns:
            GalaxyTree, or None when the galaxy does not exist
        """
        galaxy = await repos.galaxy.find_by_id(galaxy_id)
        if galaxy is None:
            return None
        systems = await repos.system.find_by_galaxy(galaxy.id)
        nodes = await asyncio.gather(*(self._load_system(s, repos) for s in systems))
        return GalaxyTree(galaxy=galaxy, systems=list(nodes))

    async def _load_system(self, system: System, repos: RepoBundle) -> SystemNode:
        planets, asteroids, stars = await asyncio.gather(
            repos.planet.find_by_system(system.id),
            repos.asteroid.find_by_system(system.id),
            repos.star.find_by_system(system.id),
        )
        planets.sort(key=lambda p: p.orbital)
        moons = await asyncio.gather(*(repos.moon.find_by_planet(p.id) for p in planets))
        return SystemNode(
            system=system,
            stars=sorted(stars, key=lambda s: (s.orbital, -s.relative_mass)),
            planets=[
                PlanetNode(planet=planet, moons=sorted(planet_moons, key=lambda m: m.orbital))
                for planet, planet_moons in zip(planets, moons)
            ],
            asteroids=sorted(asteroids, key=lambda a: a.orbital),
        )
