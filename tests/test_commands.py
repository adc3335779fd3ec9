"""Tests for galaxy commands and unit-of-work behavior."""

import asyncio

import pytest

from starforge.engine.commands import GalaxyCommands
from starforge.models import Galaxy, GalaxyShape
from starforge.repositories.memory import (
    InMemoryStarRepository,
    InMemoryStore,
    InMemoryUnitOfWorkFactory,
    build_repos,
)
from starforge.utils.errors import ApplicationError, DomainError
from starforge.utils.ids import new_id
from starforge.utils.rng import CelestialRNG

OWNER = "0b8f6a3e-3c1d-4f2a-9e7b-5d4c3b2a1f00"


def _commands(seed=42):
    factory = InMemoryUnitOfWorkFactory()
    return GalaxyCommands(factory, seed=seed), factory.store


class TestCreateGalaxy:
    """Test create_galaxy."""

    def test_create_commits_tree(self):
        """The galaxy and its systems are visible after the command."""
        commands, store = _commands()
        galaxy = asyncio.run(
            commands.create_galaxy(OWNER, "Andromeda", shape="3-arm spiral", system_count=4)
        )
        assert galaxy.shape == GalaxyShape.THREE_ARM_SPIRAL
        assert store.count("galaxy") == 1
        assert store.count("system") == 4
        assert store.count("star") >= 4

    def test_duplicate_name_rejected(self):
        """Galaxy names are unique (case-insensitive)."""
        commands, store = _commands()
        asyncio.run(commands.create_galaxy(OWNER, "Andromeda", system_count=2))
        before = {table: store.count(table) for table in store.tables}

        with pytest.raises(ApplicationError) as exc_info:
            asyncio.run(commands.create_galaxy(OWNER, "andromeda", system_count=2))

        assert exc_info.value.code == "GALAXY.NAME_ALREADY_EXIST"
        assert exc_info.value.http_status == 409
        assert {table: store.count(table) for table in store.tables} == before

    def test_invalid_input_writes_nothing(self):
        """Domain errors abort before anything is stored."""
        commands, store = _commands()
        with pytest.raises(DomainError):
            asyncio.run(commands.create_galaxy(OWNER, "Andromeda", shape="cube"))
        assert store.is_empty()

    def test_failure_rolls_back(self):
        """A repository failure mid-generation leaves the store untouched."""

        class BrokenStarRepository(InMemoryStarRepository):
            async def save(self, entity):
                raise RuntimeError("connection lost")

        def broken_repos(tables):
            repos = build_repos(tables)
            repos.star = BrokenStarRepository(tables)
            return repos

        store = InMemoryStore()
        commands = GalaxyCommands(InMemoryUnitOfWorkFactory(store, broken_repos), seed=1)

        with pytest.raises(RuntimeError, match="connection lost"):
            asyncio.run(commands.create_galaxy(OWNER, "Andromeda", system_count=5))

        assert store.is_empty()


class TestGalaxyMutations:
    """Test delete, reshape and rename."""

    def test_delete(self):
        """Deleting removes the whole tree."""
        commands, store = _commands()
        galaxy = asyncio.run(commands.create_galaxy(OWNER, "Andromeda", system_count=6))
        asyncio.run(commands.delete_galaxy(galaxy.id))
        assert store.is_empty()

    def test_delete_missing(self):
        """Unknown and malformed ids are reported."""
        commands, _ = _commands()
        with pytest.raises(ApplicationError) as exc_info:
            asyncio.run(commands.delete_galaxy(new_id()))
        assert exc_info.value.code == "GALAXY.NOT_FOUND"
        with pytest.raises(DomainError) as exc_info:
            asyncio.run(commands.delete_galaxy("nope"))
        assert exc_info.value.code == "DOMAIN.INVALID_UUID_KEY"

    def test_change_shape_repositions(self):
        """Reshaping keeps every id and moves the systems."""
        commands, store = _commands()
        galaxy = asyncio.run(
            commands.create_galaxy(OWNER, "Andromeda", shape="spherical", system_count=5)
        )
        before = asyncio.run(commands.populate_galaxy(galaxy.id))

        updated = asyncio.run(commands.change_galaxy_shape(galaxy.id, "5-arm spiral"))
        after = asyncio.run(commands.populate_galaxy(galaxy.id))

        assert updated.shape == GalaxyShape.FIVE_ARM_SPIRAL
        assert after.galaxy.shape == GalaxyShape.FIVE_ARM_SPIRAL
        assert [n.system.id for n in after.systems] == [n.system.id for n in before.systems]
        assert [s.id for n in after.systems for s in n.stars] == [
            s.id for n in before.systems for s in n.stars
        ]
        assert after.counts() == before.counts()
        assert [n.system.position for n in after.systems] != [
            n.system.position for n in before.systems
        ]

    def test_change_to_same_shape_is_noop(self):
        """Choosing the current shape leaves positions alone."""
        commands, _ = _commands()
        galaxy = asyncio.run(
            commands.create_galaxy(OWNER, "Andromeda", shape="irregular", system_count=3)
        )
        before = asyncio.run(commands.populate_galaxy(galaxy.id))
        asyncio.run(commands.change_galaxy_shape(galaxy.id, "irregular"))
        after = asyncio.run(commands.populate_galaxy(galaxy.id))
        assert [n.system.position for n in after.systems] == [
            n.system.position for n in before.systems
        ]

    def test_invalid_shape(self):
        """Unknown shapes are rejected."""
        commands, _ = _commands()
        galaxy = asyncio.run(commands.create_galaxy(OWNER, "Andromeda"))
        with pytest.raises(DomainError, match="Invalid galaxy shape"):
            asyncio.run(commands.change_galaxy_shape(galaxy.id, "ring"))

    def test_rename(self):
        """Renaming checks format and uniqueness."""
        commands, _ = _commands()
        first = asyncio.run(commands.create_galaxy(OWNER, "Andromeda"))
        asyncio.run(commands.create_galaxy(OWNER, "Triangulum"))

        renamed = asyncio.run(commands.rename_galaxy(first.id, "Sombrero"))
        assert renamed.name == "Sombrero"
        assert asyncio.run(commands.populate_galaxy(first.id)).galaxy.name == "Sombrero"

        with pytest.raises(ApplicationError, match="already exist"):
            asyncio.run(commands.rename_galaxy(first.id, "Triangulum"))
        with pytest.raises(DomainError):
            asyncio.run(commands.rename_galaxy(first.id, "X"))

    def test_rename_to_own_name(self):
        """Keeping the same name is not a conflict."""
        commands, _ = _commands()
        galaxy = asyncio.run(commands.create_galaxy(OWNER, "Andromeda"))
        assert asyncio.run(commands.rename_galaxy(galaxy.id, "Andromeda")).name == "Andromeda"


class TestPopulateGalaxy:
    """Test the populate query."""

    def test_populate(self):
        """The tree mirrors what was stored."""
        commands, store = _commands()
        galaxy = asyncio.run(commands.create_galaxy(OWNER, "Andromeda", system_count=7))
        tree = asyncio.run(commands.populate_galaxy(galaxy.id))
        assert tree.counts()["systems"] == 7
        assert tree.counts()["stars"] == store.count("star")
        assert tree.counts()["moons"] == store.count("moon")

    def test_populate_missing(self):
        """Unknown galaxies raise GALAXY.NOT_FOUND."""
        commands, _ = _commands()
        with pytest.raises(ApplicationError) as exc_info:
            asyncio.run(commands.populate_galaxy(new_id()))
        assert exc_info.value.http_status == 404


class TestConcurrentCommands:
    """Test commands interleaved on one event loop."""

    def test_concurrent_delete_keeps_other_create(self):
        """A create committed while a delete is running survives it."""
        commands, store = _commands()

        async def scenario():
            first = await commands.create_galaxy(OWNER, "Andromeda", system_count=4)
            _, second = await asyncio.gather(
                commands.delete_galaxy(first.id),
                commands.create_galaxy(OWNER, "Triangulum", system_count=3),
            )
            return first, second

        first, second = asyncio.run(scenario())

        assert store.count("galaxy") == 1
        assert asyncio.run(commands.populate_galaxy(second.id)).counts()["systems"] == 3
        with pytest.raises(ApplicationError):
            asyncio.run(commands.populate_galaxy(first.id))

    def test_concurrent_creates_keep_names_unique(self):
        """Two creates racing for one name yield one galaxy and one conflict."""
        commands, store = _commands()

        async def scenario():
            return await asyncio.gather(
                commands.create_galaxy(OWNER, "Andromeda", system_count=2),
                commands.create_galaxy(OWNER, "Andromeda", system_count=2),
                return_exceptions=True,
            )

        results = asyncio.run(scenario())
        errors = [r for r in results if isinstance(r, ApplicationError)]

        assert len(errors) == 1
        assert errors[0].code == "GALAXY.NAME_ALREADY_EXIST"
        assert store.count("galaxy") == 1


class TestUnitOfWork:
    """Test the in-memory unit of work."""

    def test_reads_see_live_rows(self):
        """Rows stored after the unit of work opened are visible to it."""
        factory = InMemoryUnitOfWorkFactory()
        galaxy = Galaxy.create(OWNER, "Andromeda", CelestialRNG(1))

        async def scenario():
            async with factory.start() as uow:
                await build_repos(factory.store.tables).galaxy.save(galaxy)
                return await uow.repos.galaxy.find_by_id(galaxy.id)

        assert asyncio.run(scenario()) == galaxy

    def test_uncommitted_changes_are_dropped(self):
        """Saves and deletes without commit never reach the store."""
        factory = InMemoryUnitOfWorkFactory()
        kept = Galaxy.create(OWNER, "Andromeda", CelestialRNG(1))
        asyncio.run(build_repos(factory.store.tables).galaxy.save(kept))

        async def scenario():
            async with factory.start() as uow:
                await uow.repos.galaxy.delete(kept.id)
                await uow.repos.galaxy.save(Galaxy.create(OWNER, "Triangulum", CelestialRNG(2)))
                assert await uow.repos.galaxy.find_by_id(kept.id) is None
                assert len(await uow.repos.galaxy.find_by_owner(OWNER)) == 1

        asyncio.run(scenario())

        assert list(factory.store.tables["galaxy"]) == [kept.id]

    def test_commit_applies_only_own_changes(self):
        """Commit writes this unit's rows and leaves other rows alone."""
        factory = InMemoryUnitOfWorkFactory()
        outside = Galaxy.create(OWNER, "Andromeda", CelestialRNG(1))
        inside = Galaxy.create(OWNER, "Triangulum", CelestialRNG(2))

        async def scenario():
            async with factory.start() as uow:
                await uow.repos.galaxy.save(inside)
                factory.store.tables["galaxy"][outside.id] = outside
                await uow.commit()

        asyncio.run(scenario())

        assert set(factory.store.tables["galaxy"]) == {outside.id, inside.id}
