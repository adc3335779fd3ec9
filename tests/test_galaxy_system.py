"""Tests for Galaxy and System aggregates."""

import math
from datetime import timezone

import pytest

from starforge.models import Galaxy, GalaxyShape, Position, System
from starforge.utils.errors import DomainError
from starforge.utils.ids import new_id
from starforge.utils.rng import CelestialRNG


class TestGalaxy:
    """Test Galaxy creation and mutators."""

    def test_create(self):
        """Galaxy keeps its owner, name, shape and count."""
        owner = new_id()
        galaxy = Galaxy.create(owner, "Andromeda", CelestialRNG(1), shape="5-arm spiral", system_count=10)
        assert galaxy.owner_id == owner
        assert galaxy.name == "Andromeda"
        assert galaxy.shape == GalaxyShape.FIVE_ARM_SPIRAL
        assert galaxy.shape.arm_count == 5
        assert galaxy.system_count == 10
        assert galaxy.created_at.tzinfo == timezone.utc

    def test_random_shape_when_omitted(self):
        """A missing shape is drawn from the four shapes."""
        rng = CelestialRNG(2)
        shapes = {Galaxy.create(new_id(), "Andromeda", rng).shape for _ in range(40)}
        assert shapes <= set(GalaxyShape)
        assert len(shapes) > 1

    def test_system_count_clamped(self):
        """System counts below one are clamped to one."""
        rng = CelestialRNG(3)
        assert Galaxy.create(new_id(), "Andromeda", rng, system_count=0).system_count == 1
        assert Galaxy.create(new_id(), "Andromeda", rng, system_count=-5).system_count == 1
        with pytest.raises(DomainError) as exc_info:
            Galaxy.create(new_id(), "Andromeda", rng, system_count="many")
        assert exc_info.value.code == "DOMAIN.INVALID_GALAXY_VALUE"

    def test_invalid_name_and_shape(self):
        """Name length and shape are validated."""
        rng = CelestialRNG(4)
        with pytest.raises(DomainError) as exc_info:
            Galaxy.create(new_id(), "Abc", rng)
        assert exc_info.value.code == "DOMAIN.INVALID_GALAXY_NAME"
        with pytest.raises(DomainError) as exc_info:
            Galaxy.create(new_id(), "Andromeda", rng, shape="cube")
        assert exc_info.value.code == "DOMAIN.INVALID_GALAXY_SHAPE"

    def test_invalid_owner(self):
        """Owner must be a UUID."""
        with pytest.raises(DomainError, match="UUID key not valid"):
            Galaxy.create("user-1", "Andromeda", CelestialRNG(5))

    def test_mutators_and_rehydrate(self):
        """Renaming and reshaping survive a to_dict/rehydrate cycle."""
        galaxy = Galaxy.create(new_id(), "Andromeda", CelestialRNG(6), shape="spherical")
        galaxy.rename("Triangulum")
        galaxy.change_shape("irregular")
        galaxy.change_system_count(7)
        loaded = Galaxy.rehydrate(galaxy.to_dict())
        assert loaded == galaxy


class TestSystem:
    """Test System and Position."""

    def test_create_and_move(self):
        """Systems move only through move()."""
        galaxy_id = new_id()
        system = System.create(galaxy_id, Position(1.0, 2.0, 3.0), CelestialRNG(1))
        assert system.galaxy_id == galaxy_id
        system.move({"x": 4.0, "y": 5.0, "z": 6.0})
        assert system.position == Position(4.0, 5.0, 6.0)
        assert System.rehydrate(system.to_dict()) == system

    def test_position_must_be_finite(self):
        """NaN and infinite coordinates are rejected."""
        with pytest.raises(DomainError) as exc_info:
            Position(math.nan, 0.0, 0.0)
        assert exc_info.value.code == "DOMAIN.INVALID_SYSTEM_POSITION"
        with pytest.raises(DomainError):
            Position.from_value((0.0, math.inf, 0.0))
        with pytest.raises(DomainError):
            Position.from_value({"x": 1.0})

    def test_invalid_name(self):
        """System names follow the celestial format."""
        with pytest.raises(DomainError) as exc_info:
            System.create(new_id(), Position(0, 0, 0), CelestialRNG(2), name="7up")
        assert exc_info.value.code == "DOMAIN.INVALID_SYSTEM_NAME"
