"""Tests for stellar classification and the Star aggregate."""

import pytest

from starforge.models.classification import (
    STELLAR_PROFILES,
    StarClass,
    StarColor,
    StarType,
    neutron_star_radius,
    sample_star_type,
    schwarzschild_radius,
    valid_triples,
)
from starforge.models.star import Star
from starforge.utils.constants import SUN_MASS, SUN_RADIUS, SUN_SURFACE_GRAVITY
from starforge.utils.errors import DomainError
from starforge.utils.ids import new_id
from starforge.utils.rng import CelestialRNG


class TestClassification:
    """Test the stellar profile table and sampler."""

    def test_profile_table(self):
        """Type determines class and class determines color."""
        assert len(valid_triples()) == 9
        assert (StarType.YELLOW_DWARF, StarClass.G, StarColor.YELLOW) in valid_triples()
        assert (StarType.BLACK_HOLE, StarClass.BH, StarColor.BLACK) in valid_triples()
        assert (StarType.NEUTRON_STAR, StarClass.N, StarColor.BLUE_WHITE) in valid_triples()
        assert all(p.weight > 0 for p in STELLAR_PROFILES.values())

    def test_sampler_respects_exclusions(self):
        """Excluded types are never drawn."""
        rng = CelestialRNG(4)
        excluded = ("Black hole", "Neutron star")
        for _ in range(500):
            assert sample_star_type(rng, exclude=excluded).value not in excluded

    def test_sampler_covers_common_types(self):
        """Dominant types appear in a large sample."""
        rng = CelestialRNG(8)
        drawn = {sample_star_type(rng) for _ in range(2000)}
        assert StarType.YELLOW_DWARF in drawn
        assert StarType.SUBDWARF in drawn
        assert StarType.RED_DWARF in drawn

    def test_neutron_star_radius_clamped(self):
        """Empirical radius stays within 10-14 km."""
        assert neutron_star_radius(0.1 * SUN_MASS) == 14_000
        assert neutron_star_radius(10 * SUN_MASS) == 10_000
        assert neutron_star_radius(1.4 * SUN_MASS) == pytest.approx(12_500)


class TestStar:
    """Test Star creation and derivation."""

    def test_regular_star_derivation(self):
        """Absolute values scale from solar constants and gravity is inverse-square."""
        rng = CelestialRNG(42)
        for _ in range(100):
            star = Star.create(new_id(), rng)
            if star.is_compact:
                continue
            assert star.absolute_mass == pytest.approx(star.relative_mass * SUN_MASS)
            assert star.absolute_radius == pytest.approx(star.relative_radius * SUN_RADIUS)
            assert star.gravity == pytest.approx(
                SUN_SURFACE_GRAVITY * star.relative_mass / star.relative_radius**2
            )
            assert (star.star_type, star.star_class, star.color) in valid_triples()

    def test_ranges_follow_class(self):
        """Sampled values stay within the class ranges."""
        rng = CelestialRNG(3)
        for _ in range(50):
            star = Star.create(new_id(), rng, star_type="Yellow dwarf")
            assert 0.8 <= star.relative_mass <= 1.04
            assert 0.96 <= star.relative_radius <= 1.15
            assert 5200 <= star.surface_temperature <= 6000

    def test_black_hole(self):
        """Black holes are class BH, black, with a Schwarzschild radius."""
        star = Star.create(new_id(), CelestialRNG(1), star_type="Black hole")
        assert star.star_class == StarClass.BH
        assert star.color == StarColor.BLACK
        assert star.absolute_radius == pytest.approx(schwarzschild_radius(star.absolute_mass))
        # Tens of kilometres against a smallest regular radius of 0.1 solar radii
        assert star.relative_radius < 1e-3
        assert star.absolute_radius < 0.1 * SUN_RADIUS / 100

    def test_neutron_star(self):
        """Neutron stars get a 10-14 km radius regardless of supplied radius."""
        star = Star.create(new_id(), CelestialRNG(2), star_type="Neutron star", relative_radius=5.0)
        assert star.star_class == StarClass.N
        assert 10_000 <= star.absolute_radius <= 14_000
        assert star.relative_radius == pytest.approx(star.absolute_radius / SUN_RADIUS)

    def test_inconsistent_class_rejected(self):
        """A class that does not match the type raises."""
        with pytest.raises(DomainError) as exc_info:
            Star.create(new_id(), CelestialRNG(1), star_type="Yellow dwarf", star_class="M")
        assert exc_info.value.code == "DOMAIN.INVALID_STAR_CLASS"

    def test_inconsistent_color_rejected(self):
        """A color that does not match the class raises."""
        with pytest.raises(DomainError) as exc_info:
            Star.create(new_id(), CelestialRNG(1), star_type="Red dwarf", color="blue")
        assert exc_info.value.code == "DOMAIN.INVALID_STAR_COLOR"

    def test_unknown_values_rejected(self):
        """Unknown type, class or color raise their own codes."""
        rng = CelestialRNG(1)
        with pytest.raises(DomainError, match="Invalid star type"):
            Star.create(new_id(), rng, star_type="Quasar")
        with pytest.raises(DomainError, match="Invalid star class"):
            Star.create(new_id(), rng, star_type="Red dwarf", star_class="Z")
        with pytest.raises(DomainError, match="Invalid star color"):
            Star.create(new_id(), rng, star_type="Red dwarf", color="purple")

    def test_invalid_numbers_rejected(self):
        """Non-positive mass and negative orbital values raise with the field."""
        rng = CelestialRNG(1)
        with pytest.raises(DomainError) as exc_info:
            Star.create(new_id(), rng, star_type="Red dwarf", relative_mass=0)
        assert exc_info.value.meta == {"field": "relative_mass"}

        with pytest.raises(DomainError) as exc_info:
            Star.create(new_id(), rng, star_type="Red dwarf", orbital=-1)
        assert exc_info.value.code == "DOMAIN.INVALID_STAR_VALUE"
        assert exc_info.value.meta == {"field": "orbital"}

        star = Star.create(new_id(), rng, star_type="Red dwarf")
        with pytest.raises(DomainError):
            star.change_orbital_starter(-2)

    def test_rehydrate_restores_derived_gravity(self):
        """Stored gravity is not trusted on rehydration."""
        star = Star.create(new_id(), CelestialRNG(6), star_type="Blue giant")
        record = star.to_dict()
        record["gravity"] = 1.0
        record["absolute_mass"] = 0.0

        loaded = Star.rehydrate(record)

        assert loaded.id == star.id
        assert loaded.gravity == pytest.approx(star.gravity)
        assert loaded.absolute_mass == pytest.approx(star.absolute_mass)

    def test_defaults(self):
        """Created stars are main at orbital 0 unless told otherwise."""
        star = Star.create(new_id(), CelestialRNG(1))
        assert star.is_main is True
        assert star.orbital == 0
        assert star.orbital_starter == 0
