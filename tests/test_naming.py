"""Tests for celestial name generation and validation."""

from starforge.utils.constants import MAX_NAME_ATTEMPTS, SPECIAL_NAME_PREFIXES
from starforge.utils.naming import (
    NameGenerator,
    format_special_name,
    generate_celestial_name,
    generate_special_name,
    is_special_name,
    is_valid_celestial_name,
    is_valid_galaxy_name,
)
from starforge.utils.rng import CelestialRNG


class TestNameValidation:
    """Test name format predicates."""

    def test_celestial_names(self):
        """Names start with a letter and have 3-30 characters."""
        assert is_valid_celestial_name("Velkator")
        assert is_valid_celestial_name("NOVA-042")
        assert not is_valid_celestial_name("Io")
        assert not is_valid_celestial_name("9Tor")
        assert not is_valid_celestial_name("Vel kator")
        assert not is_valid_celestial_name("A" * 31)

    def test_special_names(self):
        """Special designations need a known prefix and 001-999."""
        assert is_special_name("NOVA-042")
        assert is_special_name("PSR-999")
        assert not is_special_name("NOVA-000")
        assert not is_special_name("ABC-123")
        assert not is_special_name("NOVA-42")
        assert not is_special_name("Velkator")

    def test_galaxy_names(self):
        """Galaxy names are 5-15 characters."""
        assert is_valid_galaxy_name("Andromeda")
        assert is_valid_galaxy_name("Milky Way")
        assert not is_valid_galaxy_name("Abc")
        assert not is_valid_galaxy_name("A" * 16)

    def test_format_special_name(self):
        """Numbers are zero-padded to three digits."""
        assert format_special_name("NOVA", 7) == "NOVA-007"
        assert format_special_name("KEP-", 42) == "KEP-042"


class TestNameGenerator:
    """Test NameGenerator."""

    def test_generated_names_are_valid(self):
        """Every generated name passes the celestial validator."""
        for seed in range(50):
            rng = CelestialRNG(seed)
            for _ in range(10):
                assert is_valid_celestial_name(generate_celestial_name(rng))

    def test_deterministic(self):
        """Same seed yields the same names."""
        a = NameGenerator(CelestialRNG(5))
        b = NameGenerator(CelestialRNG(5))
        assert [a.generate() for _ in range(20)] == [b.generate() for _ in range(20)]

    def test_special_name_format(self):
        """Special names use a catalog prefix."""
        rng = CelestialRNG(9)
        for _ in range(50):
            name = generate_special_name(rng)
            assert is_special_name(name)
            assert name.split("-")[0] in SPECIAL_NAME_PREFIXES

    def test_fallback_after_bounded_attempts(self):
        """A validator that rejects everything gets the fallback after the retry bound."""
        calls = []

        def reject(name):
            calls.append(name)
            return False

        generator = NameGenerator(CelestialRNG(1), validator=reject)
        name = generator.generate()

        assert len(calls) == MAX_NAME_ATTEMPTS == 30
        assert name.startswith("Astra-")
        assert is_valid_celestial_name(name)

    def test_retries_until_valid(self):
        """Invalid candidates are retried, not emitted."""
        seen = []

        def accept_third(name):
            seen.append(name)
            return len(seen) == 3

        name = NameGenerator(CelestialRNG(2), validator=accept_third).generate()
        assert name == seen[2]
        assert len(seen) == 3
