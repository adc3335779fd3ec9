"""Celestial name generation and name-format validation.

Names come in two flavors:
- syllable names ("Velkator", "Nuzen") built from 1-4 random syllables
- special catalog designations ("NOVA-042", "PSR-317")

Generation retries a bounded number of times against a validator and falls
back to a synthetic name that always validates, so it never raises.
"""

import logging
import re
from typing import Callable

from tenacity import Retrying, after_log, retry_if_result, stop_after_attempt

from .constants import (
    FALLBACK_NAME_PREFIX,
    GALAXY_NAME_LENGTH,
    MAX_NAME_ATTEMPTS,
    NAME_SYLLABLES,
    SPECIAL_NAME_CHANCE,
    SPECIAL_NAME_PREFIXES,
    SPECIAL_NUMBER_RANGE,
    SYLLABLE_COUNT_RANGE,
)
from .rng import CelestialRNG

logger = logging.getLogger(__name__)

CELESTIAL_NAME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9-]{2,29}$")
SPECIAL_NAME_PATTERN = re.compile(r"^([A-Z]+)-(\d{3})$")
GALAXY_NAME_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9 _-]*[A-Za-z0-9]$")


def is_valid_celestial_name(value: str) -> bool:
    """Check a star/system/planet/moon name.

    Examples:
        >>> is_valid_celestial_name("Velkator")
        True
        >>> is_valid_celestial_name("Ka")  # too short
        False
    """
    return bool(CELESTIAL_NAME_PATTERN.match(value))


def is_special_name(value: str) -> bool:
    """Check a catalog designation such as "NOVA-042".

    The prefix must belong to the catalog and the number must be 001-999.

    Examples:
        >>> is_special_name("NOVA-042")
        True
        >>> is_special_name("NOVA-000")
        False
        >>> is_special_name("ABC-123")
        False
    """
    match = SPECIAL_NAME_PATTERN.match(value)
    if not match:
        return False
    low, high = SPECIAL_NUMBER_RANGE
    return match.group(1) in SPECIAL_NAME_PREFIXES and low <= int(match.group(2)) <= high


def is_valid_galaxy_name(value: str) -> bool:
    """Check a galaxy name (5-15 characters, alphanumeric edges)."""
    low, high = GALAXY_NAME_LENGTH
    return low <= len(value) <= high and bool(GALAXY_NAME_PATTERN.match(value))


def format_special_name(prefix: str, number: int) -> str:
    """Format a catalog designation, tolerating a trailing hyphen on prefix."""
    return f"{prefix.rstrip('-')}-{number:03d}"


class NameGenerator:
    """Produce validated celestial names from a seeded RNG.

    Args:
        rng: Random source shared with the rest of the generation run
        validator: Predicate every emitted name must satisfy
        max_attempts: Candidates tried before falling back
    """

    def __init__(
        self,
        rng: CelestialRNG,
        validator: Callable[[str], bool] = is_valid_celestial_name,
        max_attempts: int = MAX_NAME_ATTEMPTS,
    ):
        self.rng = rng
        self.validator = validator
        self.max_attempts = max_attempts

    def syllable_name(self) -> str:
        count = self.rng.randint(*SYLLABLE_COUNT_RANGE)
        name = "".join(self.rng.choice(NAME_SYLLABLES) for _ in range(count))
        return name.capitalize()

    def special_name(self) -> str:
        prefix = self.rng.choice(SPECIAL_NAME_PREFIXES)
        return format_special_name(prefix, self.rng.randint(*SPECIAL_NUMBER_RANGE))

    def candidate(self) -> str:
        """One unvalidated candidate: special with small probability, else syllables."""
        if self.rng.random() < SPECIAL_NAME_CHANCE:
            return self.special_name()
        return self.syllable_name()

    def fallback_name(self) -> str:
        """Synthetic name that satisfies the default validator."""
        return format_special_name(FALLBACK_NAME_PREFIX, self.rng.randint(*SPECIAL_NUMBER_RANGE))

    def generate(self) -> str:
        """Return a name accepted by the validator.

        Tries up to max_attempts candidates. If none validates, returns
        fallback_name(); a custom validator that also rejects the fallback
        still gets it, since generation must terminate.
        """
        retrying = Retrying(
            stop=stop_after_attempt(self.max_attempts),
            retry=retry_if_result(lambda name: not self.validator(name)),
            after=after_log(logger, logging.DEBUG),
            retry_error_callback=self._on_exhausted,
        )
        return retrying(self.candidate)

    def _on_exhausted(self, retry_state) -> str:
        fallback = self.fallback_name()
        logger.debug(
            f"No valid name after {retry_state.attempt_number} attempts, using fallback {fallback}"
        )
        return fallback


def generate_celestial_name(rng: CelestialRNG) -> str:
    """Convenience wrapper: one validated celestial name."""
    return NameGenerator(rng).generate()


def generate_special_name(rng: CelestialRNG) -> str:
    """Convenience wrapper: one catalog designation (always valid)."""
    return NameGenerator(rng).special_name()
