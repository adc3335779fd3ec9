"""Utility functions and constants for Starforge."""

from .errors import (
    ERROR_CATALOG,
    ApplicationError,
    DomainError,
    StarforgeError,
    application_error,
    domain_error,
)
from .ids import ensure_id, new_id
from .naming import (
    NameGenerator,
    generate_celestial_name,
    generate_special_name,
    is_special_name,
    is_valid_celestial_name,
    is_valid_galaxy_name,
)
from .rng import CelestialRNG

__all__ = [
    "ERROR_CATALOG",
    "ApplicationError",
    "DomainError",
    "StarforgeError",
    "application_error",
    "domain_error",
    "ensure_id",
    "new_id",
    "NameGenerator",
    "generate_celestial_name",
    "generate_special_name",
    "is_special_name",
    "is_valid_celestial_name",
    "is_valid_galaxy_name",
    "CelestialRNG",
]
