"""Validation helpers shared by the aggregates."""

import math
from enum import Enum
from typing import TypeVar

from ..utils.errors import domain_error

E = TypeVar("E", bound=Enum)


def coerce_enum(enum_cls: type[E], value, code: str, meta_key: str) -> E:
    """Convert a raw value (or enum member) into enum_cls.

    Args:
        enum_cls: Target enumeration
        value: Member or its string value
        code: Error code raised when the value is not a member
        meta_key: Metadata key naming the offending value

    Raises:
        DomainError: With the given code
    """
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        raise domain_error(code, **{meta_key: value}) from None


def is_finite_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def ensure_positive(code: str, field: str, value) -> float:
    if not is_finite_number(value) or value <= 0:
        raise domain_error(code, field=field)
    return value


def ensure_non_negative(code: str, field: str, value) -> float:
    if not is_finite_number(value) or value < 0:
        raise domain_error(code, field=field)
    return value


def derive_body_physics(
    relative_mass: float,
    relative_radius: float,
    reference: tuple[float, float, float],
) -> tuple[float, float, float]:
    """Absolute mass, absolute radius and surface gravity of a rocky body.

    Args:
        relative_mass: Mass as a multiple of the reference body's
        relative_radius: Radius as a multiple of the reference body's
        reference: (mass kg, radius m, surface gravity m/s^2) of the reference

    Returns:
        (absolute_mass, absolute_radius, gravity), with gravity following the
        inverse-square relation g_ref * m / r^2
    """
    ref_mass, ref_radius, ref_gravity = reference
    gravity = ref_gravity * (relative_mass / (relative_radius * relative_radius))
    return relative_mass * ref_mass, relative_radius * ref_radius, gravity


def ensure_ring(code: str, value, half: bool = False):
    """Validate an orbital ring index.

    Whole rings must be positive integers; half rings (asteroid belts) must
    be positive with a fractional part of exactly .5.
    """
    if not is_finite_number(value) or value <= 0:
        raise domain_error(code, orbital=value)
    fraction = value % 1
    if half and abs(fraction - 0.5) > 1e-9:
        raise domain_error(code, orbital=value)
    if not half and fraction != 0:
        raise domain_error(code, orbital=value)
    return value
