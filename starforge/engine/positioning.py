"""Shape-aware 3-D placement of systems inside a galaxy."""

import math

from ..models.galaxy import GalaxyShape
from ..models.system import Position
from ..utils.constants import (
    BASE_SYSTEM_RADIUS,
    IRREGULAR_EXTENT,
    RADIUS_JITTER,
    RADIUS_STEP_PER_INDEX,
    SPHERICAL_RADIAL_JITTER,
    SPIRAL_SPIN_DIVISOR,
    XY_JITTER,
    Z_JITTER,
)
from ..utils.rng import CelestialRNG


class GalaxyShapePositioner:
    """Compute system coordinates for a galaxy shape.

    Every shape starts from a base radius that grows slowly with the system
    index plus a random jitter, and a base angle that spreads systems evenly
    by index:

    - spherical: area-uniform point on a sphere (phi = acos(2u - 1))
    - N-arm spiral: system i sits on arm i mod N; the angle adds the arm
      offset and a radius-proportional spin, with small x/y and larger z
      jitter for disk thickness
    - irregular: uniform in a bounded square with z jitter
    """

    def __init__(self, rng: CelestialRNG):
        self.rng = rng

    def position(self, shape: GalaxyShape | str, index: int, total: int) -> Position:
        """Coordinates for the system at zero-based index out of total.

        Args:
            shape: Galaxy shape
            index: Zero-based system index
            total: Number of systems in the galaxy

        Returns:
            Position of the system
        """
        shape = GalaxyShape(shape)
        radius = (
            BASE_SYSTEM_RADIUS
            + index * RADIUS_STEP_PER_INDEX
            + self.rng.roll(RADIUS_JITTER)
        )
        theta = 2 * math.pi * index / max(1, total)

        if shape == GalaxyShape.SPHERICAL:
            phi = math.acos(2 * self.rng.random() - 1)
            r = radius + self.rng.roll(SPHERICAL_RADIAL_JITTER)
            return Position(
                x=r * math.sin(phi) * math.cos(theta),
                y=r * math.sin(phi) * math.sin(theta),
                z=r * math.cos(phi),
            )

        if shape == GalaxyShape.IRREGULAR:
            return Position(
                x=(self.rng.random() - 0.5) * IRREGULAR_EXTENT,
                y=(self.rng.random() - 0.5) * IRREGULAR_EXTENT,
                z=self._z_jitter(),
            )

        angle = theta + self.arm_offset(shape, index) + radius / SPIRAL_SPIN_DIVISOR
        return Position(
            x=math.cos(angle) * radius + self._xy_jitter(),
            y=math.sin(angle) * radius + self._xy_jitter(),
            z=self._z_jitter(),
        )

    @staticmethod
    def arm_index(shape: GalaxyShape | str, index: int) -> int | None:
        """Spiral arm of the system at index, None for non-spiral shapes."""
        arms = GalaxyShape(shape).arm_count
        if not arms:
            return None
        return index % arms

    @classmethod
    def arm_offset(cls, shape: GalaxyShape | str, index: int) -> float:
        """Angular offset (radians) of the system's arm; 0.0 off-spiral."""
        arm = cls.arm_index(shape, index)
        if arm is None:
            return 0.0
        return 2 * math.pi / GalaxyShape(shape).arm_count * arm

    def _xy_jitter(self) -> float:
        return self.rng.roll(2 * XY_JITTER) - XY_JITTER

    def _z_jitter(self) -> float:
        return self.rng.roll(2 * Z_JITTER) - Z_JITTER
