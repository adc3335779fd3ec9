"""Generation engine: placement, slot planning, star generation and tree lifecycle."""

from .commands import GalaxyCommands
from .lifecycle import GalaxyLifecycleService
from .orbital_slots import (
    OrbitalSlot,
    OrbitalSlotAllocator,
    PlannedPlanet,
    SlotKind,
    SystemSlotPlan,
    normalize_starter,
)
from .positioning import GalaxyShapePositioner
from .stellar import generate_system_stars

__all__ = [
    "GalaxyCommands",
    "GalaxyLifecycleService",
    "OrbitalSlot",
    "OrbitalSlotAllocator",
    "PlannedPlanet",
    "SlotKind",
    "SystemSlotPlan",
    "normalize_starter",
    "GalaxyShapePositioner",
    "generate_system_stars",
]
