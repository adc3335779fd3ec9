"""Star generation for a single system."""

from ..models.classification import StarType, sample_star_type
from ..models.star import Star
from ..utils.constants import (
    COMPANION_STAR_EXCLUSIONS,
    ORBITAL_STARTER_BY_STAR_TYPE,
    STARS_PER_SYSTEM_RANGE,
)
from ..utils.naming import NameGenerator
from ..utils.rng import CelestialRNG


def orbital_starter_for(star_type: StarType | str) -> int:
    """Capacity a star of this type consumes when it is the system's main star."""
    return ORBITAL_STARTER_BY_STAR_TYPE[StarType(star_type).value]


def create_system_star(
    system_id: str,
    rng: CelestialRNG,
    names: NameGenerator,
    star_type: StarType | None = None,
) -> Star:
    """One star of a system, not yet ranked (is_main False, orbital 0)."""
    if star_type is None:
        star_type = sample_star_type(rng)
    return Star.create(
        system_id,
        rng,
        name=names.generate(),
        star_type=star_type,
        is_main=False,
        orbital=0,
        orbital_starter=orbital_starter_for(star_type),
    )


def generate_system_stars(system_id: str, rng: CelestialRNG, names: NameGenerator) -> list[Star]:
    """Generate the 1-3 stars of a system.

    A black hole or neutron star drawn first stays alone and is main. Other
    systems get 1-3 stars, companions never being compact; the list is
    sorted by relative mass descending, the heaviest becomes main at orbital
    0 and the rest sit at orbital 1.

    Args:
        system_id: Owning system
        rng: Random source
        names: Name generator for star names

    Returns:
        Stars ordered main first
    """
    first = create_system_star(system_id, rng, names)
    if first.is_compact:
        first.change_main_status(True)
        return [first]

    total = rng.randint(*STARS_PER_SYSTEM_RANGE)
    stars = [first]
    for _ in range(1, total):
        companion_type = sample_star_type(rng, exclude=COMPANION_STAR_EXCLUSIONS)
        stars.append(create_system_star(system_id, rng, names, companion_type))

    stars.sort(key=lambda s: s.relative_mass, reverse=True)
    for idx, star in enumerate(stars):
        star.change_main_status(idx == 0)
        star.change_orbital(0 if idx == 0 else 1)
    return stars
