"""Physical constants and generation tuning values."""

# Reference bodies (SI units)
SUN_MASS = 1.98847e30  # kg
SUN_RADIUS = 6.9634e8  # m
SUN_SURFACE_GRAVITY = 274.0  # m/s^2

EARTH_MASS = 5.9722e24  # kg
EARTH_RADIUS = 6.371e6  # m
EARTH_GRAVITY = 9.80665  # m/s^2

MOON_MASS = 7.342e22  # kg
MOON_RADIUS = 1.7374e6  # m
MOON_GRAVITY = 1.62  # m/s^2

GRAVITATIONAL_CONSTANT = 6.6743e-11  # m^3 kg^-1 s^-2
SPEED_OF_LIGHT = 299_792_458.0  # m/s

# Neutron star radius model (km)
NEUTRON_STAR_BASE_RADIUS_KM = 12.5
NEUTRON_STAR_REFERENCE_MASS = 1.4  # solar masses
NEUTRON_STAR_RADIUS_SLOPE_KM = 1.5
NEUTRON_STAR_RADIUS_RANGE_KM = (10.0, 14.0)

# Planets: relative mass/radius by size, temperature (K) by biome
PLANET_SIZE_MASS = {
    "proto": (0.01, 0.2),
    "dwarf": (0.1, 0.5),
    "medium": (0.5, 2.0),
    "giant": (5.0, 20.0),
    "supergiant": (20.0, 100.0),
}
PLANET_SIZE_RADIUS = {
    "proto": (0.2, 0.5),
    "dwarf": (0.3, 0.7),
    "medium": (0.7, 1.5),
    "giant": (2.0, 5.0),
    "supergiant": (5.0, 12.0),
}
PLANET_BIOME_TEMPERATURE = {
    "temperate": (240.0, 320.0),
    "desert": (280.0, 420.0),
    "ocean": (250.0, 330.0),
    "ice": (120.0, 240.0),
    "toxic": (200.0, 380.0),
    "radioactive": (200.0, 500.0),
    "crystal": (180.0, 300.0),
}

# Moons: relative to Earth's moon
MOON_SIZE_MASS = {
    "dwarf": (0.05, 0.4),
    "medium": (0.4, 1.2),
    "giant": (1.2, 4.0),
}
MOON_SIZE_RADIUS = {
    "dwarf": (0.3, 0.7),
    "medium": (0.7, 1.3),
    "giant": (1.3, 2.5),
}
MOON_TEMPERATURE = (50.0, 350.0)

# Orbital capacity consumed by a system's main star
ORBITAL_STARTER_BY_STAR_TYPE = {
    "Blue supergiant": 4,
    "Blue giant": 3,
    "White dwarf": 2,
    "Brown dwarf": 1,
    "Yellow dwarf": 1,
    "Subdwarf": 2,
    "Red dwarf": 1,
    "Black hole": 5,
    "Neutron star": 4,
}
COMPANION_STAR_EXCLUSIONS = ("Black hole", "Neutron star")
STARS_PER_SYSTEM_RANGE = (1, 3)

# Orbital slot bounds
STARTER_RANGE = (1, 8)
PLANET_RING_CAPACITY = 9  # planets allowed = capacity - starter
MAX_PLANET_RING = 8
ASTEROID_RING_OFFSET = 0.5
MAX_ASTEROID_RING = 8.5
MOON_RING_CAPACITY = 6  # moons allowed = capacity - starter
MAX_MOONS_PER_PLANET = 5

# Galaxy placement
BASE_SYSTEM_RADIUS = 4000.0
RADIUS_STEP_PER_INDEX = 6.0
RADIUS_JITTER = 200.0
SPHERICAL_RADIAL_JITTER = 500.0
XY_JITTER = 90.0  # +/- around the arm
Z_JITTER = 600.0  # +/- disk thickness
SPIRAL_SPIN_DIVISOR = 2200.0
IRREGULAR_EXTENT = 10_000.0

# Galaxies
GALAXY_NAME_LENGTH = (5, 15)
MIN_SYSTEM_COUNT = 1

# Names
MAX_NAME_ATTEMPTS = 30
SPECIAL_NAME_CHANCE = 0.05
SYLLABLE_COUNT_RANGE = (1, 4)
SPECIAL_NUMBER_RANGE = (1, 999)
FALLBACK_NAME_PREFIX = "Astra"
NAME_SYLLABLES = (
    "ka", "tor", "vel", "ar", "is", "zen", "mor", "lyx", "dra", "nu",
    "qua", "rel", "sol", "the", "ur", "vex", "wyn", "xi", "yor", "zar",
    "bel", "cor", "dun", "eos", "fal", "gal", "hel", "io", "jun", "kep",
    "lum", "mir", "nox", "ori", "pax", "rho", "syl", "tal", "umb", "vor",
)
SPECIAL_NAME_PREFIXES = ("NOVA", "KEP", "HD", "GJ", "TYC", "PSR", "XO", "KOI", "WISE", "LHS")

# Testing
RNG_SEED_DEFAULT = 42  # generate.py --seed default
