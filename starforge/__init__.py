"""Starforge: procedural generation of galaxies, systems, stars, planets, moons and asteroids."""

__version__ = "0.1.0"
