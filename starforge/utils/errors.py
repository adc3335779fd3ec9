"""Error taxonomy for the generation engine.

Every error carries a machine code (e.g. "DOMAIN.INVALID_STAR_CLASS"), a
formatted message, and structured metadata naming the offending field or
value. The HTTP layer maps the code's status from ERROR_CATALOG.
"""

from typing import Any

# code -> (http status, message template)
ERROR_CATALOG: dict[str, tuple[int, str]] = {
    "DOMAIN.INVALID_UUID_KEY": (400, "UUID key not valid. UUID key: {uuid}."),
    "DOMAIN.INVALID_GALAXY_NAME": (400, "Invalid galaxy name. Name: {name}."),
    "DOMAIN.INVALID_GALAXY_SHAPE": (400, "Invalid galaxy shape. Shape: {shape}."),
    "DOMAIN.INVALID_GALAXY_VALUE": (400, "Invalid galaxy value. Field: {field}."),
    "DOMAIN.INVALID_SYSTEM_NAME": (400, "Invalid system name. Name: {name}."),
    "DOMAIN.INVALID_SYSTEM_POSITION": (400, "Invalid system position. Position: {position}."),
    "DOMAIN.INVALID_STAR_TYPE": (400, "Invalid star type. Type: {type}."),
    "DOMAIN.INVALID_STAR_CLASS": (400, "Invalid star class. Class: {star_class}."),
    "DOMAIN.INVALID_STAR_COLOR": (400, "Invalid star color. Color: {color}."),
    "DOMAIN.INVALID_STAR_VALUE": (400, "Invalid star value. Field: {field}."),
    "DOMAIN.INVALID_PLANET_NAME": (400, "Invalid planet name. Name: {name}."),
    "DOMAIN.INVALID_PLANET_TYPE": (400, "Invalid planet type. Type: {type}."),
    "DOMAIN.INVALID_PLANET_SIZE": (400, "Invalid planet size. Size: {size}."),
    "DOMAIN.INVALID_PLANET_BIOME": (400, "Invalid planet biome. Biome: {biome}."),
    "DOMAIN.INVALID_PLANET_ORBITAL": (400, "Invalid planet orbital. Orbital: {orbital}."),
    "DOMAIN.INVALID_PLANET_VALUE": (400, "Invalid planet value. Field: {field}."),
    "DOMAIN.INVALID_MOON_NAME": (400, "Invalid moon name. Name: {name}."),
    "DOMAIN.INVALID_MOON_SIZE": (400, "Invalid moon size. Size: {size}."),
    "DOMAIN.INVALID_MOON_ORBITAL": (400, "Invalid moon orbital. Orbital: {orbital}."),
    "DOMAIN.INVALID_MOON_VALUE": (400, "Invalid moon value. Field: {field}."),
    "DOMAIN.INVALID_ASTEROID_NAME": (400, "Invalid asteroid name. Name: {name}."),
    "DOMAIN.INVALID_ASTEROID_TYPE": (400, "Invalid asteroid type. Type: {type}."),
    "DOMAIN.INVALID_ASTEROID_SIZE": (400, "Invalid asteroid size. Size: {size}."),
    "DOMAIN.INVALID_ASTEROID_ORBITAL": (400, "Invalid asteroid orbital. Orbital: {orbital}."),
    "DOMAIN.INVALID_SLOT_PLAN": (500, "Invalid orbital slot plan. Reason: {reason}."),
    "GALAXY.NOT_FOUND": (404, "Galaxy not found. Id: {id}."),
    "GALAXY.NAME_ALREADY_EXIST": (409, "Galaxy name already exist. Name: {name}."),
}


class StarforgeError(Exception):
    """Base class for all engine errors."""

    layer = "Unknown Layer"

    def __init__(self, code: str, message: str | None = None, meta: dict[str, Any] | None = None):
        """Initialize error.

        Args:
            code: Machine-readable error code (key of ERROR_CATALOG)
            message: Human-readable message; defaults to the code
            meta: Structured context (offending field, value, limits)
        """
        self.code = code
        self.message = message or code
        self.meta = meta or {}
        self.http_status = ERROR_CATALOG.get(code, (500, ""))[0]
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Public representation used by the HTTP layer."""
        return {"error": self.code, "message": self.message, "details": self.meta}


class DomainError(StarforgeError, ValueError):
    """Raised by aggregates and value helpers when an invariant is violated."""

    layer = "Domain Layer"


class ApplicationError(StarforgeError):
    """Raised by commands (missing galaxy, duplicate name)."""

    layer = "Application Layer"


def _format(code: str, meta: dict[str, Any]) -> str:
    if code not in ERROR_CATALOG:
        raise KeyError(f"Unknown error code: {code}")
    template = ERROR_CATALOG[code][1]
    # Missing keys render empty, like the catalog's placeholders
    return template.format_map(_Blank(meta))


class _Blank(dict):
    def __missing__(self, key):
        return ""


def domain_error(code: str, **meta: Any) -> DomainError:
    """Build a DomainError with its catalog message.

    Example:
        >>> raise domain_error("DOMAIN.INVALID_STAR_VALUE", field="relative_mass")
    """
    return DomainError(code, _format(code, meta), meta)


def application_error(code: str, **meta: Any) -> ApplicationError:
    """Build an ApplicationError with its catalog message."""
    return ApplicationError(code, _format(code, meta), meta)
