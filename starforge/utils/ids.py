"""Identity helpers for aggregates."""

import re
import uuid

from .errors import domain_error

UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


def new_id() -> str:
    """Return a fresh UUID4 string."""
    return str(uuid.uuid4())


def ensure_id(value: str | None) -> str:
    """Validate an identifier, generating one when value is None.

    Args:
        value: Candidate UUID string or None

    Returns:
        Lower-cased UUID string

    Raises:
        DomainError: DOMAIN.INVALID_UUID_KEY if value is not a UUID
    """
    if value is None:
        return new_id()
    if not isinstance(value, str) or not UUID_PATTERN.match(value):
        raise domain_error("DOMAIN.INVALID_UUID_KEY", uuid=value)
    return value.lower()
