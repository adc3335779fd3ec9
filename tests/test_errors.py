"""Tests for error taxonomy and identity helpers."""

import pytest

from starforge.utils.errors import (
    ApplicationError,
    DomainError,
    application_error,
    domain_error,
)
from starforge.utils.ids import ensure_id, new_id


class TestErrors:
    """Test error construction."""

    def test_domain_error_message_and_meta(self):
        """Catalog template is formatted with the metadata."""
        err = domain_error("DOMAIN.INVALID_STAR_VALUE", field="relative_mass")
        assert isinstance(err, DomainError)
        assert isinstance(err, ValueError)
        assert err.code == "DOMAIN.INVALID_STAR_VALUE"
        assert err.message == "Invalid star value. Field: relative_mass."
        assert err.meta == {"field": "relative_mass"}
        assert err.http_status == 400
        assert err.layer == "Domain Layer"

    def test_application_error_status(self):
        """Application errors carry their catalog status."""
        err = application_error("GALAXY.NOT_FOUND", id="x")
        assert isinstance(err, ApplicationError)
        assert err.http_status == 404
        assert application_error("GALAXY.NAME_ALREADY_EXIST", name="x").http_status == 409

    def test_to_dict(self):
        """Public representation exposes code, message and details."""
        err = domain_error("DOMAIN.INVALID_GALAXY_SHAPE", shape="cube")
        assert err.to_dict() == {
            "error": "DOMAIN.INVALID_GALAXY_SHAPE",
            "message": "Invalid galaxy shape. Shape: cube.",
            "details": {"shape": "cube"},
        }

    def test_unknown_code(self):
        """Unknown codes are a programming error."""
        with pytest.raises(KeyError):
            domain_error("DOMAIN.NOPE")


class TestIds:
    """Test identifier helpers."""

    def test_generates_when_missing(self):
        """None becomes a fresh UUID."""
        value = ensure_id(None)
        assert ensure_id(value) == value

    def test_normalizes_case(self):
        """Upper-case UUIDs are lower-cased."""
        value = new_id()
        assert ensure_id(value.upper()) == value

    def test_rejects_invalid(self):
        """Malformed ids raise DOMAIN.INVALID_UUID_KEY."""
        with pytest.raises(DomainError) as exc_info:
            ensure_id("not-a-uuid")
        assert exc_info.value.code == "DOMAIN.INVALID_UUID_KEY"
