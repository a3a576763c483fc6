"""Tests for the id client port helpers."""

import pytest

from identifiers.domain.exceptions import IdentifierUnavailableError
from identifiers.domain.value_objects import IdentifierFamily
from identifiers.ports import require_identifier


class TestRequireIdentifier:
    def test_returns_present_identifier(self):
        assert require_identifier("DO1", IdentifierFamily.DONOR, "D1", "P1") == "DO1"

    def test_raises_for_absent_identifier(self):
        with pytest.raises(IdentifierUnavailableError, match="donor") as exc_info:
            require_identifier(None, IdentifierFamily.DONOR, "D1", "P1")

        assert exc_info.value.family == "donor"
        assert exc_info.value.keys == ("D1", "P1")
