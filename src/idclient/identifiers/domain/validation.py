"""Shape validation for generated and submitted identifiers."""

from __future__ import annotations

import re
from typing import Protocol

from identifiers.domain.exceptions import ValidationError

UUID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"
)

# Submitted analysis ids are caller-chosen; generated ones are UUIDs and
# must also pass. Patterns are applied with fullmatch.
ANALYSIS_ID_PATTERN = re.compile(r"[A-Za-z0-9][A-Za-z0-9._-]{0,63}")


class IdentifierValidator(Protocol):
    """Protocol for identifier shape validators."""

    def validate_uuid(self, value: str) -> None:
        """Raise ValidationError unless value is a canonical UUID string."""
        ...

    def validate_analysis_id(self, value: str) -> None:
        """Raise ValidationError unless value is an acceptable analysis id."""
        ...


class DefaultIdentifierValidator:
    """Regex-based IdentifierValidator."""

    def validate_uuid(self, value: str) -> None:
        if not isinstance(value, str) or not UUID_PATTERN.fullmatch(value):
            raise ValidationError(f"Invalid UUID: {value!r}", value=value)

    def validate_analysis_id(self, value: str) -> None:
        if not isinstance(value, str) or not ANALYSIS_ID_PATTERN.fullmatch(value):
            raise ValidationError(f"Invalid analysis id: {value!r}", value=value)
