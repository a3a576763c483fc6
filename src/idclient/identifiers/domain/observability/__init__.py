"""Domain-Oriented Observability for the identifiers domain layer."""

from identifiers.domain.observability.identifier_probe import (
    DefaultIdentifierProbe,
    IdentifierProbe,
)

__all__ = [
    "DefaultIdentifierProbe",
    "IdentifierProbe",
]
