"""Value objects for the Identifiers domain.

Identifier families and the prefixes that tag the identifiers derived for
them.
"""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType
from typing import Mapping


class IdentifierFamily(StrEnum):
    """Named categories of identifiers, each with its own derivation rule."""

    DONOR = "donor"
    SPECIMEN = "specimen"
    SAMPLE = "sample"
    MUTATION = "mutation"
    FILE = "file"
    OBJECT = "object"
    ANALYSIS = "analysis"

    @property
    def prefix(self) -> str:
        """Return the prefix prepended to identifiers of this family."""
        return prefix_for(self)


DONOR_ID_PREFIX = "DO"
SPECIMEN_ID_PREFIX = "SP"
SAMPLE_ID_PREFIX = "SA"
MUTATION_ID_PREFIX = "MU"
FILE_ID_PREFIX = "FI"

# Append-only. Changing an entry invalidates every identifier already issued
# for that family.
FAMILY_PREFIXES: Mapping[IdentifierFamily, str] = MappingProxyType(
    {
        IdentifierFamily.DONOR: DONOR_ID_PREFIX,
        IdentifierFamily.SPECIMEN: SPECIMEN_ID_PREFIX,
        IdentifierFamily.SAMPLE: SAMPLE_ID_PREFIX,
        IdentifierFamily.MUTATION: MUTATION_ID_PREFIX,
        IdentifierFamily.FILE: FILE_ID_PREFIX,
        IdentifierFamily.OBJECT: "",
        IdentifierFamily.ANALYSIS: "",
    }
)


def prefix_for(family: IdentifierFamily | str) -> str:
    """Get the fixed prefix for an identifier family.

    Args:
        family: An IdentifierFamily or its string value (e.g. "donor")

    Returns:
        The prefix string; empty for object and analysis identifiers

    Raises:
        ValueError: If family is not a known identifier family
    """
    return FAMILY_PREFIXES[IdentifierFamily(family)]
