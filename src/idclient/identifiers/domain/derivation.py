"""Deterministic identifier derivation.

Identifiers for submitted entities are derived from their business keys
alone, so any client that follows these rules produces the same identifier
for the same keys without consulting a shared store. Downstream systems key
off these values long-term: the separator, hash function, text encoding,
prefixes and object namespace must never change.
"""

from __future__ import annotations

import hashlib
import uuid
from typing import Iterable

from identifiers.domain.exceptions import PreconditionError
from identifiers.domain.value_objects import IdentifierFamily, prefix_for

KEY_SEPARATOR = ":"
OBJECT_ID_SEPARATOR = "/"

# Shared by every deployment. Changing it is a schema break for object ids.
OBJECT_ID_NAMESPACE = uuid.UUID("6ba7b811-9dad-11d1-80b4-00c04fd430c8")


def require_text(name: str, value: object) -> str:
    """Check that a required argument is a non-empty string.

    Args:
        name: Argument name used in the error message
        value: The value to check

    Returns:
        The value, unchanged

    Raises:
        PreconditionError: If value is None, not a string, or empty
    """
    if value is None or not isinstance(value, str):
        raise PreconditionError(f"{name} must be a non-None string")
    if not value:
        raise PreconditionError(f"{name} must not be empty")
    return value


def derive_digest(keys: Iterable[str]) -> str:
    """Derive a stable hex digest from an ordered tuple of business keys.

    Keys are joined with ":" and hashed with MD5 over the UTF-16LE code
    units of the joined string. The encoding matches the legacy client,
    which hashed Java chars directly, so previously issued identifiers
    remain reproducible.

    Args:
        keys: One or more non-empty strings. Order is significant.

    Returns:
        32 lowercase hexadecimal characters

    Raises:
        PreconditionError: If keys is empty or any key is None or empty

    Example:
        >>> derive_digest(["DO1", "PRJ-1"]) == derive_digest(["DO1", "PRJ-1"])
        True
        >>> derive_digest(["a", "b"]) == derive_digest(["b", "a"])
        False
    """
    checked = [require_text(f"keys[{i}]", key) for i, key in enumerate(keys)]
    if not checked:
        raise PreconditionError("keys must contain at least one key")

    joined = KEY_SEPARATOR.join(checked)
    return hashlib.md5(joined.encode("utf-16-le"), usedforsecurity=False).hexdigest()


class HashIdGenerator:
    """Generates prefixed, hash-derived identifiers for entity families.

    The ID format is: {prefix}{digest}
    - prefix: Fixed family prefix (e.g., "DO" for donors)
    - digest: derive_digest() of the business keys

    Example:
        >>> HashIdGenerator.generate(IdentifierFamily.DONOR, "DO1", "PRJ-1")[:2]
        'DO'
    """

    @staticmethod
    def generate(family: IdentifierFamily, *keys: str) -> str:
        """Generate the identifier for a family and its business keys.

        Raises:
            PreconditionError: If any key is None or empty
        """
        return prefix_for(family) + derive_digest(keys)


class ObjectIdGenerator:
    """Generates name-based UUIDs for stored objects.

    Object ids must be valid UUID literals, so they use a version 5 UUID
    over "{analysis_id}/{file_name}" instead of a prefixed digest.
    """

    @staticmethod
    def generate(analysis_id: str, file_name: str) -> str:
        """Derive the object id for a file within an analysis.

        Args:
            analysis_id: The analysis the file belongs to
            file_name: Name of the file within the analysis

        Returns:
            Canonical lowercase UUID string

        Raises:
            PreconditionError: If either argument is None or empty
        """
        name = OBJECT_ID_SEPARATOR.join(
            (
                require_text("analysis_id", analysis_id),
                require_text("file_name", file_name),
            )
        )
        return str(uuid.uuid5(OBJECT_ID_NAMESPACE, name))


__all__ = [
    "HashIdGenerator",
    "KEY_SEPARATOR",
    "OBJECT_ID_NAMESPACE",
    "OBJECT_ID_SEPARATOR",
    "ObjectIdGenerator",
    "derive_digest",
    "require_text",
]
