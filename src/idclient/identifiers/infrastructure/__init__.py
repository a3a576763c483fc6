"""Infrastructure layer for the Identifiers bounded context."""

from identifiers.infrastructure.hash_id_client import HashIdClient

__all__ = ["HashIdClient"]
