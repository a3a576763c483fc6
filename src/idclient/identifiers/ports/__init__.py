"""Ports (interfaces) for the Identifiers bounded context.

The id client contract is shared by every client variant: the in-memory
hash client here and network-backed clients that look identifiers up in a
registry service.
"""

from identifiers.ports.client import IIdClient, require_identifier

__all__ = [
    "IIdClient",
    "require_identifier",
]
