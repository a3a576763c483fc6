"""Id client construction for the Identifiers bounded context.

Client variants are selected by name from configuration. The hash client
is always registered; network-backed variants register themselves with
register_id_client().
"""

from __future__ import annotations

from typing import Callable, TypeAlias

from identifiers.domain.exceptions import UnknownClientError
from identifiers.domain.observability import DefaultIdentifierProbe
from identifiers.infrastructure.hash_id_client import HashIdClient
from identifiers.ports.client import IIdClient
from infrastructure.settings import IdClientSettings, get_id_client_settings
from shared_kernel.observability_context import ObservationContext

IdClientFactory: TypeAlias = Callable[[IdClientSettings, ObservationContext], IIdClient]

HASH_CLIENT = "hash"


def _create_hash_id_client(
    settings: IdClientSettings, context: ObservationContext
) -> IIdClient:
    return HashIdClient(
        persist_in_memory=settings.persist_in_memory,
        service_uri=settings.service_uri,
        release=settings.release,
        probe=DefaultIdentifierProbe().with_context(context),
    )


_REGISTRY: dict[str, IdClientFactory] = {HASH_CLIENT: _create_hash_id_client}


def register_id_client(name: str, factory: IdClientFactory) -> None:
    """Register a client variant under a name.

    Args:
        name: Variant name as used in IDCLIENT_CLIENT (case-insensitive)
        factory: Callable building the client from settings and the
            observation context its probe should carry
    """
    _REGISTRY[name.strip().lower()] = factory


def available_id_clients() -> list[str]:
    """List registered client variant names."""
    return sorted(_REGISTRY)


def create_id_client(
    settings: IdClientSettings | None = None,
    *,
    request_id: str | None = None,
) -> IIdClient:
    """Build the configured id client.

    Args:
        settings: Settings to use; the cached environment settings by default
        request_id: Correlates every event the client logs with one request

    Returns:
        A new client instance with its own observation set

    Raises:
        UnknownClientError: If settings.client names no registered variant
    """
    settings = settings or get_id_client_settings()
    factory = _REGISTRY.get(settings.client)
    if factory is None:
        raise UnknownClientError(
            f"Unknown id client {settings.client!r}; "
            f"available: {', '.join(available_id_clients())}"
        )

    context = ObservationContext(client=settings.client, release=settings.release)
    if request_id is not None:
        context = context.with_request(request_id)
    return factory(settings, context)
