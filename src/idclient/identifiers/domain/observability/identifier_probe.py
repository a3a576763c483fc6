"""Observability probes for identifier derivation and allocation.

Probes emit structured logs with domain-specific context so that the
derivation and allocation code stays free of logging details.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class IdentifierProbe(Protocol):
    """Protocol for identifier observability probes."""

    def identifier_derived(self, family: str, identifier: str) -> None:
        """Probe emitted when a deterministic identifier is derived.

        Args:
            family: Identifier family (e.g. "donor")
            identifier: The derived identifier
        """
        ...

    def analysis_id_registered(self, analysis_id: str, persisted: bool) -> None:
        """Probe emitted when a submitted analysis id is accepted.

        Args:
            analysis_id: The submitted analysis id
            persisted: Whether it was recorded in the observation set
        """
        ...

    def random_analysis_id_allocated(
        self, analysis_id: str, attempts: int, persisted: bool
    ) -> None:
        """Probe emitted when a random analysis id is handed out.

        Args:
            analysis_id: The allocated id
            attempts: Number of candidates examined
            persisted: Whether it was recorded in the observation set
        """
        ...

    def analysis_id_collision(self, candidate: str, attempt: int) -> None:
        """Probe emitted when a random candidate is already known."""
        ...

    def analysis_id_allocation_exhausted(self, retry_limit: int) -> None:
        """Probe emitted when no unique candidate was found in time."""
        ...

    def client_closed(self, observed_count: int) -> None:
        """Probe emitted when an id client is closed."""
        ...

    def with_context(self, context: ObservationContext) -> IdentifierProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultIdentifierProbe:
    """Default implementation of IdentifierProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ) -> None:
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultIdentifierProbe:
        """Create a new probe with observation context bound."""
        return DefaultIdentifierProbe(logger=self._logger, context=context)

    def identifier_derived(self, family: str, identifier: str) -> None:
        self._logger.debug(
            "identifier_derived",
            family=family,
            identifier=identifier,
            **self._get_context_kwargs(),
        )

    def analysis_id_registered(self, analysis_id: str, persisted: bool) -> None:
        self._logger.info(
            "analysis_id_registered",
            analysis_id=analysis_id,
            persisted=persisted,
            **self._get_context_kwargs(),
        )

    def random_analysis_id_allocated(
        self, analysis_id: str, attempts: int, persisted: bool
    ) -> None:
        self._logger.debug(
            "random_analysis_id_allocated",
            analysis_id=analysis_id,
            attempts=attempts,
            persisted=persisted,
            **self._get_context_kwargs(),
        )

    def analysis_id_collision(self, candidate: str, attempt: int) -> None:
        self._logger.warning(
            "analysis_id_collision",
            candidate=candidate,
            attempt=attempt,
            **self._get_context_kwargs(),
        )

    def analysis_id_allocation_exhausted(self, retry_limit: int) -> None:
        self._logger.error(
            "analysis_id_allocation_exhausted",
            retry_limit=retry_limit,
            **self._get_context_kwargs(),
        )

    def client_closed(self, observed_count: int) -> None:
        self._logger.info(
            "id_client_closed",
            observed_count=observed_count,
            **self._get_context_kwargs(),
        )
