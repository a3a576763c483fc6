"""Observation context for domain-oriented observability.

Observation contexts collect and manage contextual metadata for
instrumentation, following the Domain Oriented Observability pattern.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ObservationContext:
    """Immutable context containing metadata for observability.

    Attributes:
        request_id: Identifier of the current request/operation.
        client: Name of the id client variant emitting events.
        release: Release the identifiers are being assigned for.
        extra: Additional contextual metadata.

    Example:
        context = ObservationContext(client="hash", release="ICGC27")
        probe = DefaultIdentifierProbe().with_context(context)
    """

    request_id: str | None = None
    client: str | None = None
    release: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        """Convert context to a dictionary for logging.

        Only includes non-None values to keep logs clean.
        """
        result: dict[str, Any] = {}
        if self.request_id is not None:
            result["request_id"] = self.request_id
        if self.client is not None:
            result["client"] = self.client
        if self.release is not None:
            result["release"] = self.release
        result.update(self.extra)
        return result

    def with_request(self, request_id: str) -> ObservationContext:
        """Create a new context with the request id set."""
        return ObservationContext(
            request_id=request_id,
            client=self.client,
            release=self.release,
            extra=self.extra,
        )

    def with_extra(self, **kwargs: Any) -> ObservationContext:
        """Create a new context with additional metadata."""
        return ObservationContext(
            request_id=self.request_id,
            client=self.client,
            release=self.release,
            extra={**self.extra, **kwargs},
        )
