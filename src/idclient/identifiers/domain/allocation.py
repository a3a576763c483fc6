"""Random analysis identifier allocation.

Random analysis ids are time-ordered UUID-form strings. Uniqueness is only
guaranteed against the identifiers one instance has observed; nothing here
coordinates with other instances.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, TypeAlias

from ulid import ULID

from identifiers.domain.observability import DefaultIdentifierProbe, IdentifierProbe
from identifiers.domain.observation_set import ObservationSet
from identifiers.domain.validation import DefaultIdentifierValidator, IdentifierValidator

RETRY_LIMIT = 1000

CandidateSource: TypeAlias = Callable[[], str]


def generate_time_ordered_uuid() -> str:
    """Generate a random, time-ordered identifier in canonical UUID form.

    A ULID carries a 48-bit millisecond timestamp followed by 80 random
    bits; rendered as a UUID it sorts by creation time.
    """
    return str(ULID().to_uuid())


@dataclass(frozen=True)
class Allocated:
    """A unique identifier was found."""

    identifier: str
    attempts: int


@dataclass(frozen=True)
class AllocationExhausted:
    """Every candidate within the retry limit was already observed."""

    attempts: int


AllocationResult: TypeAlias = Allocated | AllocationExhausted


class UniqueIdAllocator:
    """Allocates random identifiers unseen by this instance.

    Candidates come from an injectable source and are checked against the
    observation set. When persist is set, every identifier handed out is
    recorded so later allocations and lookups see it.

    Example:
        >>> allocator = UniqueIdAllocator(ObservationSet(), persist=True)
        >>> result = allocator.allocate()
        >>> isinstance(result, Allocated)
        True
    """

    def __init__(
        self,
        observed: ObservationSet,
        *,
        persist: bool = False,
        validator: IdentifierValidator | None = None,
        candidate_source: CandidateSource | None = None,
        retry_limit: int = RETRY_LIMIT,
        probe: IdentifierProbe | None = None,
    ) -> None:
        if retry_limit < 1:
            raise ValueError(f"retry_limit must be >= 1, got {retry_limit}")
        self._observed = observed
        self._persist = persist
        self._validator = validator or DefaultIdentifierValidator()
        self._candidate_source = candidate_source or generate_time_ordered_uuid
        self._retry_limit = retry_limit
        self._probe = probe or DefaultIdentifierProbe()

    @property
    def retry_limit(self) -> int:
        return self._retry_limit

    def allocate(self) -> AllocationResult:
        """Find a candidate that is not in the observation set.

        Examines at most retry_limit candidates. A candidate that fails
        UUID validation raises immediately and is never retried.

        Returns:
            Allocated with the identifier and the number of candidates
            examined, or AllocationExhausted after retry_limit collisions

        Raises:
            ValidationError: If a fresh candidate is not a canonical UUID
        """
        for attempt in range(1, self._retry_limit + 1):
            candidate = self._candidate_source()
            if candidate in self._observed:
                self._probe.analysis_id_collision(candidate, attempt)
                continue

            self._validator.validate_uuid(candidate)

            # Another thread may have recorded the same value since the check.
            if self._persist and not self._observed.add_if_absent(candidate):
                self._probe.analysis_id_collision(candidate, attempt)
                continue

            return Allocated(identifier=candidate, attempts=attempt)

        self._probe.analysis_id_allocation_exhausted(self._retry_limit)
        return AllocationExhausted(attempts=self._retry_limit)

    def allocate_and_reserve(self) -> str:
        """Generate one candidate and record it without a membership check.

        Raises:
            ValidationError: If the candidate is not a canonical UUID
        """
        candidate = self._candidate_source()
        self._validator.validate_uuid(candidate)
        if self._persist:
            self._observed.add(candidate)
        return candidate
