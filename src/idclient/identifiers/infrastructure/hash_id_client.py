"""Stateless hash-based id client.

Derives every entity identifier from its business keys, so no registry
service or database is needed. Analysis identifiers are either
caller-chosen or random; when persist_in_memory is enabled the client
remembers the ones it has accepted or issued for later lookups.
"""

from __future__ import annotations

from types import TracebackType

from identifiers.domain.allocation import (
    AllocationExhausted,
    CandidateSource,
    RETRY_LIMIT,
    UniqueIdAllocator,
)
from identifiers.domain.derivation import (
    HashIdGenerator,
    ObjectIdGenerator,
    require_text,
)
from identifiers.domain.exceptions import RetryExhaustedError
from identifiers.domain.observability import DefaultIdentifierProbe, IdentifierProbe
from identifiers.domain.observation_set import ObservationSet
from identifiers.domain.validation import DefaultIdentifierValidator, IdentifierValidator
from identifiers.domain.value_objects import IdentifierFamily
from identifiers.ports.client import require_identifier


class HashIdClient:
    """In-memory IIdClient returning stable ids derived from their inputs.

    Example:
        >>> with HashIdClient(persist_in_memory=True) as client:
        ...     client.create_analysis_id("EGAZ00001")
        ...     client.get_analysis_id("EGAZ00001")
        'EGAZ00001'
        'EGAZ00001'
    """

    def __init__(
        self,
        persist_in_memory: bool = False,
        *,
        service_uri: str | None = None,
        release: str | None = None,
        observed: ObservationSet | None = None,
        validator: IdentifierValidator | None = None,
        candidate_source: CandidateSource | None = None,
        retry_limit: int = RETRY_LIMIT,
        probe: IdentifierProbe | None = None,
    ) -> None:
        """Create a hash id client.

        Args:
            persist_in_memory: Record accepted and issued analysis ids
            service_uri: Accepted for parity with network-backed clients; unused
            release: Accepted for parity with network-backed clients; unused
            observed: Observation set to use; a new empty one by default
            validator: Identifier shape validator
            candidate_source: Source of random analysis id candidates
            retry_limit: Candidates examined before allocation gives up
            probe: Domain probe for observability
        """
        self._persist_in_memory = persist_in_memory
        self._service_uri = service_uri
        self._release = release
        self._observed = observed if observed is not None else ObservationSet()
        self._validator = validator or DefaultIdentifierValidator()
        self._probe = probe or DefaultIdentifierProbe()
        self._allocator = UniqueIdAllocator(
            self._observed,
            persist=persist_in_memory,
            validator=self._validator,
            candidate_source=candidate_source,
            retry_limit=retry_limit,
            probe=self._probe,
        )

    @property
    def persist_in_memory(self) -> bool:
        return self._persist_in_memory

    @property
    def observed(self) -> ObservationSet:
        """The analysis ids this client has recorded."""
        return self._observed

    def __enter__(self) -> HashIdClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # Analysis ids

    def get_analysis_id(self, submitted_analysis_id: str) -> str | None:
        self._check_analysis_id(submitted_analysis_id)
        if submitted_analysis_id in self._observed:
            return submitted_analysis_id
        return None

    def create_analysis_id(self, submitted_analysis_id: str) -> str:
        self._check_analysis_id(submitted_analysis_id)
        if self._persist_in_memory:
            self._observed.add(submitted_analysis_id)
        self._probe.analysis_id_registered(
            submitted_analysis_id, persisted=self._persist_in_memory
        )
        return submitted_analysis_id

    def generate_unique_analysis_id(self) -> str:
        result = self._allocator.allocate()
        if isinstance(result, AllocationExhausted):
            raise RetryExhaustedError(self._allocator.retry_limit)

        self._probe.random_analysis_id_allocated(
            result.identifier,
            attempts=result.attempts,
            persisted=self._persist_in_memory,
        )
        return result.identifier

    def create_random_analysis_id(self) -> str:
        analysis_id = self._allocator.allocate_and_reserve()
        self._probe.random_analysis_id_allocated(
            analysis_id, attempts=1, persisted=self._persist_in_memory
        )
        return analysis_id

    # Deterministic ids

    def get_donor_id(
        self, submitted_donor_id: str, submitted_project_id: str
    ) -> str | None:
        return self._derive(
            IdentifierFamily.DONOR, submitted_donor_id, submitted_project_id
        )

    def get_specimen_id(
        self, submitted_specimen_id: str, submitted_project_id: str
    ) -> str | None:
        return self._derive(
            IdentifierFamily.SPECIMEN, submitted_specimen_id, submitted_project_id
        )

    def get_sample_id(
        self, submitted_sample_id: str, submitted_project_id: str
    ) -> str | None:
        return self._derive(
            IdentifierFamily.SAMPLE, submitted_sample_id, submitted_project_id
        )

    def get_file_id(
        self, submitted_file_id: str, submitted_project_id: str | None = None
    ) -> str | None:
        # Legacy file ids hash the file id alone.
        if submitted_project_id is None:
            return self._derive(IdentifierFamily.FILE, submitted_file_id)
        return self._derive(
            IdentifierFamily.FILE, submitted_file_id, submitted_project_id
        )

    def get_mutation_id(
        self,
        chromosome: str,
        chromosome_start: str,
        chromosome_end: str,
        mutation: str,
        mutation_type: str,
        assembly_version: str,
    ) -> str | None:
        return self._derive(
            IdentifierFamily.MUTATION,
            chromosome,
            chromosome_start,
            chromosome_end,
            mutation,
            mutation_type,
            assembly_version,
        )

    def get_object_id(self, analysis_id: str, file_name: str) -> str | None:
        object_id = ObjectIdGenerator.generate(analysis_id, file_name)
        self._probe.identifier_derived(IdentifierFamily.OBJECT.value, object_id)
        return object_id

    def create_donor_id(self, submitted_donor_id: str, submitted_project_id: str) -> str:
        return require_identifier(
            self.get_donor_id(submitted_donor_id, submitted_project_id),
            IdentifierFamily.DONOR,
            submitted_donor_id,
            submitted_project_id,
        )

    def create_specimen_id(
        self, submitted_specimen_id: str, submitted_project_id: str
    ) -> str:
        return require_identifier(
            self.get_specimen_id(submitted_specimen_id, submitted_project_id),
            IdentifierFamily.SPECIMEN,
            submitted_specimen_id,
            submitted_project_id,
        )

    def create_sample_id(
        self, submitted_sample_id: str, submitted_project_id: str
    ) -> str:
        return require_identifier(
            self.get_sample_id(submitted_sample_id, submitted_project_id),
            IdentifierFamily.SAMPLE,
            submitted_sample_id,
            submitted_project_id,
        )

    def create_file_id(
        self, submitted_file_id: str, submitted_project_id: str | None = None
    ) -> str:
        return require_identifier(
            self.get_file_id(submitted_file_id, submitted_project_id),
            IdentifierFamily.FILE,
            submitted_file_id,
            submitted_project_id,
        )

    def create_mutation_id(
        self,
        chromosome: str,
        chromosome_start: str,
        chromosome_end: str,
        mutation: str,
        mutation_type: str,
        assembly_version: str,
    ) -> str:
        return require_identifier(
            self.get_mutation_id(
                chromosome,
                chromosome_start,
                chromosome_end,
                mutation,
                mutation_type,
                assembly_version,
            ),
            IdentifierFamily.MUTATION,
            chromosome,
            chromosome_start,
            chromosome_end,
            mutation,
            mutation_type,
            assembly_version,
        )

    def create_object_id(self, analysis_id: str, file_name: str) -> str:
        return require_identifier(
            self.get_object_id(analysis_id, file_name),
            IdentifierFamily.OBJECT,
            analysis_id,
            file_name,
        )

    def close(self) -> None:
        """Nothing to release; the observation set is kept until garbage collection."""
        self._probe.client_closed(observed_count=len(self._observed))

    def _derive(self, family: IdentifierFamily, *keys: str) -> str:
        identifier = HashIdGenerator.generate(family, *keys)
        self._probe.identifier_derived(family.value, identifier)
        return identifier

    def _check_analysis_id(self, submitted_analysis_id: str) -> None:
        require_text("submitted_analysis_id", submitted_analysis_id)
        self._validator.validate_analysis_id(submitted_analysis_id)
