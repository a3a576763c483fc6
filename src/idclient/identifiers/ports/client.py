"""Id client protocol (port) for the Identifiers bounded context.

Lookup operations return None when a variant cannot find an identifier;
create operations always return one or raise.
"""

from __future__ import annotations

from types import TracebackType
from typing import Protocol, runtime_checkable

from identifiers.domain.exceptions import IdentifierUnavailableError
from identifiers.domain.value_objects import IdentifierFamily


@runtime_checkable
class IIdClient(Protocol):
    """Canonical identifier client capability set."""

    def get_donor_id(
        self, submitted_donor_id: str, submitted_project_id: str
    ) -> str | None:
        """Look up the donor id for a submitted donor within a project."""
        ...

    def get_specimen_id(
        self, submitted_specimen_id: str, submitted_project_id: str
    ) -> str | None:
        """Look up the specimen id for a submitted specimen within a project."""
        ...

    def get_sample_id(
        self, submitted_sample_id: str, submitted_project_id: str
    ) -> str | None:
        """Look up the sample id for a submitted sample within a project."""
        ...

    def get_file_id(
        self, submitted_file_id: str, submitted_project_id: str | None = None
    ) -> str | None:
        """Look up the file id for a submitted file."""
        ...

    def get_mutation_id(
        self,
        chromosome: str,
        chromosome_start: str,
        chromosome_end: str,
        mutation: str,
        mutation_type: str,
        assembly_version: str,
    ) -> str | None:
        """Look up the mutation id for a six-part mutation descriptor."""
        ...

    def get_object_id(self, analysis_id: str, file_name: str) -> str | None:
        """Look up the object id of a file within an analysis."""
        ...

    def get_analysis_id(self, submitted_analysis_id: str) -> str | None:
        """Return the analysis id if it is known, otherwise None.

        Raises:
            PreconditionError: If submitted_analysis_id is None or empty
            ValidationError: If submitted_analysis_id is malformed
        """
        ...

    def create_analysis_id(self, submitted_analysis_id: str) -> str:
        """Register a caller-chosen analysis id and return it unchanged.

        Raises:
            PreconditionError: If submitted_analysis_id is None or empty
            ValidationError: If submitted_analysis_id is malformed
        """
        ...

    def generate_unique_analysis_id(self) -> str:
        """Allocate a random analysis id not yet known to this client.

        Raises:
            RetryExhaustedError: If no unique candidate was found
        """
        ...

    def create_random_analysis_id(self) -> str:
        """Allocate and record a random analysis id without a uniqueness check."""
        ...

    def create_donor_id(self, submitted_donor_id: str, submitted_project_id: str) -> str:
        ...

    def create_specimen_id(
        self, submitted_specimen_id: str, submitted_project_id: str
    ) -> str:
        ...

    def create_sample_id(
        self, submitted_sample_id: str, submitted_project_id: str
    ) -> str:
        ...

    def create_file_id(
        self, submitted_file_id: str, submitted_project_id: str | None = None
    ) -> str:
        ...

    def create_mutation_id(
        self,
        chromosome: str,
        chromosome_start: str,
        chromosome_end: str,
        mutation: str,
        mutation_type: str,
        assembly_version: str,
    ) -> str:
        ...

    def create_object_id(self, analysis_id: str, file_name: str) -> str:
        ...

    def close(self) -> None:
        """Release any resources held by the client."""
        ...

    def __enter__(self) -> IIdClient:
        ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        ...


def require_identifier(
    identifier: str | None,
    family: IdentifierFamily,
    *keys: str | None,
) -> str:
    """Unwrap the result of a lookup for a create operation.

    Args:
        identifier: Result of the matching get_* operation
        family: Family the identifier belongs to
        *keys: Business keys used for the lookup, for the error message

    Returns:
        The identifier

    Raises:
        IdentifierUnavailableError: If identifier is None
    """
    if identifier is None:
        raise IdentifierUnavailableError(family.value, keys)
    return identifier
