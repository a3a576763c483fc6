"""Domain exceptions for the Identifiers bounded context."""


class IdentifierError(Exception):
    """Base exception for identifier derivation and allocation."""

    pass


class PreconditionError(IdentifierError, ValueError):
    """Raised when a required string argument is None or empty."""

    pass


class ValidationError(IdentifierError, ValueError):
    """Raised when an identifier does not match its expected shape."""

    def __init__(self, message: str, value: str | None = None):
        super().__init__(message)
        self.value = value


class RetryExhaustedError(IdentifierError):
    """Raised when no unique analysis id was found within the retry limit."""

    def __init__(self, retry_limit: int):
        super().__init__(
            f"Exceeded max retry count of {retry_limit} for finding unique analysis id"
        )
        self.retry_limit = retry_limit


class IdentifierUnavailableError(IdentifierError):
    """Raised when a create operation finds no identifier to return.

    The hash client can always derive a value, but network-backed
    clients may report absence from their lookup operations.
    """

    def __init__(self, family: str, keys: tuple[str | None, ...]):
        super().__init__(f"Failed to create {family} id for keys {keys!r}")
        self.family = family
        self.keys = keys


class UnknownClientError(IdentifierError, ValueError):
    """Raised when the configured id client variant is not registered."""

    pass
