"""Store error taxonomy shared by the gateway and the HTTP layer."""

from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    ConnectionClosedError,
    ConnectTimeoutError,
    EndpointConnectionError,
    ReadTimeoutError,
)

_RETRYABLE_CODES = frozenset(
    {
        "ProvisionedThroughputExceededException",
        "RequestLimitExceeded",
        "ThrottlingException",
        "InternalServerError",
        "ServiceUnavailable",
        "RequestTimeoutException",
        "TransactionConflictException",
    }
)

_RETRYABLE_TRANSPORT_ERRORS = (
    EndpointConnectionError,
    ConnectTimeoutError,
    ReadTimeoutError,
    ConnectionClosedError,
)


class UserStoreError(Exception):
    """Raised when a call to the user table fails.

    Attributes:
        message: Human-readable error message
        operation: Store operation that failed (e.g. ``Scan``, ``GetItem``)
        code: Error code reported by the store, if any
        retryable: Whether the failure looks transient (throttling, network)
    """

    def __init__(
        self,
        message: str,
        *,
        operation: str,
        code: str | None = None,
        retryable: bool = False,
    ) -> None:
        self.message = message
        self.operation = operation
        self.code = code
        self.retryable = retryable
        super().__init__(message)

    def __str__(self) -> str:
        kind = "retryable" if self.retryable else "terminal"
        code = f" [{self.code}]" if self.code else ""
        return f"{self.operation} failed{code} ({kind}): {self.message}"


def store_error_from(error: Exception, operation: str) -> UserStoreError:
    """Convert a botocore failure into a ``UserStoreError``."""
    if isinstance(error, ClientError):
        details = error.response.get("Error", {})
        code = details.get("Code", "Unknown")
        return UserStoreError(
            details.get("Message") or str(error),
            operation=operation,
            code=code,
            retryable=code in _RETRYABLE_CODES,
        )
    if isinstance(error, BotoCoreError):
        return UserStoreError(
            str(error),
            operation=operation,
            code=type(error).__name__,
            retryable=isinstance(error, _RETRYABLE_TRANSPORT_ERRORS),
        )
    return UserStoreError(str(error), operation=operation)
