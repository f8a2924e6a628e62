"""Exceptions raised by the managed backend client."""


class BackendError(Exception):
    """Base exception for managed backend operations."""

    pass


class BackendConnectionError(BackendError):
    """Raised when the backend cannot be reached or times out."""

    pass


class BackendQueryError(BackendError):
    """Raised when the backend rejects a query or returns an unusable body."""

    def __init__(
        self,
        message: str,
        table: str | None = None,
        status_code: int | None = None,
    ):
        super().__init__(message)
        self.table = table
        self.status_code = status_code
