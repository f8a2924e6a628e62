"""Port-level exceptions for Tenancy bounded context.

Directory adapters raise these; the application services catch them at
their boundary and convert them into structured resolution outcomes.
"""


class DirectoryQueryError(Exception):
    """Raised when a directory query fails at the transport or service level.

    Covers connection failures, timeouts, HTTP error statuses and
    undecodable responses. An empty result is not an error.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
