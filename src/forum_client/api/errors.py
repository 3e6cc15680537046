"""Errors raised by the forum client."""


class ForumClientError(Exception):
    """Base class for forum client errors."""


class ForumAPIError(ForumClientError):
    """Raised when a backend request fails.

    Only the status code is surfaced; response bodies are never parsed for
    error detail. ``status_code`` is None when the request never produced a
    response (connection refused, DNS failure and so on).
    """

    def __init__(self, status_code: int | None, message: str | None = None):
        self.status_code = status_code
        if message is None:
            message = (
                f"HTTP error {status_code}"
                if status_code is not None
                else "Network error"
            )
        super().__init__(message)
        self.message = message
