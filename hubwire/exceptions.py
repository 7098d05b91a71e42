"""hubwire exceptions.

Custom exception hierarchy for GitHub API errors.
"""

from typing import Any


class GitHubError(Exception):
    """Base exception for hubwire."""

    pass


class GitHubTransportError(GitHubError):
    """Connection, TLS or timeout failure before any HTTP status was received."""

    pass


class GitHubAPIError(GitHubError):
    """Non-2xx response from the GitHub API.

    ``str(error)`` is the normalized message; the parsed error body is kept
    on ``api_error`` for callers that want ``documentation_url`` or the
    individual field errors.
    """

    def __init__(self, message: str, status_code: int | None = None, api_error: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.api_error = api_error


class GitHubAuthError(GitHubAPIError):
    """Invalid API token or insufficient permissions."""

    pass


class GitHubNotFoundError(GitHubAPIError):
    """Repository, issue, or PR not found (404 response)."""

    pass


class GitHubRateLimitError(GitHubAPIError):
    """Rate limit exceeded (403 with rate limit message)."""

    pass


class GitHubValidationError(GitHubAPIError):
    """Invalid input parameters (422 response)."""

    pass


class GitHubStateError(GitHubError):
    """Entity read or used in a state that does not support it."""

    pass


class GitHubMalformedResponseError(GitHubError):
    """Response body does not match the expected shape."""

    def __init__(self, message: str, body: str | None = None):
        super().__init__(message)
        self.body = body
