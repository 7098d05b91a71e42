"""Error normalization for failed GitHub API responses."""

from typing import TYPE_CHECKING, NoReturn

from pydantic import ValidationError

from .exceptions import (
    GitHubAPIError,
    GitHubAuthError,
    GitHubMalformedResponseError,
    GitHubNotFoundError,
    GitHubRateLimitError,
    GitHubValidationError,
)
from .schemas import ApiError

if TYPE_CHECKING:
    from .client import ApiResponse


def parse_api_error(text: str) -> ApiError:
    """Parse a failed response body into the error model.

    Raises:
        GitHubMalformedResponseError: Body is not JSON or not an error object
    """
    try:
        return ApiError.model_validate_json(text)
    except ValidationError as e:
        raise GitHubMalformedResponseError(
            f"Unreadable GitHub error body: {e.error_count()} validation error(s)",
            body=text,
        ) from e


def error_message(api_error: ApiError) -> str:
    """Join field-level messages; fall back to the top-level message."""
    joined = "\n".join(e.message for e in api_error.errors or [] if e.message)
    return joined or api_error.message


def raise_for_error(response: "ApiResponse") -> NoReturn:
    """Map a failed response to a single GitHubAPIError subclass."""
    api_error = parse_api_error(response.text)
    message = error_message(api_error)
    status = response.status_code

    if status == 401:
        error_cls = GitHubAuthError
    elif status == 403:
        # Check if it's a rate limit error
        if "rate limit" in api_error.message.lower():
            error_cls = GitHubRateLimitError
        else:
            error_cls = GitHubAuthError
    elif status == 404:
        error_cls = GitHubNotFoundError
    elif status == 422:
        error_cls = GitHubValidationError
    else:
        error_cls = GitHubAPIError

    raise error_cls(message, status_code=status, api_error=api_error)
