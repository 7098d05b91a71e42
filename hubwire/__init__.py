"""hubwire: typed client for a subset of the GitHub REST API.

Covers repositories, pull requests, issues, branches and git references.

Usage:
    from hubwire import GitHubClient

    with GitHubClient(token="ghp_...") as client:
        repo = client.get_repository("octo", "hello")
        pr = repo.create_pull_request(head="octo:feature", base="main", title="Fix")
"""

from .client import ApiResponse, ApiResult, GitHubClient
from .errors import error_message, parse_api_error, raise_for_error
from .exceptions import (
    GitHubAPIError,
    GitHubAuthError,
    GitHubError,
    GitHubMalformedResponseError,
    GitHubNotFoundError,
    GitHubRateLimitError,
    GitHubStateError,
    GitHubTransportError,
    GitHubValidationError,
)
from .repository import Repository
from .request import ApiRequest, build_path
from .schemas import (
    ApiError,
    Branch,
    CommitRef,
    CreateIssueInput,
    CreatePullRequestInput,
    ErrorDetail,
    GitHubReference,
    GitObject,
    Issue,
    Organization,
    PullRequest,
    PullRequestBranch,
    User,
)

__all__ = [
    # Client
    "GitHubClient",
    "ApiRequest",
    "ApiResponse",
    "ApiResult",
    "build_path",
    # Errors
    "error_message",
    "parse_api_error",
    "raise_for_error",
    # Exceptions
    "GitHubError",
    "GitHubAPIError",
    "GitHubAuthError",
    "GitHubMalformedResponseError",
    "GitHubNotFoundError",
    "GitHubRateLimitError",
    "GitHubStateError",
    "GitHubTransportError",
    "GitHubValidationError",
    # Entities
    "Repository",
    "User",
    "Organization",
    "Branch",
    "CommitRef",
    "PullRequest",
    "PullRequestBranch",
    "Issue",
    "GitHubReference",
    "GitObject",
    # Error model
    "ApiError",
    "ErrorDetail",
    # Request bodies
    "CreatePullRequestInput",
    "CreateIssueInput",
]
