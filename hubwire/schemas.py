"""hubwire Pydantic schemas.

Wire entities returned by the GitHub REST API, the error body model, and the
request bodies sent by write operations.
"""

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from .exceptions import GitHubStateError

if TYPE_CHECKING:
    from .client import GitHubClient
    from .repository import Repository


# ============================================================================
# ACCOUNTS
# ============================================================================


class User(BaseModel):
    """GitHub account."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    login: str
    id: int | None = None
    html_url: str | None = None
    type: str | None = None


class Organization(BaseModel):
    """GitHub organization owning a repository."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    login: str
    id: int | None = None
    description: str | None = None


# ============================================================================
# BRANCHES
# ============================================================================


class CommitRef(BaseModel):
    """Commit a branch points to."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    sha: str
    url: str | None = None


class Branch(BaseModel):
    """Single line of a branch listing."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    commit: CommitRef


# ============================================================================
# BACK-REFERENCES
# ============================================================================


class RepositoryBound(BaseModel):
    """Entity that carries a client handle and its owning repository.

    Neither is part of the wire payload. The operation that produced the
    entity calls :meth:`attach` once, right after validation.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    _client: "GitHubClient | None" = PrivateAttr(default=None)
    _repository: "Repository | None" = PrivateAttr(default=None)

    def attach(self, client: "GitHubClient | None", repository: "Repository") -> None:
        if self._repository is not None:
            raise GitHubStateError(f"{type(self).__name__} is already attached to {self._repository}")
        self._client = client
        self._repository = repository

    @property
    def repository(self) -> "Repository":
        if self._repository is None:
            raise GitHubStateError(f"{type(self).__name__} is not attached to a repository")
        return self._repository

    @property
    def client(self) -> "GitHubClient | None":
        return self._client


# ============================================================================
# PULL REQUESTS
# ============================================================================


class PullRequestBranch(BaseModel):
    """Head or base side of a pull request."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    label: str | None = None
    ref: str
    sha: str | None = None
    user: User | None = None


class PullRequest(RepositoryBound):
    """Pull request."""

    number: int | None = None
    title: str
    body: str | None = None
    state: str | None = None
    html_url: str | None = None
    user: User | None = None
    head: PullRequestBranch | None = None
    base: PullRequestBranch | None = None


# ============================================================================
# ISSUES
# ============================================================================


class Issue(RepositoryBound):
    """Issue."""

    number: int | None = None
    title: str
    body: str | None = None
    state: str | None = None
    html_url: str | None = None
    user: User | None = None


# ============================================================================
# GIT REFERENCES
# ============================================================================


class GitObject(BaseModel):
    """Object a git reference points to."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    type: str
    sha: str
    url: str | None = None


class GitHubReference(RepositoryBound):
    """Git reference such as ``refs/heads/main``."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    ref: str
    url: str | None = None
    target: GitObject = Field(..., alias="object")


# ============================================================================
# ERROR MODEL
# ============================================================================


class ErrorDetail(BaseModel):
    """Field-level validation failure."""

    model_config = ConfigDict(extra="ignore")

    resource: str | None = None
    code: str | None = None
    message: str | None = None


class ApiError(BaseModel):
    """Body of a failed GitHub API response."""

    model_config = ConfigDict(extra="ignore")

    message: str
    errors: list[ErrorDetail] | None = None
    documentation_url: str | None = None


# ============================================================================
# REQUEST BODIES
# ============================================================================


class CreatePullRequestInput(BaseModel):
    """Body of ``POST /repos/{owner}/{repo}/pulls``.

    Aliases are the wire keys; dump with ``by_alias=True``.
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., description="Pull request title")
    body: str = Field("", description="Pull request description")
    head_branch: str = Field(..., alias="head", description="Branch with changes, e.g. 'octo:feature'")
    base_branch: str = Field(..., alias="base", description="Branch to merge into, e.g. 'main'")


class CreateIssueInput(BaseModel):
    """Body of ``POST /repos/{owner}/{repo}/issues``."""

    title: str = Field(..., description="Issue title")
    body: str = Field("", description="Issue body/description")


def dump_body(body: Any) -> Any:
    """Convert a request body into its JSON wire form."""
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", by_alias=True)
    return body
