"""Repository entity and the operations issued from it."""

from typing import TYPE_CHECKING, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, PrivateAttr

from hubwire_obs.logging import get_logger

from .errors import raise_for_error
from .exceptions import GitHubStateError
from .request import ApiRequest
from .schemas import (
    Branch,
    CreateIssueInput,
    CreatePullRequestInput,
    GitHubReference,
    Issue,
    Organization,
    PullRequest,
    RepositoryBound,
    User,
)

if TYPE_CHECKING:
    from .client import ApiResult, GitHubClient

logger = get_logger(__name__)


class Repository(BaseModel):
    """GitHub repository.

    ``detailed`` is True only for repositories fetched from the
    single-repository endpoint. Only those carry a readable ``parent``.
    Equality and hashing follow ``str(repo)``, i.e. ``owner/name``.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: str
    owner: User
    description: str | None = None
    homepage: str | None = None
    default_branch: str | None = None
    fork: bool = False
    forks: int = Field(0, validation_alias=AliasChoices("forks_count", "forks"))
    private: bool = False
    organization: Organization | None = None
    parent_repository: Optional["Repository"] = Field(None, alias="parent")

    # Clone URLs: git://, git@ (SSH) and https://
    git_url: str | None = None
    ssh_url: str | None = None
    clone_url: str | None = None

    _client: "GitHubClient | None" = PrivateAttr(default=None)
    _detailed: bool = PrivateAttr(default=False)

    @property
    def detailed(self) -> bool:
        return self._detailed

    def mark_detailed(self) -> None:
        """Record that this repository came from the single-repository endpoint."""
        self._detailed = True

    @property
    def parent(self) -> "Repository | None":
        """Repository this one was forked from.

        Raises:
            GitHubStateError: Repository was not fetched in detailed mode
        """
        if not self.detailed:
            raise GitHubStateError(f"{self} was fetched from a list endpoint; parent is only available on detailed fetch")
        return self.parent_repository

    def bind(self, client: "GitHubClient") -> None:
        """Attach the client used for every follow-up call."""
        if self._client is not None:
            raise GitHubStateError(f"{self} is already bound to a client")
        self._client = client

    @property
    def client(self) -> "GitHubClient":
        if self._client is None:
            raise GitHubStateError(f"{self} has no client; obtain it from GitHubClient")
        return self._client

    def __str__(self) -> str:
        return f"{self.owner.login}/{self.name}"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Repository) and str(self) == str(other)

    def __hash__(self) -> int:
        return hash((Repository, str(self)))

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def _request(self, template: str, body=None, **segments) -> ApiRequest:
        return ApiRequest(
            template=template,
            segments={"owner": self.owner.login, "repo": self.name, **segments},
            body=body,
        )

    def _bound(self, result: "ApiResult") -> RepositoryBound:
        if not result.is_successful:
            raise_for_error(result.response)
        entity = result.data
        entity.attach(self._client, self)
        return entity

    def create_fork(self) -> "Repository":
        """Fork this repository into the authenticated account.

        Returns:
            The new fork, bound to the same client
        """
        logger.info("github_create_fork", repository=str(self))
        result = self.client.post(self._request("/repos/{owner}/{repo}/forks"), Repository)
        if not result.is_successful:
            raise_for_error(result.response)

        forked = result.data
        forked.bind(self.client)
        return forked

    def get_branches(self) -> list[Branch]:
        """List all branches."""
        logger.info("github_get_branches", repository=str(self))
        result = self.client.get_list(self._request("/repos/{owner}/{repo}/branches"), Branch)
        if not result.is_successful:
            raise_for_error(result.response)
        return result.data

    def get_default_branch(self) -> str | None:
        """Fetch the repository in detailed mode and return its default branch name."""
        logger.info("github_get_default_branch", repository=str(self))
        result = self.client.get(self._request("/repos/{owner}/{repo}"), Repository)
        if not result.is_successful:
            raise_for_error(result.response)
        return result.data.default_branch

    def get_pull_requests(self) -> list[PullRequest]:
        """List open pull requests; empty list when there are none."""
        logger.info("github_get_pull_requests", repository=str(self))
        result = self.client.get_list(self._request("/repos/{owner}/{repo}/pulls"), PullRequest)
        if not result.is_successful:
            raise_for_error(result.response)

        for pull_request in result.data:
            pull_request.attach(self._client, self)
        return result.data

    def get_pull_request(self, number: int) -> PullRequest:
        """Get a single pull request by number."""
        logger.info("github_get_pull_request", repository=str(self), number=number)
        request = self._request("/repos/{owner}/{repo}/pulls/{pull}", pull=number)
        return self._bound(self.client.get(request, PullRequest))

    def create_pull_request(self, head: str, base: str, title: str, body: str = "") -> PullRequest:
        """Open a pull request.

        Args:
            head: Branch with the changes, e.g. ``mabako:new-awesome-thing``
            base: Branch to merge into, e.g. ``main``
            title: Pull request title
            body: Pull request description

        Returns:
            Created pull request attached to this repository
        """
        logger.info("github_create_pull_request", repository=str(self), head=head, base=base)
        payload = CreatePullRequestInput(title=title, body=body, head_branch=head, base_branch=base)
        request = self._request("/repos/{owner}/{repo}/pulls", body=payload)
        return self._bound(self.client.post(request, PullRequest))

    def get_ref(self, ref: str) -> GitHubReference:
        """Get a git reference, e.g. ``heads/main``."""
        logger.info("github_get_ref", repository=str(self), ref=ref)
        request = self._request("/repos/{owner}/{repo}/git/refs/{ref}", ref=ref)
        return self._bound(self.client.get(request, GitHubReference))

    def create_issue(self, title: str, body: str = "") -> Issue:
        """Open an issue."""
        logger.info("github_create_issue", repository=str(self))
        payload = CreateIssueInput(title=title, body=body)
        request = self._request("/repos/{owner}/{repo}/issues", body=payload)
        return self._bound(self.client.post(request, Issue))


Repository.model_rebuild()
