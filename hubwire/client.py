"""GitHub REST API client.

Executes built requests against the API host and maps response bodies onto
hubwire entities. HTTP-level failures are returned, not raised; only
transport failures raise.
"""

from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from hubwire_config.settings import Settings
from hubwire_obs.logging import get_logger

from .errors import raise_for_error
from .exceptions import GitHubMalformedResponseError, GitHubTransportError
from .repository import Repository
from .request import ApiRequest
from .schemas import User

logger = get_logger(__name__)


class ApiResponse(BaseModel):
    """Raw HTTP outcome of one request."""

    status_code: int
    text: str = ""

    @property
    def is_successful(self) -> bool:
        return 200 <= self.status_code < 300


class ApiResult(BaseModel):
    """Response plus the deserialized body (``None`` when the call failed)."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    response: ApiResponse
    data: Any = None

    @property
    def is_successful(self) -> bool:
        return self.response.is_successful


class GitHubClient:
    """Synchronous GitHub REST client.

    Provides:
    - Request execution over a shared httpx connection pool
    - Typed deserialization of success bodies
    - Transport error mapping
    - Entry points returning Repository objects bound to this client
    """

    BASE_URL = "https://api.github.com"

    def __init__(
        self,
        token: str | None = None,
        base_url: str = BASE_URL,
        timeout_seconds: float = 30,
        user_agent: str = "hubwire",
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize GitHub client.

        Args:
            token: GitHub personal access token (anonymous when None)
            base_url: API host
            timeout_seconds: Request timeout
            user_agent: User-Agent header value
            transport: Custom httpx transport (tests use httpx.MockTransport)
        """
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.user_agent = user_agent
        self._http = httpx.Client(
            base_url=self.base_url,
            headers=self._get_headers(),
            timeout=timeout_seconds,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "GitHubClient":
        """Build a client from application settings."""
        return cls(
            token=settings.GITHUB_TOKEN or None,
            base_url=settings.GITHUB_API_URL,
            timeout_seconds=settings.GITHUB_TIMEOUT_SECONDS,
            user_agent=settings.GITHUB_USER_AGENT,
            **kwargs,
        )

    def _get_headers(self) -> dict[str, str]:
        """Get request headers with authentication."""
        headers = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": self.user_agent,
        }
        if self.token:
            headers["Authorization"] = f"token {self.token}"
        return headers

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Request execution
    # ------------------------------------------------------------------

    def execute(self, request: ApiRequest) -> ApiResponse:
        """Send a request and return its raw outcome.

        Raises:
            GitHubTransportError: No HTTP response was obtained
            ValueError: Request path could not be built
        """
        path = request.path
        body = request.json_body()

        logger.debug("github_request", method=request.method, path=path)
        try:
            response = self._http.request(
                request.method,
                path,
                json=body,
            )
        except httpx.TransportError as e:
            logger.warning(
                "github_transport_error",
                method=request.method,
                path=path,
                error=str(e),
            )
            raise GitHubTransportError(f"{request.method} {path} failed: {e}") from e

        logger.debug("github_response", method=request.method, path=path, status=response.status_code)
        return ApiResponse(status_code=response.status_code, text=response.text)

    def _decode(self, response: ApiResponse, adapter: TypeAdapter) -> Any:
        try:
            return adapter.validate_json(response.text)
        except ValidationError as e:
            raise GitHubMalformedResponseError(
                f"Unexpected GitHub response body (HTTP {response.status_code}): "
                f"{e.error_count()} validation error(s)",
                body=response.text,
            ) from e

    def request(self, request: ApiRequest, model: type[BaseModel]) -> ApiResult:
        """Execute ``request``; on 2xx validate the body into ``model``."""
        response = self.execute(request)
        if not response.is_successful:
            return ApiResult(response=response)
        return ApiResult(response=response, data=self._decode(response, TypeAdapter(model)))

    def get(self, request: ApiRequest, model: type[BaseModel]) -> ApiResult:
        return self.request(request.model_copy(update={"method": "GET"}), model)

    def post(self, request: ApiRequest, model: type[BaseModel]) -> ApiResult:
        return self.request(request.model_copy(update={"method": "POST"}), model)

    def get_list(self, request: ApiRequest, model: type[BaseModel]) -> ApiResult:
        """GET a JSON array of ``model``.

        An empty body, ``null`` and ``[]`` all produce an empty list.
        """
        response = self.execute(request.model_copy(update={"method": "GET"}))
        if not response.is_successful:
            return ApiResult(response=response, data=[])
        if not response.text.strip():
            return ApiResult(response=response, data=[])
        items = self._decode(response, TypeAdapter(list[model] | None))
        return ApiResult(response=response, data=items or [])

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def get_repository(self, owner: str, name: str) -> Repository:
        """Fetch a single repository in detailed mode.

        Args:
            owner: Repository owner login
            name: Repository name

        Returns:
            Repository bound to this client, with ``parent`` readable

        Raises:
            GitHubNotFoundError: Repository does not exist or is hidden
            GitHubAPIError: Other API errors
        """
        request = ApiRequest(template="/repos/{owner}/{repo}", segments={"owner": owner, "repo": name})
        result = self.get(request, Repository)
        if not result.is_successful:
            raise_for_error(result.response)

        repository = result.data
        repository.mark_detailed()
        repository.bind(self)
        return repository

    def get_repositories(self, user: str) -> list[Repository]:
        """List a user's repositories (summary mode, ``parent`` not readable)."""
        request = ApiRequest(template="/users/{user}/repos", segments={"user": user})
        result = self.get_list(request, Repository)
        if not result.is_successful:
            raise_for_error(result.response)

        for repository in result.data:
            repository.bind(self)
        return result.data

    def get_current_user(self) -> User:
        """Return the account the token belongs to."""
        result = self.get(ApiRequest(template="/user"), User)
        if not result.is_successful:
            raise_for_error(result.response)
        return result.data
