"""Tests for error normalization."""

import json

import pytest

from hubwire import (
    ApiResponse,
    GitHubAPIError,
    GitHubAuthError,
    GitHubMalformedResponseError,
    GitHubNotFoundError,
    GitHubRateLimitError,
    GitHubValidationError,
    error_message,
    parse_api_error,
    raise_for_error,
)


def _response(status_code: int, body) -> ApiResponse:
    return ApiResponse(status_code=status_code, text=json.dumps(body))


class TestErrorMessage:
    """Tests for message normalization."""

    def test_joins_field_errors(self):
        """Test field messages win over the top-level message."""
        api_error = parse_api_error(
            json.dumps({"message": "ignored", "errors": [{"message": "A"}, {"message": "B"}]})
        )
        assert error_message(api_error) == "A\nB"

    def test_falls_back_to_message(self):
        """Test empty errors list falls back to message."""
        api_error = parse_api_error(json.dumps({"message": "bad credentials", "errors": []}))
        assert error_message(api_error) == "bad credentials"

    def test_missing_errors_key(self):
        """Test absent errors key falls back to message."""
        api_error = parse_api_error(json.dumps({"message": "Not Found"}))
        assert error_message(api_error) == "Not Found"

    def test_errors_without_messages(self):
        """Test field errors carrying only codes fall back to message."""
        api_error = parse_api_error(
            json.dumps({"message": "Validation Failed", "errors": [{"resource": "Issue", "code": "missing_field"}]})
        )
        assert error_message(api_error) == "Validation Failed"

    def test_keeps_documentation_url(self):
        """Test documentation_url and field triples are parsed."""
        api_error = parse_api_error(
            json.dumps(
                {
                    "message": "Validation Failed",
                    "errors": [{"resource": "PullRequest", "code": "custom", "message": "No commits"}],
                    "documentation_url": "https://docs.github.com/rest",
                }
            )
        )
        assert api_error.documentation_url == "https://docs.github.com/rest"
        assert api_error.errors[0].resource == "PullRequest"
        assert api_error.errors[0].code == "custom"


class TestParseApiError:
    """Tests for malformed error bodies."""

    @pytest.mark.parametrize("text", ["<html>502 Bad Gateway</html>", "", "null", "[]", '{"errors": []}'])
    def test_malformed_body_raises(self, text):
        """Test unparseable bodies become GitHubMalformedResponseError."""
        with pytest.raises(GitHubMalformedResponseError) as exc_info:
            parse_api_error(text)
        assert exc_info.value.body == text


class TestRaiseForError:
    """Tests for status mapping."""

    @pytest.mark.parametrize(
        "status,message,error_cls",
        [
            (401, "Bad credentials", GitHubAuthError),
            (403, "API rate limit exceeded for user", GitHubRateLimitError),
            (403, "Resource not accessible by integration", GitHubAuthError),
            (404, "Not Found", GitHubNotFoundError),
            (422, "Validation Failed", GitHubValidationError),
            (500, "Server Error", GitHubAPIError),
        ],
    )
    def test_status_mapping(self, status, message, error_cls):
        """Test each status raises the matching exception type."""
        with pytest.raises(error_cls) as exc_info:
            raise_for_error(_response(status, {"message": message}))

        assert type(exc_info.value) is error_cls
        assert str(exc_info.value) == message
        assert exc_info.value.status_code == status

    def test_message_is_normalized(self):
        """Test raised text is the joined field errors."""
        body = {"message": "Validation Failed", "errors": [{"message": "A"}, {"message": "B"}]}
        with pytest.raises(GitHubValidationError) as exc_info:
            raise_for_error(_response(422, body))

        assert str(exc_info.value) == "A\nB"
        assert exc_info.value.api_error.message == "Validation Failed"

    def test_malformed_error_body(self):
        """Test an unreadable error body is not swallowed."""
        with pytest.raises(GitHubMalformedResponseError):
            raise_for_error(ApiResponse(status_code=502, text="Bad Gateway"))
