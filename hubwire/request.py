"""Request construction.

Endpoint templates use named placeholders, e.g. ``/repos/{owner}/{repo}/pulls/{pull}``.
"""

import re
from typing import Any, Literal
from urllib.parse import quote

from pydantic import BaseModel, Field

from .schemas import dump_body

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


def build_path(template: str, segments: dict[str, Any]) -> str:
    """Substitute every placeholder in ``template`` with its segment value.

    Values are percent-encoded except for ``/``, so ``heads/main`` stays a
    multi-segment ref while ``#`` and ``?`` cannot end the path early.
    Unused segment values are ignored.

    Raises:
        ValueError: A placeholder has no value
    """

    def _substitute(match: re.Match) -> str:
        name = match.group(1)
        if name not in segments:
            raise ValueError(f"Missing value for path segment '{name}' in {template}")
        return quote(str(segments[name]), safe="/")

    return _PLACEHOLDER.sub(_substitute, template)


class ApiRequest(BaseModel):
    """Single REST call: method, endpoint template, segments, optional JSON body."""

    method: Literal["GET", "POST"] = "GET"
    template: str
    segments: dict[str, Any] = Field(default_factory=dict)
    body: Any = None

    @property
    def path(self) -> str:
        return build_path(self.template, self.segments)

    def json_body(self) -> Any:
        return dump_body(self.body)
