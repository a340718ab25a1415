"""One remote call, described as data."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote_plus


@dataclass(frozen=True)
class Operation:
    """A named engine method plus everything needed to call it.

    `name` is both the last path segment and the `method` query parameter.
    `response_shape` is only used when `expects_response` is true.
    """

    name: str
    query_params: dict[str, str] = field(default_factory=dict)
    request_body: Any = None
    expects_response: bool = False
    response_shape: Any = None

    def query_string(self) -> str:
        parts = [f"method={quote_plus(self.name)}"]
        for key, value in self.query_params.items():
            parts.append(f"{quote_plus(key)}={quote_plus(value)}")
        return "&".join(parts)

    def url(self, endpoint_url: str) -> str:
        return f"{endpoint_url}/{self.name}?{self.query_string()}"
