"""Exceptions raised by the recommendation engine client.

Why a dedicated module:
- Callers catch one base class (`RecEngClientError`) regardless of the layer
  that failed.
- The structured remote error is a plain value (`RecEngErrorPayload`); the
  exception only carries it, so it can be logged or returned without unwinding.

Transport failures (DNS, connect, timeout) are NOT wrapped: they surface as
`httpx.TransportError` subclasses.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from recengclient.core.domain.models import RecEngErrorPayload


class RecEngClientError(Exception):
    """Base exception for every error raised by this library."""


class ConfigurationError(RecEngClientError, ValueError):
    """Local misconfiguration detected before anything is sent.

    Examples: missing endpoint/credentials, a range facet without ranges,
    name/value sequences of different lengths.
    """


class GravityRecEngError(RecEngClientError):
    """The recommendation engine rejected a call or answered with garbage."""

    def __init__(self, error: RecEngErrorPayload, *, status_code: int | None = None) -> None:
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code

    @property
    def message(self) -> str:
        return self.error.message

    @property
    def error_code(self) -> str | None:
        return self.error.error_code

    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message
