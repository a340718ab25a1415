"""Turns failed HTTP exchanges into `GravityRecEngError`.

Responsibility:
- Prefer the engine's own structured error when the body carries one.
- Otherwise synthesize one whose message holds everything an operator needs
  (status, URL, what was sent, what came back).
"""

from __future__ import annotations

import logging
from typing import Any, NoReturn

from pydantic import ValidationError

from recengclient.adapters.json_codec import JsonCodec
from recengclient.core.domain.models import RecEngErrorPayload
from recengclient.core.exceptions import GravityRecEngError

logger = logging.getLogger(__name__)

RESPONSE_DECODE_ERROR = "RESPONSE_DECODE_ERROR"


def http_error_code(status_code: int) -> str:
    return f"HTTP_{status_code}"


def render_request_body(body: Any, codec: JsonCodec) -> str:
    """Readable form of the request body; sequences are rendered item by item."""

    if body is None:
        return "null"
    if isinstance(body, (list, tuple)):
        return "[" + ", ".join(codec.encode(item) for item in body) + "]"
    return codec.encode(body)


def raise_for_error_response(
    *,
    status_code: int,
    url: str,
    response_text: str | None,
    request_body: Any,
    codec: JsonCodec,
) -> NoReturn:
    """Raise the error matching a non-2xx response. Never returns."""

    text = response_text or ""
    try:
        payload = codec.decode(text, RecEngErrorPayload)
    except ValidationError:
        logger.debug("Error body from %s is not a structured error payload", url)
        payload = RecEngErrorPayload(
            message=(
                f"Recommendation engine call failed with HTTP status {status_code}. "
                f"URL: {url}. "
                f"Request body: {render_request_body(request_body, codec)}. "
                f"Response body: {text}"
            ),
            error_code=http_error_code(status_code),
        )
    raise GravityRecEngError(payload, status_code=status_code)


def decode_failure(
    *,
    status_code: int,
    url: str,
    response_text: str,
    request_body: Any,
    codec: JsonCodec,
    cause: Exception,
) -> GravityRecEngError:
    """Error for a 2xx response whose body does not fit the expected shape."""

    payload = RecEngErrorPayload(
        message=(
            f"Could not decode the response of {url} (HTTP status {status_code}): "
            f"{cause.__class__.__name__}. "
            f"Request body: {render_request_body(request_body, codec)}. "
            f"Response body: {response_text}"
        ),
        error_code=RESPONSE_DECODE_ERROR,
    )
    return GravityRecEngError(payload, status_code=status_code)
