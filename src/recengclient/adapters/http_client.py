"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts, headers and authentication for every operation.
- Eases testing: a `httpx.MockTransport` can be passed in place of the network.
"""

from __future__ import annotations

import base64

import httpx

from recengclient.core.config import CLIENT_VERSION, ClientSettings

CLIENT_VERSION_HEADER = "X-Gravity-RecEng-PythonClient-Webshop-Version"
JSON_CONTENT_TYPE = "application/json; charset=utf-8"


def basic_auth_header(username: str, password: str) -> str:
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


def build_client(
    settings: ClientSettings,
    *,
    transport: httpx.BaseTransport | None = None,
    extra_headers: dict[str, str] | None = None,
) -> httpx.Client:
    """Create a `httpx.Client` for a single call.

    Why per call:
    - Every operation gets a fresh connection and releases it when the `with`
      block exits, whatever the outcome.
    - Credentials go into this client's headers only; nothing is installed
      process-wide, so several configured clients can coexist.
    """

    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        CLIENT_VERSION_HEADER: CLIENT_VERSION,
        "Content-Type": JSON_CONTENT_TYPE,
        "Accept": "application/json",
    }
    if settings.username is not None and settings.password is not None:
        headers["Authorization"] = basic_auth_header(settings.username, settings.password)
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        timeout=httpx.Timeout(settings.timeout_seconds),
        follow_redirects=False,
        headers=headers,
        transport=transport,
    )
