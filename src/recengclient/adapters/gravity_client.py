"""Client for the recommendation engine webshop interface.

Every public method maps to exactly one engine method, sent as
`POST {endpoint}/{method}?method={method}&...` with a JSON body.

Example::

    settings = ClientSettings(
        endpoint_url="https://saas.example.com/grrec-CustomerID-war/WebshopServlet",
        username="sampleUser",
        password="samplePasswd",
    )
    client = GravityClient(settings)
    context = RecommendationContextBuilder("ITEM_PAGE", 10).build()
    recommendation = client.get_item_recommendation("user1", "cookie1", context)
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

import httpx
from pydantic import ValidationError

from recengclient.adapters.error_translator import decode_failure, raise_for_error_response
from recengclient.adapters.http_client import build_client
from recengclient.adapters.json_codec import JsonCodec, default_codec
from recengclient.core.config import ClientSettings
from recengclient.core.domain.models import (
    Event,
    Item,
    ItemRecommendation,
    RecommendationContext,
    Scenario,
    User,
)
from recengclient.core.domain.operation import Operation

logger = logging.getLogger(__name__)


def _bool_param(value: bool) -> str:
    return "true" if value else "false"


def _identity_params(user_id: str | None, cookie_id: str | None) -> dict[str, str]:
    params: dict[str, str] = {}
    if user_id is not None:
        params["userId"] = user_id
    if cookie_id is not None:
        params["cookieId"] = cookie_id
    return params


class GravityClient:
    """Sends catalog data and events to the engine and fetches recommendations.

    Calls are synchronous and blocking; there are no retries. Settings are
    frozen, so an instance may be shared between threads. To change the
    endpoint or credentials, create a new client with new settings.

    Raises (from every remote method):
    - `ConfigurationError` before any I/O when endpoint/credentials are missing.
    - `GravityRecEngError` on a non-2xx status or an undecodable 2xx body.
    - `httpx.TransportError` subclasses on network failures and timeouts.
    """

    def __init__(
        self,
        settings: ClientSettings | None = None,
        *,
        codec: JsonCodec | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._settings = settings or ClientSettings()
        self._codec = codec or default_codec
        self._transport = transport

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    # -- catalog and events -------------------------------------------------

    def add_events(self, events: Sequence[Event], is_async: bool = False) -> None:
        """Add events. With `is_async` the engine answers after input checking only."""

        self._send(
            Operation("addEvents", {"async": _bool_param(is_async)}, list(events))
        )

    def add_users(self, users: Sequence[User], is_async: bool = False) -> None:
        """Add or replace users (a known `user_id` is overwritten entirely)."""

        self._send(
            Operation("addUsers", {"async": _bool_param(is_async)}, list(users))
        )

    def add_items(self, items: Sequence[Item], is_async: bool = False) -> None:
        """Add or replace items, including all their name/value pairs."""

        self._send(
            Operation("addItems", {"async": _bool_param(is_async)}, list(items))
        )

    # -- recommendations ----------------------------------------------------

    def get_item_recommendation(
        self,
        user_id: str | None,
        cookie_id: str | None,
        context: RecommendationContext,
    ) -> ItemRecommendation:
        """Recommended items for one scenario.

        `user_id` is `None` when nobody is logged in; `cookie_id` should always
        be given.
        """

        return self._send(
            Operation(
                "getItemRecommendation",
                _identity_params(user_id, cookie_id),
                context,
                expects_response=True,
                response_shape=ItemRecommendation,
            )
        )

    def get_item_recommendation_bulk(
        self,
        user_id: str | None,
        cookie_id: str | None,
        contexts: Sequence[RecommendationContext],
    ) -> list[ItemRecommendation]:
        """One recommendation per context, in the order of `contexts`."""

        return self._send(
            Operation(
                "getItemRecommendationBulk",
                _identity_params(user_id, cookie_id),
                list(contexts),
                expects_response=True,
                response_shape=list[ItemRecommendation],
            )
        )

    def get_scenario_information(self) -> list[Scenario]:
        return self._send(
            Operation(
                "getScenarioInformation",
                expects_response=True,
                response_shape=list[Scenario],
            )
        )

    # -- lookups ------------------------------------------------------------

    def get_user_by_user_id(self, user_id: str) -> User:
        return self._send(
            Operation(
                "getUserByUserId",
                {"userId": user_id},
                expects_response=True,
                response_shape=User,
            )
        )

    def get_user_by_cookie_id(self, cookie_id: str) -> User:
        return self._send(
            Operation(
                "getUserByCookieId",
                {"cookieId": cookie_id},
                expects_response=True,
                response_shape=User,
            )
        )

    def get_events_by_user_id(self, user_id: str, limit: int = 0) -> list[Event]:
        """Latest events of a user; `limit <= 0` lets the engine decide."""

        return self._events_by("getEventsByUserId", "userId", user_id, limit)

    def get_events_by_cookie_id(self, cookie_id: str, limit: int = 0) -> list[Event]:
        return self._events_by("getEventsByCookieId", "cookieId", cookie_id, limit)

    def _events_by(self, method: str, key: str, value: str, limit: int) -> list[Event]:
        params = {key: value}
        if limit > 0:
            params["limit"] = str(limit)
        return self._send(
            Operation(method, params, expects_response=True, response_shape=list[Event])
        )

    # -- diagnostics --------------------------------------------------------

    def test(self, name: str) -> str:
        """Side-effect free liveness check; the engine echoes a greeting."""

        return self._send(
            Operation("test", {"name": name}, name, expects_response=True, response_shape=str)
        )

    def test_exception(self) -> None:
        """Ask the engine to fail, to check that its errors decode properly."""

        self._send(Operation("testException"))

    # -- transport ----------------------------------------------------------

    def _send(self, operation: Operation) -> Any:
        settings = self._settings
        endpoint_url = settings.require_remote()

        url = operation.url(endpoint_url)
        content = self._codec.encode(operation.request_body).encode("utf-8")
        logger.debug(
            "Calling %s",
            operation.name,
            extra={"method": operation.name, "url": url, "body_bytes": len(content)},
        )

        with build_client(settings, transport=self._transport) as client:
            response = client.post(url, content=content)
            response_text = response.content.decode("utf-8", errors="replace")

        if not response.is_success:
            logger.warning(
                "Recommendation engine returned HTTP %s for %s",
                response.status_code,
                operation.name,
                extra={"method": operation.name, "status_code": response.status_code},
            )
            raise_for_error_response(
                status_code=response.status_code,
                url=url,
                response_text=response_text,
                request_body=operation.request_body,
                codec=self._codec,
            )

        if not operation.expects_response:
            return None

        try:
            return self._codec.decode(response_text, operation.response_shape)
        except ValidationError as exc:
            logger.warning(
                "Undecodable response for %s",
                operation.name,
                extra={"method": operation.name, "status_code": response.status_code},
            )
            raise decode_failure(
                status_code=response.status_code,
                url=url,
                response_text=response_text,
                request_body=operation.request_body,
                codec=self._codec,
                cause=exc,
            ) from exc
