"""Wire records exchanged with the recommendation engine (Pydantic v2).

Why Pydantic here:
- One declaration gives validation on decode and camelCase serialization on
  encode (`alias_generator=to_camel`).
- `extra="ignore"` keeps old clients working when the server adds fields.

Note:
- These models describe *what* travels over the wire, not *how* it is sent.
"""

from __future__ import annotations

import time
from typing import Any

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

from recengclient.core.domain.facets import FacetRequest


def _unix_now() -> int:
    return int(time.time())


class WireModel(BaseModel):
    """Base for every JSON payload: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, alias_generator=to_camel)


class NameValue(WireModel):
    name: str = Field(..., description="Attribute name, e.g. 'categoryId'.")
    value: str | None = Field(default=None, description="Attribute value as text.")


class Event(WireModel):
    """A user interaction (view, buy, add to cart, ...) reported to the engine."""

    event_type: str = Field(..., description="Event type, e.g. 'VIEW' or 'BUY'.")
    item_id: str | None = None
    user_id: str | None = None
    cookie_id: str | None = None
    time: int = Field(
        default_factory=_unix_now,
        description="Unix timestamp (seconds) of the event.",
    )
    recommendation_id: str | None = Field(
        default=None,
        description="Id of the recommendation that led to this event, if any.",
    )
    name_values: list[NameValue] = Field(default_factory=list)


class Item(WireModel):
    """A catalog item. Re-sending an item replaces it entirely."""

    item_id: str
    title: str | None = None
    hidden: bool = Field(default=False, description="Hidden items are never recommended.")
    from_date: int | None = None
    to_date: int | None = None
    name_values: list[NameValue] = Field(default_factory=list)


class User(WireModel):
    user_id: str
    hidden: bool = False
    name_values: list[NameValue] = Field(default_factory=list)


class Scenario(WireModel):
    scenario_id: str
    name: str | None = None
    description: str | None = None


class RecommendationContext(WireModel):
    """Everything the engine needs to answer one recommendation request.

    Built by `RecommendationContextBuilder`; frozen once built. The asymmetry
    is part of the wire contract: `name_values` and `result_name_values` are
    always sent (possibly empty) while `result_name_value_filters` and `facets`
    are `null` when unused.
    """

    model_config = ConfigDict(frozen=True)

    scenario_id: str
    number_limit: int = Field(..., description="Maximum number of recommended items.")
    recommendation_time: int = Field(default_factory=_unix_now)
    name_values: tuple[NameValue, ...] = ()
    result_name_values: tuple[str, ...] = Field(
        default=(),
        description="Item attributes to return alongside the recommended ids.",
    )
    result_name_value_filters: dict[str, tuple[str, ...]] | None = None
    facets: tuple[FacetRequest, ...] | None = None


class ItemRecommendation(WireModel):
    """Answer of the engine for one context."""

    item_ids: list[str] = Field(default_factory=list)
    recommendation_id: str | None = None
    prediction_values: list[float] | None = None
    items: list[Item] | None = Field(
        default=None,
        description="Item details, filled when result name values were requested.",
    )
    facets: list[dict[str, Any]] | None = None


class RecEngErrorPayload(WireModel):
    """Structured error returned by the engine (or synthesized by the client)."""

    message: str
    error_code: str | None = None
