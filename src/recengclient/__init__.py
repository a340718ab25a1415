"""Python client for the Gravity recommendation engine webshop interface."""

from recengclient.adapters.gravity_client import GravityClient
from recengclient.adapters.json_codec import JsonCodec
from recengclient.core.config import CLIENT_VERSION, ClientSettings
from recengclient.core.domain.facets import (
    FacetRequest,
    Filter,
    FilterLogic,
    Range,
    RangeFacetRequest,
    TermFacetRequest,
    TermOrder,
)
from recengclient.core.domain.models import (
    Event,
    Item,
    ItemRecommendation,
    NameValue,
    RecEngErrorPayload,
    RecommendationContext,
    Scenario,
    User,
)
from recengclient.core.exceptions import ConfigurationError, GravityRecEngError, RecEngClientError
from recengclient.core.services.context_builder import (
    FacetBuilder,
    RangeFacetBuilder,
    RecommendationContextBuilder,
    TermFacetBuilder,
)

__version__ = CLIENT_VERSION

__all__ = [
    "ClientSettings",
    "ConfigurationError",
    "Event",
    "FacetBuilder",
    "FacetRequest",
    "Filter",
    "FilterLogic",
    "GravityClient",
    "GravityRecEngError",
    "Item",
    "ItemRecommendation",
    "JsonCodec",
    "NameValue",
    "Range",
    "RangeFacetBuilder",
    "RangeFacetRequest",
    "RecEngClientError",
    "RecEngErrorPayload",
    "RecommendationContext",
    "RecommendationContextBuilder",
    "Scenario",
    "TermFacetBuilder",
    "TermFacetRequest",
    "TermOrder",
    "User",
]
