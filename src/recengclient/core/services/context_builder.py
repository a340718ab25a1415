"""Fluent builders for recommendation contexts and facet requests.

Why builders:
- A context has several optional collections; accumulating them step by step
  reads better at the call site than one constructor with eight arguments.
- Normalization rules (deduplication, empty -> `None`) live in `build()` so
  the resulting `RecommendationContext` is always wire-ready.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Generic, Iterable, Iterator, Sequence, TypeVar, Union

from pydantic import ValidationError

from recengclient.core.domain.facets import (
    FacetRequest,
    Filter,
    FilterLogic,
    Range,
    RangeFacetRequest,
    TermFacetRequest,
    TermOrder,
)
from recengclient.core.domain.models import NameValue, RecommendationContext
from recengclient.core.exceptions import ConfigurationError

F = TypeVar("F")
B = TypeVar("B", bound="FacetRequestBuilder")


@contextmanager
def _invalid_as_configuration_error(what: str) -> Iterator[None]:
    try:
        yield
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid {what}: {exc}") from exc


def _name_value(name: str, value: str | None) -> NameValue:
    with _invalid_as_configuration_error("name value"):
        return NameValue(name=name, value=value)


def _range(from_: float | None, to: float | None) -> Range:
    with _invalid_as_configuration_error("range"):
        return Range(from_=from_, to=to)


class FacetRequestBuilder(ABC, Generic[F]):
    """Shared part of the facet builders: field name and optional filter."""

    _filter_model: type[Filter] = Filter

    def __init__(self, field: str) -> None:
        self._field = field
        self._filter_logic: FilterLogic | None = None
        self._filter_values: list[F] = []

    def filter_logic(self: B, logic: FilterLogic) -> B:
        self._filter_logic = logic
        return self

    def filter_value(self: B, value: F) -> B:
        self._filter_values.append(value)
        return self

    def filter_values(self: B, values: Iterable[F]) -> B:
        self._filter_values.extend(values)
        return self

    def _build_filter(self) -> Filter | None:
        if not self._filter_values:
            return None
        with _invalid_as_configuration_error(f"filter of facet '{self._field}'"):
            return self._filter_model(logic=self._filter_logic, values=tuple(self._filter_values))

    @abstractmethod
    def build(self) -> FacetRequest:
        """Validated facet request for the engine."""


class TermFacetBuilder(FacetRequestBuilder[str]):
    _filter_model = Filter[str]

    def __init__(self, field: str, count: int) -> None:
        super().__init__(field)
        self._count = count
        self._order: TermOrder | None = None

    def order(self, order: TermOrder) -> "TermFacetBuilder":
        self._order = order
        return self

    def build(self) -> TermFacetRequest:
        facet_filter = self._build_filter()
        with _invalid_as_configuration_error(f"term facet '{self._field}'"):
            return TermFacetRequest(
                field=self._field,
                count=self._count,
                order=self._order,
                filter=facet_filter,
            )


class RangeFacetBuilder(FacetRequestBuilder[Range]):
    _filter_model = Filter[Range]

    def __init__(self, field: str, ranges: Iterable[Range] | None = None) -> None:
        super().__init__(field)
        self._ranges: list[Range] = list(ranges or [])

    def add_range(self, from_: float | None = None, to: float | None = None) -> "RangeFacetBuilder":
        self._ranges.append(_range(from_, to))
        return self

    def add_ranges(self, ranges: Iterable[Range]) -> "RangeFacetBuilder":
        self._ranges.extend(ranges)
        return self

    def filter_range(self, from_: float | None = None, to: float | None = None) -> "RangeFacetBuilder":
        self._filter_values.append(_range(from_, to))
        return self

    def build(self) -> RangeFacetRequest:
        if not self._ranges:
            raise ConfigurationError(f"Range facet '{self._field}' needs at least one range.")
        facet_filter = self._build_filter()
        with _invalid_as_configuration_error(f"range facet '{self._field}'"):
            return RangeFacetRequest(
                field=self._field,
                ranges=tuple(self._ranges),
                filter=facet_filter,
            )


class FacetBuilder:
    """Entry points: `FacetBuilder.term("brand", 10)`, `FacetBuilder.range("price")`."""

    @staticmethod
    def term(field: str, count: int) -> TermFacetBuilder:
        return TermFacetBuilder(field, count)

    @staticmethod
    def range(field: str, ranges: Iterable[Range] | None = None) -> RangeFacetBuilder:
        return RangeFacetBuilder(field, ranges)


class RecommendationContextBuilder:
    """Accumulates the parameters of one recommendation request.

    Example::

        context = (
            RecommendationContextBuilder("ITEM_PAGE", 10)
            .add_name_value("currentItemId", "item-42")
            .add_result_name_value("title")
            .add_facet(FacetBuilder.term("brand", 5).filter_value("acme"))
            .build()
        )
    """

    def __init__(self, scenario_id: str, number_limit: int) -> None:
        self._scenario_id = scenario_id
        self._number_limit = number_limit
        self._recommendation_time = int(time.time())
        self._name_values: list[NameValue] = []
        # dict keeps first-insertion order while deduplicating.
        self._result_name_values: dict[str, None] = {}
        self._result_name_value_filters: dict[str, tuple[str, ...]] = {}
        self._facets: list[FacetRequest] = []

    def set_recommendation_time(self, recommendation_time: int) -> "RecommendationContextBuilder":
        self._recommendation_time = int(recommendation_time)
        return self

    def add_name_value(self, name: str, value: str | None) -> "RecommendationContextBuilder":
        self._name_values.append(_name_value(name, value))
        return self

    def add_name_values(
        self, names: Sequence[str], values: Sequence[str | None]
    ) -> "RecommendationContextBuilder":
        if len(names) != len(values):
            raise ConfigurationError(
                f"Size of names and values should be equal ({len(names)} != {len(values)})."
            )
        for name, value in zip(names, values):
            self._name_values.append(_name_value(name, value))
        return self

    def add_name_value_pairs(
        self, pairs: Iterable[Union[NameValue, tuple[str, str | None]]]
    ) -> "RecommendationContextBuilder":
        for pair in pairs:
            if isinstance(pair, NameValue):
                self._name_values.append(pair)
            else:
                name, value = pair
                self._name_values.append(_name_value(name, value))
        return self

    def add_result_name_value(self, name: str) -> "RecommendationContextBuilder":
        self._result_name_values.setdefault(name, None)
        return self

    def add_result_name_values(self, names: Iterable[str]) -> "RecommendationContextBuilder":
        for name in names:
            self._result_name_values.setdefault(name, None)
        return self

    def add_result_name_value_filter(
        self, name: str, values: Iterable[str]
    ) -> "RecommendationContextBuilder":
        self._result_name_value_filters[name] = tuple(dict.fromkeys(values))
        return self

    def add_facet(
        self, facet: Union[TermFacetRequest, RangeFacetRequest, FacetRequestBuilder]
    ) -> "RecommendationContextBuilder":
        if isinstance(facet, FacetRequestBuilder):
            facet = facet.build()
        self._facets.append(facet)
        return self

    def build(self) -> RecommendationContext:
        with _invalid_as_configuration_error("recommendation context"):
            return RecommendationContext(
                scenario_id=self._scenario_id,
                number_limit=self._number_limit,
                recommendation_time=self._recommendation_time,
                name_values=tuple(self._name_values),
                result_name_values=tuple(self._result_name_values),
                result_name_value_filters=dict(self._result_name_value_filters) or None,
                facets=tuple(self._facets) or None,
            )
