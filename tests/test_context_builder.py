"""Tests for the recommendation context builder."""

import time

import pytest
from pydantic import ValidationError

from recengclient.core.domain.facets import Range, RangeFacetRequest, TermFacetRequest
from recengclient.core.domain.models import NameValue
from recengclient.core.exceptions import ConfigurationError
from recengclient.core.services.context_builder import FacetBuilder, RecommendationContextBuilder


def test_minimal_context_defaults():
    """Test that an empty builder yields present name values and absent filters/facets."""
    before = int(time.time())
    context = RecommendationContextBuilder("ITEM_PAGE", 10).build()
    after = int(time.time())

    assert context.scenario_id == "ITEM_PAGE"
    assert context.number_limit == 10
    assert before <= context.recommendation_time <= after
    assert context.name_values == ()
    assert context.result_name_values == ()
    assert context.result_name_value_filters is None
    assert context.facets is None


def test_set_recommendation_time():
    context = RecommendationContextBuilder("HOME", 5).set_recommendation_time(1700000000).build()
    assert context.recommendation_time == 1700000000


@pytest.mark.parametrize(
    "names, values",
    [
        ([], []),
        (["a"], ["1"]),
        (["currentItemId", "categoryId", "currentItemId"], ["i1", "c9", "i2"]),
        (["z", "y", "x", "w"], ["4", "3", "2", "1"]),
    ],
)
def test_add_name_values_preserves_order(names, values):
    """Test that parallel name/value sequences keep their input order."""
    context = RecommendationContextBuilder("ITEM_PAGE", 3).add_name_values(names, values).build()

    assert [(nv.name, nv.value) for nv in context.name_values] == list(zip(names, values))


@pytest.mark.parametrize("names, values", [(["a"], []), (["a", "b"], ["1"]), ([], ["1"])])
def test_add_name_values_mismatched_lengths(names, values):
    builder = RecommendationContextBuilder("ITEM_PAGE", 3)

    with pytest.raises(ConfigurationError):
        builder.add_name_values(names, values)

    with pytest.raises(ValueError):
        builder.add_name_values(names, values)


def test_name_value_forms_accumulate_in_call_order():
    context = (
        RecommendationContextBuilder("ITEM_PAGE", 3)
        .add_name_value("first", "1")
        .add_name_value_pairs([NameValue(name="second", value="2"), ("third", "3")])
        .add_name_values(["fourth"], ["4"])
        .build()
    )

    assert [nv.name for nv in context.name_values] == ["first", "second", "third", "fourth"]


def test_result_name_values_are_deduplicated():
    context = (
        RecommendationContextBuilder("ITEM_PAGE", 3)
        .add_result_name_value("title")
        .add_result_name_values(["price", "title", "imageUrl"])
        .add_result_name_value("price")
        .build()
    )

    assert context.result_name_values == ("title", "price", "imageUrl")


def test_result_name_value_filter_overwrites_previous():
    context = (
        RecommendationContextBuilder("ITEM_PAGE", 3)
        .add_result_name_value_filter("brand", ["acme", "globex"])
        .add_result_name_value_filter("color", ["red"])
        .add_result_name_value_filter("brand", ["initech"])
        .build()
    )

    assert context.result_name_value_filters == {"brand": ("initech",), "color": ("red",)}


def test_filters_and_facets_present_once_added():
    context = (
        RecommendationContextBuilder("LISTING", 20)
        .add_result_name_value_filter("brand", ["acme"])
        .add_facet(FacetBuilder.term("brand", 5))
        .add_facet(FacetBuilder.range("price").add_range(None, 100).build())
        .build()
    )

    assert context.result_name_value_filters is not None
    assert context.facets is not None
    assert isinstance(context.facets[0], TermFacetRequest)
    assert isinstance(context.facets[1], RangeFacetRequest)


def test_add_facet_builder_is_built_immediately():
    """Test that later changes to a facet builder do not leak into the context."""
    facet_builder = FacetBuilder.term("brand", 5)
    builder = RecommendationContextBuilder("LISTING", 20).add_facet(facet_builder)
    facet_builder.filter_value("acme")

    context = builder.build()

    assert context.facets[0].filter is None


def test_add_facet_builder_errors_surface_at_add_time():
    builder = RecommendationContextBuilder("LISTING", 20)

    with pytest.raises(ConfigurationError):
        builder.add_facet(FacetBuilder.range("price"))


def test_built_context_is_immutable():
    context = RecommendationContextBuilder("ITEM_PAGE", 3).build()

    with pytest.raises(ValidationError):
        context.number_limit = 99


def test_builder_can_be_reused_for_independent_contexts():
    builder = RecommendationContextBuilder("ITEM_PAGE", 3).add_name_value("a", "1")
    first = builder.build()
    builder.add_name_value("b", "2").add_facet(FacetBuilder.range("price", [Range(from_=0, to=10)]))
    second = builder.build()

    assert len(first.name_values) == 1
    assert first.facets is None
    assert len(second.name_values) == 2
    assert second.facets is not None


def test_empty_scenario_id_is_passed_through_to_the_engine():
    """Test that scenario ids are not second-guessed; the engine decides what exists."""
    context = RecommendationContextBuilder("", 3).build()

    assert context.scenario_id == ""


@pytest.mark.parametrize("number_limit", ["many", None, 2.5])
def test_invalid_values_raise_configuration_error(number_limit):
    builder = RecommendationContextBuilder("ITEM_PAGE", number_limit)

    with pytest.raises(ConfigurationError) as excinfo:
        builder.build()

    assert "recommendation context" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, ValidationError)


def test_invalid_name_value_raises_configuration_error():
    with pytest.raises(ConfigurationError):
        RecommendationContextBuilder("ITEM_PAGE", 3).add_name_value(None, "x")
