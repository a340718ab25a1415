"""Facet requests (Pydantic v2).

A facet asks the engine for aggregated counts over an item attribute, either
discrete terms or numeric ranges, optionally restricting the result with a
filter. On the wire the variants are distinguished by `"type"`.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Generic, Literal, TypeVar, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

F = TypeVar("F")


class FilterLogic(str, Enum):
    """How filter values are combined by the engine."""

    AND = "AND"
    OR = "OR"
    NOT = "NOT"


class TermOrder(str, Enum):
    """Ordering of the buckets of a term facet."""

    COUNT = "COUNT"
    REVERSE_COUNT = "REVERSE_COUNT"
    TERM = "TERM"
    REVERSE_TERM = "REVERSE_TERM"


class _FacetModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class Range(_FacetModel):
    """Numeric interval; `None` on either side means an open bound."""

    from_: float | None = Field(default=None, alias="from")
    to: float | None = None


class Filter(_FacetModel, Generic[F]):
    logic: FilterLogic | None = Field(
        default=None,
        description="Combination logic; the engine default applies when omitted.",
    )
    values: tuple[F, ...] = Field(..., min_length=1)


class TermFacetRequest(_FacetModel):
    type: Literal["term"] = "term"
    field: str
    count: int = Field(..., description="Maximum number of buckets returned.")
    order: TermOrder | None = None
    filter: Filter[str] | None = None


class RangeFacetRequest(_FacetModel):
    type: Literal["range"] = "range"
    field: str
    ranges: tuple[Range, ...] = Field(..., min_length=1)
    filter: Filter[Range] | None = None


FacetRequest = Annotated[Union[TermFacetRequest, RangeFacetRequest], Field(discriminator="type")]
