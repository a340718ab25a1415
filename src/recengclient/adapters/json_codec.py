"""JSON codec for request and response bodies.

Why a class and not module-level helpers:
- The transport client receives it by injection, so tests (or callers with
  special needs) can swap it.
- It holds no mutable state; one instance is safely shared between threads.
"""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Any

from pydantic import BaseModel, TypeAdapter


@lru_cache(maxsize=64)
def _adapter_for(shape: Any) -> TypeAdapter:
    return TypeAdapter(shape)


def to_jsonable(value: Any) -> Any:
    """Convert models (and containers of models) into plain JSON data."""

    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item) for item in value]
    if isinstance(value, dict):
        return {str(key): to_jsonable(item) for key, item in value.items()}
    return value


class JsonCodec:
    """Encodes outgoing bodies and decodes responses into declared shapes."""

    def encode(self, value: Any) -> str:
        # ASCII-only output: control characters and accents travel as \uXXXX.
        return json.dumps(to_jsonable(value), ensure_ascii=True, separators=(",", ":"))

    def decode(self, text: str, shape: Any) -> Any:
        """Parse `text` into `shape` (a model, `list[Model]`, `str`, ...).

        Raises `pydantic.ValidationError` (a `ValueError`) when the text is not
        JSON or does not fit the shape. Unknown object fields are ignored by
        the models themselves.
        """

        return _adapter_for(shape).validate_json(text)


default_codec = JsonCodec()
