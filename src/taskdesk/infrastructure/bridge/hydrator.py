from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel

from taskdesk.domain.exceptions import PayloadDecodeError
from taskdesk.infrastructure.bridge.shapes import OPAQUE, Shape, wire_fields

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def decode_json(source: str | bytes | bytearray) -> Any:
    try:
        return json.loads(source)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise PayloadDecodeError("Invalid payload JSON") from exc


def hydrate(value: Any, shape: Shape, as_map: bool = False) -> Any:
    """Convert a JSON-decoded ``value`` into instances of ``shape``.

    Absent values and opaque shapes pass through unchanged, lists are
    hydrated element-wise, mappings become one ``shape`` instance (or, with
    ``as_map``, a new mapping of hydrated values) and any other primitive is
    returned as-is. Missing keys become ``None``; unknown keys are dropped.
    The input is never mutated.
    """
    if value is None or shape is OPAQUE:
        return value
    if isinstance(value, (list, tuple)):
        return [hydrate(item, shape) for item in value]
    if isinstance(value, Mapping):
        if as_map:
            return {key: hydrate(item, shape) for key, item in value.items()}
        return _construct(shape, value)
    return value


def create_from(shape: type[ModelT], source: Any = None) -> ModelT:
    """Build one ``shape`` instance from a raw payload or its JSON text."""
    if source is None:
        source = {}
    if isinstance(source, (str, bytes, bytearray)):
        source = decode_json(source)
    if not isinstance(source, Mapping):
        logger.debug(
            "Non-object payload hydrated with every field absent",
            extra={"shape": shape.__name__, "payload_type": type(source).__name__},
        )
        source = {}
    return _construct(shape, source)


def _construct(shape: type[ModelT], source: Mapping[str, Any]) -> ModelT:
    values = {
        field.name: hydrate(source.get(field.key), field.shape, field.as_map)
        for field in wire_fields(shape)
    }
    # Values are trusted as-is; schema checks belong to the validation stage.
    return shape.model_construct(**values)
