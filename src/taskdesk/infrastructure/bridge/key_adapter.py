"""Rewrites non-canonical payload keys to the wire names a shape declares.

Some producers send tasks as ``{"id": ..., "created_at": ...}`` instead of
``{"ID": ..., "CreatedAt": ...}``. Keys are matched after lowercasing and
dropping underscores; a key already in canonical form always wins.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from taskdesk.infrastructure.bridge.shapes import OPAQUE, Shape, wire_fields

logger = logging.getLogger(__name__)


def _normalize(key: str) -> str:
    return key.replace("_", "").lower()


def canonicalize_keys(value: Any, shape: Shape, as_map: bool = False) -> Any:
    """Return a copy of ``value`` whose object keys match ``shape``'s wire keys."""
    if value is None or shape is OPAQUE:
        return value
    if isinstance(value, (list, tuple)):
        return [canonicalize_keys(item, shape) for item in value]
    if isinstance(value, Mapping):
        if as_map:
            return {key: canonicalize_keys(item, shape) for key, item in value.items()}
        return _canonicalize_object(value, shape)
    return value


def _canonicalize_object(source: Mapping[str, Any], shape: type[BaseModel]) -> dict[str, Any]:
    fields = {_normalize(field.key): field for field in wire_fields(shape)}
    result: dict[str, Any] = {}
    for key, item in source.items():
        field = fields.get(_normalize(key)) if isinstance(key, str) else None
        if field is None:
            result[key] = item
            continue
        if key != field.key and (field.key in source or field.key in result):
            logger.warning(
                "Dropping duplicate payload key",
                extra={"shape": shape.__name__, "key": key, "canonical_key": field.key},
            )
            continue
        result[field.key] = canonicalize_keys(item, field.shape, field.as_map)
    return result
