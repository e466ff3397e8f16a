"""Shape descriptors for hydration.

A shape is a pydantic model class. Its fields declare the wire key to read
(the field alias, falling back to the field name) and, through their
annotation, the nested shape to hydrate the value against. A field whose
annotation carries no model, or that is marked with ``OpaqueField``, is
passed through untouched.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from functools import cache
from typing import Any, get_args, get_origin

from pydantic import BaseModel
from pydantic.fields import FieldInfo

# Shape meaning "do not hydrate, return the value as-is".
OPAQUE = None

Shape = type[BaseModel] | None


class OpaqueField:
    """Annotation marker forcing a field to be passed through unhydrated."""

    def __repr__(self) -> str:
        return "OpaqueField()"


@dataclass(frozen=True)
class WireField:
    name: str
    key: str
    shape: Shape
    as_map: bool = False


@cache
def wire_fields(shape: type[BaseModel]) -> tuple[WireField, ...]:
    """Return the hydration descriptors declared by ``shape``, in field order."""
    fields = []
    for name, info in shape.model_fields.items():
        nested, as_map = _field_shape(info)
        fields.append(WireField(name=name, key=info.alias or name, shape=nested, as_map=as_map))
    return tuple(fields)


def _field_shape(info: FieldInfo) -> tuple[Shape, bool]:
    if any(isinstance(item, OpaqueField) for item in info.metadata):
        return OPAQUE, False
    return _find_model(info.annotation)


def _find_model(annotation: Any) -> tuple[Shape, bool]:
    origin = get_origin(annotation)
    if origin is None:
        if isinstance(annotation, type) and issubclass(annotation, BaseModel):
            return annotation, False
        return OPAQUE, False

    args = get_args(annotation)
    if origin in (dict, Mapping) and len(args) == 2:
        model, _ = _find_model(args[1])
        return model, model is not None

    for arg in args:
        model, as_map = _find_model(arg)
        if model is not None:
            return model, as_map
    return OPAQUE, False
