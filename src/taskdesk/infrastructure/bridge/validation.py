from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ValidationError

from taskdesk.domain.exceptions import PayloadValidationError


def validate_payload(raw: Any, shape: type[BaseModel]) -> None:
    """Check a JSON-decoded payload against ``shape``'s schema.

    Runs ahead of hydration when strict payloads are enabled. Types are
    checked with strict JSON rules, so ``"1"`` is not accepted for an int.
    """
    try:
        document = json.dumps(raw)
    except (TypeError, ValueError) as exc:
        raise PayloadValidationError(shape.__name__, [{"type": "json_encode", "msg": str(exc)}]) from exc

    try:
        shape.model_validate_json(document, strict=True)
    except ValidationError as exc:
        raise PayloadValidationError(shape.__name__, exc.errors(include_url=False)) from exc
