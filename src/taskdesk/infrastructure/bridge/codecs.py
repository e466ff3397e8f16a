from __future__ import annotations

import re
from datetime import UTC, datetime, timedelta
from typing import Any, Protocol

from taskdesk.domain.exceptions import DateTimeDecodeError

# Go marshals time.Time as RFC 3339 with up to nine fractional digits.
_RFC3339_RE = re.compile(
    r"^(?P<date>\d{4}-\d{2}-\d{2})[Tt ](?P<time>\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<fraction>\d{1,9}))?(?P<offset>[Zz]|[+-]\d{2}:\d{2})$"
)


class DateTimeCodec(Protocol):
    """Converts between wire date-time values and ``datetime``."""

    def decode(self, raw: Any) -> datetime | None:
        """Decode a wire value; ``None`` stays ``None``."""

    def encode(self, value: datetime | None) -> str | None:
        """Encode a ``datetime`` for the wire; ``None`` stays ``None``."""


class RFC3339Codec:
    """Codec for the RFC 3339 strings produced by the task backend.

    Naive ``datetime`` values are taken to be UTC, and offsets with a
    seconds part are encoded in UTC. Fractions beyond microseconds are
    truncated.
    """

    def decode(self, raw: Any) -> datetime | None:
        if raw is None:
            return None
        if isinstance(raw, datetime):
            return raw if raw.utcoffset() is not None else raw.replace(tzinfo=UTC)
        if not isinstance(raw, str):
            raise DateTimeDecodeError(raw)

        match = _RFC3339_RE.match(raw.strip())
        if match is None:
            raise DateTimeDecodeError(raw)

        fraction = match["fraction"]
        micros = f".{fraction[:6].ljust(6, '0')}" if fraction else ""
        offset = match["offset"]
        if offset in ("Z", "z"):
            offset = "+00:00"
        try:
            return datetime.fromisoformat(f"{match['date']}T{match['time']}{micros}{offset}")
        except ValueError as exc:
            raise DateTimeDecodeError(raw) from exc

    def encode(self, value: datetime | None) -> str | None:
        if value is None:
            return None
        offset = value.utcoffset()
        if offset is None:
            value = value.replace(tzinfo=UTC)
        elif offset % timedelta(minutes=1):
            # RFC 3339 offsets carry no seconds.
            value = value.astimezone(UTC)

        text = value.isoformat(timespec="seconds")
        if value.microsecond:
            fraction = f"{value.microsecond:06d}".rstrip("0")
            text = f"{text[:19]}.{fraction}{text[19:]}"
        if text.endswith("+00:00"):
            text = text[:-6] + "Z"
        return text
