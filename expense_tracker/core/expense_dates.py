"""Expense Dates - pure parsing and rendering of expense timestamps.

Invariants:
    - "YYYY-MM-DDTHH:MM" is parsed under exactly that format: seconds = 0, tz = UTC
    - Every other string goes through ISO-8601; offsets converted to UTC, naive = UTC
    - Parsed values are always timezone-aware UTC
    - Unparseable input raises ValueError (surfaced as a 400 by the schema layer)
    - Rendered values are "YYYY-MM-DDTHH:MM:SSZ"

Design Decisions:
    - Parsers raise ValueError; the Pydantic validators calling them turn it
      into RequestValidationError
    - Naive datetimes read back from SQLite are treated as UTC when rendering
"""

import re
from datetime import datetime, timezone

INCOMPLETE_FORMAT = "%Y-%m-%dT%H:%M"
RENDER_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

_INCOMPLETE_SHAPE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}$")


def parse_expense_date(value: object) -> datetime:
    """Parse a caller-supplied date into an aware UTC datetime."""
    if isinstance(value, datetime):
        return as_utc(value)
    if not isinstance(value, str):
        raise ValueError("Invalid date format")

    raw = value.strip()
    if _INCOMPLETE_SHAPE.match(raw):
        try:
            parsed = datetime.strptime(raw, INCOMPLETE_FORMAT)
        except ValueError:
            raise ValueError("Invalid date format") from None
        return parsed.replace(second=0, tzinfo=timezone.utc)

    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError:
        raise ValueError("Invalid date format") from None
    return as_utc(parsed)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes, convert aware ones."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def render_expense_date(value: datetime | None) -> str | None:
    if value is None:
        return None
    return as_utc(value).strftime(RENDER_FORMAT)
