"""Month keys: every month-scoped row is stored against the 1st day of its month."""

import re
from datetime import date, datetime, timezone
from typing import Optional

_MONTH_PARAM_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")


def previous_month_start(now: Optional[datetime] = None) -> date:
    now = now or datetime.now(timezone.utc)
    if now.month == 1:
        return date(now.year - 1, 12, 1)
    return date(now.year, now.month - 1, 1)


def normalize_month(value: Optional[str] = None, now: Optional[datetime] = None) -> date:
    """
    Canonical month key for a ``YYYY-MM-DD`` query value (day is ignored).

    Absent or malformed input, including an impossible month such as ``2024-13-01``,
    falls back to the previous calendar month instead of failing the request.
    """
    if value:
        match = _MONTH_PARAM_RE.match(value.strip())
        if match:
            year, month = int(match.group(1)), int(match.group(2))
            if 1 <= month <= 12 and year >= 1:
                return date(year, month, 1)
    return previous_month_start(now)


def month_label(month: date) -> str:
    """Human label used for the {{month}} placeholder, e.g. 'September 2026'."""
    return month.strftime("%B %Y")
