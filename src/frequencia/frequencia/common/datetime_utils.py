from __future__ import annotations

from datetime import date, datetime

from ..core.constants import DISPLAY_DATE_FORMAT


def format_display_date(value: date) -> str:
    """Format a date the way it is shown to users (DD/MM/YYYY)."""
    return value.strftime(DISPLAY_DATE_FORMAT)


def today_local() -> date:
    """Current local date; the one place the demo reads the clock."""
    return datetime.now().date()
