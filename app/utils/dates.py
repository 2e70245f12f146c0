from datetime import date, datetime
from typing import Tuple

import pytz

from app.core.config import settings


def current_date() -> date:
    """Today's calendar date in the configured TIMEZONE, or server local time when unset."""
    if settings.TIMEZONE:
        return datetime.now(pytz.timezone(settings.TIMEZONE)).date()
    return date.today()


def current_month_window(today: date) -> Tuple[date, date]:
    """[first day of today's month, today], both inclusive."""
    return today.replace(day=1), today


def previous_month_window(today: date) -> Tuple[date, date]:
    first_of_month = today.replace(day=1)
    last_of_previous = date.fromordinal(first_of_month.toordinal() - 1)
    return last_of_previous.replace(day=1), last_of_previous
