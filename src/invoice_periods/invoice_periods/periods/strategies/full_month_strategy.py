from __future__ import annotations

from datetime import date

from ..model import Period
from ..ranges import whole_month_period
from .base import PeriodStrategy


class FullMonthStrategy(PeriodStrategy):
    """Custom schedules default to the whole current month."""

    def detect(self, *, today: date) -> Period:
        return whole_month_period(today.year, today.month, auto=True)
