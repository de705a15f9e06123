from __future__ import annotations

from datetime import date

from ...common.datetime_utils import previous_month
from ...core.constants import SECOND_HALF_START_DAY
from ..model import Period
from ..ranges import first_half_period, second_half_period
from .base import PeriodStrategy


class BothHalvesStrategy(PeriodStrategy):
    """Invoiced on the 15th and on the last day.

    From the 16th on, the finished window is the 1st-15th of this month;
    before that it is the 16th-end of the previous month.
    """

    def detect(self, *, today: date) -> Period:
        if today.day >= SECOND_HALF_START_DAY:
            return first_half_period(today.year, today.month, auto=True)
        year, month = previous_month(today.year, today.month)
        return second_half_period(year, month, auto=True)
