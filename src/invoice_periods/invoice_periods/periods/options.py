from __future__ import annotations

from typing import List

from ..common.datetime_utils import DateLike, previous_month, to_date
from .model import Period
from .ranges import first_half_period, second_half_period, whole_month_period


def get_period_options(reference: DateLike) -> List[Period]:
    """Candidate periods for a manual override, newest halves first.

    Order: current 1st-15th, current 16th-end, previous 1st-15th,
    previous 16th-end, full current month, full previous month.
    """
    ref = to_date(reference)
    prev_year, prev_month = previous_month(ref.year, ref.month)

    return [
        first_half_period(ref.year, ref.month, auto=False),
        second_half_period(ref.year, ref.month, auto=False),
        first_half_period(prev_year, prev_month, auto=False),
        second_half_period(prev_year, prev_month, auto=False),
        whole_month_period(ref.year, ref.month, auto=False),
        whole_month_period(prev_year, prev_month, auto=False),
    ]
