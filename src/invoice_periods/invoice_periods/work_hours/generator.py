from __future__ import annotations

from typing import Iterable, List, Optional, Union

from ..common.datetime_utils import DateLike, each_day, is_weekend, to_date, to_iso
from ..common.validators import require_enum
from ..core.enums import WorkdayType
from .model import WorkDay


def generate_work_hours_for_period(start: DateLike, end: DateLike, default_hours_per_day: float) -> List[WorkDay]:
    """One entry per day of the inclusive range [start, end], ascending.

    Weekdays are marked as workdays and weekends are not, but every day gets
    ``default_hours_per_day``; weekend hours only count once the caller flips
    ``is_workday``. A reversed range yields an empty list.
    """
    return [
        WorkDay(date=to_iso(day), hours=default_hours_per_day, is_workday=not is_weekend(day))
        for day in each_day(to_date(start), to_date(end))
    ]


def generate_billing_period_dates(
    start: DateLike,
    end: DateLike,
    workday_type: Union[WorkdayType, str],
    custom_dates: Optional[Iterable[str]] = None,
) -> List[str]:
    """ISO dates of [start, end] that are billable under ``workday_type``."""
    workday_type = require_enum(workday_type, WorkdayType, "workday_type")
    selected = set(custom_dates or ())

    dates: List[str] = []
    for day in each_day(to_date(start), to_date(end)):
        iso = to_iso(day)
        if workday_type is WorkdayType.ALL_DAYS:
            dates.append(iso)
        elif workday_type is WorkdayType.WEEKDAYS_ONLY:
            if not is_weekend(day):
                dates.append(iso)
        elif iso in selected:
            dates.append(iso)
    return dates
