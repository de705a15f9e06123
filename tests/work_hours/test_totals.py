import pytest

from src.invoice_periods.invoice_periods.core.exceptions import ValidationError
from src.invoice_periods.invoice_periods.work_hours.generator import generate_work_hours_for_period
from src.invoice_periods.invoice_periods.work_hours.model import WorkDay, parse_work_days
from src.invoice_periods.invoice_periods.work_hours.totals import calculate_work_totals


def test_totals_skip_zero_hour_and_non_workdays():
    days = [
        WorkDay(date="2024-01-01", hours=8, is_workday=True),
        WorkDay(date="2024-01-02", hours=6, is_workday=True),
        WorkDay(date="2024-01-03", hours=0, is_workday=False),
        WorkDay(date="2024-01-04", hours=8, is_workday=True),
    ]

    totals = calculate_work_totals(days)

    assert totals.total_days == 3
    assert totals.total_hours == 22


def test_zero_hour_workday_is_excluded():
    days = [
        WorkDay(date="2024-01-01", hours=0, is_workday=True),
        WorkDay(date="2024-01-02", hours=8, is_workday=False),
        WorkDay(date="2024-01-03", hours=7.5, is_workday=True),
    ]

    assert calculate_work_totals(days).to_dict() == {"totalDays": 1, "totalHours": 7.5}


def test_generated_week_totals_ignore_weekend_hours():
    totals = calculate_work_totals(generate_work_hours_for_period("2024-01-01", "2024-01-07", 8))

    assert (totals.total_days, totals.total_hours) == (5, 40)


def test_empty_input():
    totals = calculate_work_totals([])

    assert (totals.total_days, totals.total_hours) == (0, 0)


def test_parse_work_days_from_json_shape():
    days = parse_work_days(
        [
            {"date": "2024-01-06", "hours": 4, "isWorkday": True, "notes": "release"},
            {"date": "2024-01-07", "hours": 8},
        ]
    )

    assert days[0] == WorkDay(date="2024-01-06", hours=4.0, is_workday=True, notes="release")
    assert days[1].is_workday is False
    assert calculate_work_totals(days).total_hours == 4


def test_parse_work_days_rejects_out_of_range_hours():
    with pytest.raises(ValidationError):
        parse_work_days([{"date": "2024-01-06", "hours": 25, "isWorkday": True}])

    with pytest.raises(ValidationError):
        parse_work_days({"date": "2024-01-06"})


def test_parse_work_days_rejects_nan_hours():
    with pytest.raises(ValidationError):
        parse_work_days([{"date": "2024-01-06", "hours": float("nan"), "isWorkday": True}])

    with pytest.raises(ValidationError):
        parse_work_days([{"date": "2024-01-06", "hours": "nan", "isWorkday": True}])


def test_parse_work_days_requires_real_boolean_workday_flag():
    with pytest.raises(ValidationError):
        parse_work_days([{"date": "2024-01-06", "hours": 8, "isWorkday": "false"}])

    with pytest.raises(ValidationError):
        parse_work_days([{"date": "2024-01-06", "hours": 8, "isWorkday": 1}])
