from datetime import date

import pytest

from src.invoice_periods.invoice_periods.core.enums import PeriodBatchType
from src.invoice_periods.invoice_periods.core.exceptions import ValidationError
from src.invoice_periods.invoice_periods.periods.batch import get_batch_period
from src.invoice_periods.invoice_periods.periods.model import Period


def test_second_batch_in_leap_february():
    period = get_batch_period("2nd_batch", date(2024, 2, 20))

    assert period == Period(
        start="2024-02-16",
        end="2024-02-29",
        label="2nd Batch (16-29 Feb)",
        is_auto_detected=False,
    )


def test_first_batch():
    period = get_batch_period(PeriodBatchType.FIRST_BATCH, date(2024, 7, 3))

    assert (period.start, period.end) == ("2024-07-01", "2024-07-15")
    assert period.label == "1st Batch (1-15 Jul)"
    assert period.is_auto_detected is False


@pytest.mark.parametrize(
    "reference, end, month_name",
    [
        (date(2024, 2, 1), "2024-02-29", "February"),
        (date(2023, 2, 28), "2023-02-28", "February"),
        (date(2024, 4, 30), "2024-04-30", "April"),
        (date(2024, 12, 31), "2024-12-31", "December"),
    ],
)
def test_whole_month_end_follows_month_length(reference, end, month_name):
    period = get_batch_period(PeriodBatchType.WHOLE_MONTH, reference)

    assert period.start == reference.replace(day=1).isoformat()
    assert period.end == end
    assert period.label == f"Whole Month ({month_name})"


def test_second_batch_label_tracks_month_length():
    assert get_batch_period("2nd_batch", date(2023, 2, 1)).label == "2nd Batch (16-28 Feb)"
    assert get_batch_period("2nd_batch", date(2024, 4, 1)).label == "2nd Batch (16-30 Apr)"


def test_batch_moves_with_reference_across_year_boundary():
    december = get_batch_period("whole_month", date(2023, 12, 31))
    january = get_batch_period("whole_month", date(2024, 1, 1))

    assert (december.start, december.end) == ("2023-12-01", "2023-12-31")
    assert (january.start, january.end) == ("2024-01-01", "2024-01-31")


def test_batch_is_idempotent():
    ref = date(2024, 2, 20)
    assert get_batch_period("2nd_batch", ref) == get_batch_period("2nd_batch", ref)


def test_unknown_batch_type_is_rejected():
    with pytest.raises(ValidationError):
        get_batch_period("3rd_batch", date(2024, 2, 20))
