from datetime import date

from src.invoice_periods.invoice_periods.core.enums import RecurrencePolicy
from src.invoice_periods.invoice_periods.periods.billing_window import (
    get_billing_period_end,
    get_billing_period_start,
)


def test_both_halves_window_contains_reference():
    assert get_billing_period_start(date(2024, 2, 15), RecurrencePolicy.BOTH_15TH_AND_LAST) == date(2024, 2, 1)
    assert get_billing_period_end(date(2024, 2, 15), RecurrencePolicy.BOTH_15TH_AND_LAST) == date(2024, 2, 15)
    assert get_billing_period_start(date(2024, 2, 16), RecurrencePolicy.BOTH_15TH_AND_LAST) == date(2024, 2, 16)
    assert get_billing_period_end(date(2024, 2, 16), RecurrencePolicy.BOTH_15TH_AND_LAST) == date(2024, 2, 29)


def test_every_15th_window_is_always_first_half():
    assert get_billing_period_start(date(2024, 6, 28), "EVERY_15TH") == date(2024, 6, 1)
    assert get_billing_period_end(date(2024, 6, 28), "EVERY_15TH") == date(2024, 6, 15)


def test_last_day_and_custom_windows_are_second_half():
    for policy in (RecurrencePolicy.EVERY_LAST_DAY, RecurrencePolicy.CUSTOM):
        assert get_billing_period_start(date(2024, 6, 3), policy) == date(2024, 6, 16)
        assert get_billing_period_end(date(2024, 6, 3), policy) == date(2024, 6, 30)
