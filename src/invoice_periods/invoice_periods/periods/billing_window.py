"""Billing window that contains a given date (as opposed to the one to invoice)."""

from __future__ import annotations

from datetime import date
from typing import Tuple, Union

from ..common.datetime_utils import DateLike, to_date
from ..common.validators import require_enum
from ..core.constants import FIRST_HALF_END_DAY
from ..core.enums import RecurrencePolicy
from .ranges import first_half, second_half


def _window(reference: DateLike, policy: Union[RecurrencePolicy, str]) -> Tuple[date, date]:
    policy = require_enum(policy, RecurrencePolicy, "policy")
    ref = to_date(reference)
    if policy is RecurrencePolicy.EVERY_15TH or (
        policy is RecurrencePolicy.BOTH_15TH_AND_LAST and ref.day <= FIRST_HALF_END_DAY
    ):
        return first_half(ref.year, ref.month)
    return second_half(ref.year, ref.month)


def get_billing_period_start(reference: DateLike, policy: Union[RecurrencePolicy, str]) -> date:
    return _window(reference, policy)[0]


def get_billing_period_end(reference: DateLike, policy: Union[RecurrencePolicy, str]) -> date:
    return _window(reference, policy)[1]
