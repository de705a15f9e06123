from __future__ import annotations

import logging
from typing import Union

from ..common.datetime_utils import DateLike, to_date
from ..common.validators import require_enum
from ..core.enums import RecurrencePolicy
from .factory import PeriodStrategyFactory
from .model import Period

logger = logging.getLogger(__name__)

_factory = PeriodStrategyFactory()


def detect_invoice_period(policy: Union[RecurrencePolicy, str], reference: DateLike) -> Period:
    """Return the billing period that should be invoiced as of ``reference``.

    Day 16 is the boundary: on the 15th the previous window is still the one
    to invoice, from the 16th on the first half of the current month is.
    The result always has ``is_auto_detected=True``.
    """
    policy = require_enum(policy, RecurrencePolicy, "policy")
    today = to_date(reference)
    period = _factory.for_policy(policy).detect(today=today)
    logger.debug("Detected %s..%s for %s on %s", period.start, period.end, policy.value, today)
    return period
