from __future__ import annotations

from datetime import datetime
from typing import Callable, List, Optional, Union

from ..common.datetime_utils import DateLike, now_local, to_date, to_iso
from ..core.enums import PeriodBatchType, RecurrencePolicy
from .batch import get_batch_period
from .billing_window import get_billing_period_end, get_billing_period_start
from .detector import detect_invoice_period
from .model import Period
from .options import get_period_options


class PeriodService:
    """Period operations with the reference date defaulting to the clock.

    The underlying functions take the reference date explicitly; this is the
    only place that reads "now".
    """

    def __init__(
        self,
        *,
        default_policy: RecurrencePolicy = RecurrencePolicy.BOTH_15TH_AND_LAST,
        clock: Callable[[], datetime] = now_local,
    ):
        self._default_policy = default_policy
        self._clock = clock

    def _reference(self, reference: Optional[DateLike]) -> DateLike:
        return self._clock() if reference is None else reference

    def detect(
        self,
        policy: Union[RecurrencePolicy, str, None] = None,
        reference: Optional[DateLike] = None,
    ) -> Period:
        return detect_invoice_period(policy or self._default_policy, self._reference(reference))

    def batch(self, batch_type: Union[PeriodBatchType, str], reference: Optional[DateLike] = None) -> Period:
        return get_batch_period(batch_type, self._reference(reference))

    def options(self, reference: Optional[DateLike] = None) -> List[Period]:
        return get_period_options(self._reference(reference))

    def billing_window(
        self,
        policy: Union[RecurrencePolicy, str, None] = None,
        reference: Optional[DateLike] = None,
    ) -> Period:
        """Window that contains the reference date, unlabelled."""
        policy = policy or self._default_policy
        ref = to_date(self._reference(reference))
        return Period(
            start=to_iso(get_billing_period_start(ref, policy)),
            end=to_iso(get_billing_period_end(ref, policy)),
            is_auto_detected=True,
        )
