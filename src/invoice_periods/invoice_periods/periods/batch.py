from __future__ import annotations

from typing import Union

from ..common.datetime_utils import DateLike, to_date, to_iso
from ..common.validators import require_enum
from ..core.constants import FIRST_HALF_END_DAY, SECOND_HALF_START_DAY
from ..core.enums import PeriodBatchType
from .model import Period
from .ranges import first_half, second_half, whole_month


def get_batch_period(batch_type: Union[PeriodBatchType, str], reference: DateLike) -> Period:
    """Resolve a manually chosen batch of the reference month into a period."""
    batch_type = require_enum(batch_type, PeriodBatchType, "batch_type")
    ref = to_date(reference)

    if batch_type is PeriodBatchType.FIRST_BATCH:
        start, end = first_half(ref.year, ref.month)
        label = f"1st Batch (1-{FIRST_HALF_END_DAY} {start.strftime('%b')})"
    elif batch_type is PeriodBatchType.SECOND_BATCH:
        start, end = second_half(ref.year, ref.month)
        label = f"2nd Batch ({SECOND_HALF_START_DAY}-{end.day} {start.strftime('%b')})"
    else:
        start, end = whole_month(ref.year, ref.month)
        label = f"Whole Month ({start.strftime('%B')})"

    return Period(start=to_iso(start), end=to_iso(end), label=label, is_auto_detected=False)
