from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from .analytics.service import AnalyticsService
from .common.datetime_utils import now_local
from .common.validators import require_enum, require_hours
from .core.constants import DEFAULT_HOURS_PER_DAY
from .core.enums import RecurrencePolicy
from .invoices.memory_repository import InMemoryInvoiceRepository
from .periods.service import PeriodService


@dataclass(frozen=True)
class Container:
    clock: Callable[[], datetime]
    default_hours_per_day: float

    invoice_repo: InMemoryInvoiceRepository

    period_service: PeriodService
    analytics_service: AnalyticsService


def build_container(
    *,
    default_policy: str = RecurrencePolicy.BOTH_15TH_AND_LAST.value,
    default_hours_per_day: float = DEFAULT_HOURS_PER_DAY,
    invoice_seed_path: Optional[str] = None,
    clock: Callable[[], datetime] = now_local,
) -> Container:
    invoice_repo = InMemoryInvoiceRepository()
    if invoice_seed_path:
        invoice_repo.load_seed(Path(invoice_seed_path))

    period_service = PeriodService(
        default_policy=require_enum(default_policy, RecurrencePolicy, "DEFAULT_RECURRENCE_POLICY"),
        clock=clock,
    )
    analytics_service = AnalyticsService(invoice_repo)

    return Container(
        clock=clock,
        default_hours_per_day=require_hours(default_hours_per_day, "DEFAULT_HOURS_PER_DAY"),
        invoice_repo=invoice_repo,
        period_service=period_service,
        analytics_service=analytics_service,
    )
