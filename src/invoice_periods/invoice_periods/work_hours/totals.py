from __future__ import annotations

from typing import Iterable, Optional

from .calculator.base import WorkTotalsCalculator
from .calculator.standard_calculator import StandardWorkTotalsCalculator
from .model import WorkDay, WorkTotals


def calculate_work_totals(
    work_days: Iterable[WorkDay],
    *,
    calculator: Optional[WorkTotalsCalculator] = None,
) -> WorkTotals:
    """Sum days and hours; zero-hour and non-workday entries are skipped."""
    return (calculator or StandardWorkTotalsCalculator()).totals(work_days)
