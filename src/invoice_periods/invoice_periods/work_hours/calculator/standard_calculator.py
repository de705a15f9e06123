from __future__ import annotations

from ..model import WorkDay
from .base import WorkTotalsCalculator


class StandardWorkTotalsCalculator(WorkTotalsCalculator):
    """Standard rule: only workdays with positive hours count."""

    def counts(self, day: WorkDay) -> bool:
        return day.is_workday and day.hours > 0
