from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from ..model import WorkDay, WorkTotals


class WorkTotalsCalculator(ABC):
    """Calculator interface (Strategy Pattern for work totals)."""

    @abstractmethod
    def counts(self, day: WorkDay) -> bool:
        raise NotImplementedError

    def totals(self, work_days: Iterable[WorkDay]) -> WorkTotals:
        counted = [d for d in work_days if self.counts(d)]
        return WorkTotals(total_days=len(counted), total_hours=sum(d.hours for d in counted))
