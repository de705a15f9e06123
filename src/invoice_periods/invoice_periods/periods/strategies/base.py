from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from ..model import Period


class PeriodStrategy(ABC):
    """Strategy Pattern: encapsulate how a recurrence policy picks the period to invoice."""

    @abstractmethod
    def detect(self, *, today: date) -> Period:
        raise NotImplementedError
