from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from ..core.enums import RecurrencePolicy
from .strategies.base import PeriodStrategy
from .strategies.both_halves_strategy import BothHalvesStrategy
from .strategies.first_half_strategy import FirstHalfStrategy
from .strategies.full_month_strategy import FullMonthStrategy
from .strategies.second_half_strategy import SecondHalfStrategy


def _default_strategies() -> Dict[RecurrencePolicy, PeriodStrategy]:
    return {
        RecurrencePolicy.BOTH_15TH_AND_LAST: BothHalvesStrategy(),
        RecurrencePolicy.EVERY_15TH: FirstHalfStrategy(),
        RecurrencePolicy.EVERY_LAST_DAY: SecondHalfStrategy(),
        RecurrencePolicy.CUSTOM: FullMonthStrategy(),
    }


@dataclass
class PeriodStrategyFactory:
    """Factory Pattern: choose the period strategy for a recurrence policy."""

    strategies: Dict[RecurrencePolicy, PeriodStrategy] = field(default_factory=_default_strategies)

    def __post_init__(self) -> None:
        missing = [p.value for p in RecurrencePolicy if p not in self.strategies]
        if missing:
            raise ValueError(f"No period strategy for: {', '.join(missing)}")

    def for_policy(self, policy: RecurrencePolicy) -> PeriodStrategy:
        return self.strategies[policy]
