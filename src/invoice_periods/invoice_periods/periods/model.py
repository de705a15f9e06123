from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Period:
    """A billing window. Both bounds are inclusive ISO dates (YYYY-MM-DD)."""

    start: str
    end: str
    label: Optional[str] = None
    is_auto_detected: bool = False

    def to_dict(self) -> dict:
        return {
            "start": self.start,
            "end": self.end,
            "label": self.label,
            "isAutoDetected": self.is_auto_detected,
        }
