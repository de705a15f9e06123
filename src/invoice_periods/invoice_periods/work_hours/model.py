from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from ..common.datetime_utils import to_date, to_iso
from ..common.validators import require_bool, require_hours
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class WorkDay:
    """One calendar day of a period with the hours worked on it."""

    date: str
    hours: float
    is_workday: bool
    notes: Optional[str] = None

    def to_dict(self) -> dict:
        out = {"date": self.date, "hours": self.hours, "isWorkday": self.is_workday}
        if self.notes:
            out["notes"] = self.notes
        return out

    @classmethod
    def from_dict(cls, data: dict) -> "WorkDay":
        """Build from the camelCase JSON shape used by the invoice form."""
        return cls(
            date=to_iso(to_date(data.get("date") or "")),
            hours=require_hours(data.get("hours", 0)),
            is_workday=require_bool(data.get("isWorkday"), "isWorkday"),
            notes=data.get("notes") or None,
        )


@dataclass(frozen=True)
class WorkTotals:
    total_days: int
    total_hours: float

    def to_dict(self) -> dict:
        return {"totalDays": self.total_days, "totalHours": self.total_hours}


def parse_work_days(raw) -> List[WorkDay]:
    """Parse the ``workDays`` JSON list; non-object entries are skipped."""
    if not isinstance(raw, list):
        raise ValidationError("workDays must be a list")
    return [WorkDay.from_dict(d) for d in raw if isinstance(d, dict)]
