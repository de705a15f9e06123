from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass
class Breakdown:
    count: int = 0
    total: float = 0

    def to_dict(self) -> dict:
        return {"count": self.count, "total": self.total}


@dataclass(frozen=True)
class FolderAnalytics:
    folder_id: Optional[str]
    folder_name: Optional[str]
    invoice_count: int
    total_amount: float
    total_hours: float
    total_days: int
    average_amount: float
    average_hours_per_invoice: float
    paid_amount: float
    pending_amount: float
    overdue_amount: float
    draft_count: int
    sent_count: int
    paid_count: int
    overdue_count: int
    currency_breakdown: Dict[str, Breakdown] = field(default_factory=dict)
    client_breakdown: Dict[str, Breakdown] = field(default_factory=dict)
    oldest_invoice_date: Optional[str] = None
    newest_invoice_date: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "folderId": self.folder_id,
            "folderName": self.folder_name,
            "invoiceCount": self.invoice_count,
            "totalAmount": self.total_amount,
            "totalHours": self.total_hours,
            "totalDays": self.total_days,
            "averageAmount": self.average_amount,
            "averageHoursPerInvoice": self.average_hours_per_invoice,
            "paidAmount": self.paid_amount,
            "pendingAmount": self.pending_amount,
            "overdueAmount": self.overdue_amount,
            "draftCount": self.draft_count,
            "sentCount": self.sent_count,
            "paidCount": self.paid_count,
            "overdueCount": self.overdue_count,
            "currencyBreakdown": {k: v.to_dict() for k, v in self.currency_breakdown.items()},
            "clientBreakdown": {k: v.to_dict() for k, v in self.client_breakdown.items()},
            "oldestInvoiceDate": self.oldest_invoice_date,
            "newestInvoiceDate": self.newest_invoice_date,
        }


@dataclass(frozen=True)
class StatusAnalytics:
    count: int
    total_amount: float
    total_hours: float
    average_amount: float

    def to_dict(self) -> dict:
        return {
            "count": self.count,
            "totalAmount": self.total_amount,
            "totalHours": self.total_hours,
            "averageAmount": self.average_amount,
        }


@dataclass(frozen=True)
class ClientAnalytics:
    client_name: str
    invoice_count: int
    total_amount: float
    total_hours: float
    paid_amount: float
    pending_amount: float
    average_amount: float
    last_invoice_date: str

    def to_dict(self) -> dict:
        return {
            "clientName": self.client_name,
            "invoiceCount": self.invoice_count,
            "totalAmount": self.total_amount,
            "totalHours": self.total_hours,
            "paidAmount": self.paid_amount,
            "pendingAmount": self.pending_amount,
            "averageAmount": self.average_amount,
            "lastInvoiceDate": self.last_invoice_date,
        }


@dataclass
class MonthlyAnalytics:
    month: str
    invoiced: float = 0
    paid: float = 0
    hours: float = 0
    count: int = 0

    def to_dict(self) -> dict:
        return {
            "month": self.month,
            "invoiced": self.invoiced,
            "paid": self.paid,
            "hours": self.hours,
            "count": self.count,
        }
