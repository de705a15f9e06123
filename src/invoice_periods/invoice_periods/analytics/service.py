from __future__ import annotations

import logging
from collections import defaultdict
from typing import Dict, List, Optional, Sequence

from ..common.datetime_utils import to_date
from ..core.enums import InvoiceStatus
from ..invoices.model import InvoiceFolder, InvoiceRecord
from ..invoices.repository import InvoiceRepository
from .model import Breakdown, ClientAnalytics, FolderAnalytics, MonthlyAnalytics, StatusAnalytics

logger = logging.getLogger(__name__)

UNKNOWN_CLIENT = "Unknown"

PENDING_STATUSES = frozenset(
    {
        InvoiceStatus.TO_SEND,
        InvoiceStatus.SENT,
        InvoiceStatus.VIEWED,
        InvoiceStatus.PAYMENT_PENDING,
        InvoiceStatus.PARTIAL_PAYMENT,
    }
)
SENT_STATUSES = frozenset({InvoiceStatus.SENT, InvoiceStatus.VIEWED, InvoiceStatus.PAYMENT_PENDING})
SETTLED_STATUSES = frozenset({InvoiceStatus.PAID, InvoiceStatus.CANCELLED, InvoiceStatus.REFUNDED})


def _average(total: float, count: int) -> float:
    return total / count if count > 0 else 0


def _client_name(invoice: InvoiceRecord) -> str:
    return invoice.client_name or UNKNOWN_CLIENT


def _amount(invoices: Sequence[InvoiceRecord]) -> float:
    return sum(i.total_amount for i in invoices)


def summarize(invoices: Sequence[InvoiceRecord], folder: Optional[InvoiceFolder] = None) -> FolderAnalytics:
    """Aggregate a set of invoices, optionally labelled with their folder."""
    total_amount = _amount(invoices)
    total_hours = sum(i.total_hours for i in invoices)

    paid = [i for i in invoices if i.status is InvoiceStatus.PAID]
    overdue = [i for i in invoices if i.status is InvoiceStatus.OVERDUE]

    currency_breakdown: Dict[str, Breakdown] = defaultdict(Breakdown)
    client_breakdown: Dict[str, Breakdown] = defaultdict(Breakdown)
    for invoice in invoices:
        for bucket in (currency_breakdown[invoice.currency], client_breakdown[_client_name(invoice)]):
            bucket.count += 1
            bucket.total += invoice.total_amount

    dates = sorted(i.issue_date for i in invoices)

    return FolderAnalytics(
        folder_id=folder.folder_id if folder else None,
        folder_name=folder.name if folder else None,
        invoice_count=len(invoices),
        total_amount=total_amount,
        total_hours=total_hours,
        total_days=sum(i.total_days for i in invoices),
        average_amount=_average(total_amount, len(invoices)),
        average_hours_per_invoice=_average(total_hours, len(invoices)),
        paid_amount=_amount(paid),
        pending_amount=_amount([i for i in invoices if i.status in PENDING_STATUSES]),
        overdue_amount=_amount(overdue),
        draft_count=sum(1 for i in invoices if i.status is InvoiceStatus.DRAFT),
        sent_count=sum(1 for i in invoices if i.status in SENT_STATUSES),
        paid_count=len(paid),
        overdue_count=len(overdue),
        currency_breakdown=dict(currency_breakdown),
        client_breakdown=dict(client_breakdown),
        oldest_invoice_date=dates[0] if dates else None,
        newest_invoice_date=dates[-1] if dates else None,
    )


class AnalyticsService:
    """Invoice analytics scoped to one user.

    Deleted invoices never count; archived ones only count for the global
    view when explicitly requested.
    """

    def __init__(self, invoices: InvoiceRepository):
        self._invoices = invoices

    def _owned_folder(self, user_id: str, folder_id: str) -> Optional[InvoiceFolder]:
        folder = self._invoices.get_folder(folder_id)
        if not folder or folder.user_id != user_id or folder.deleted_at:
            return None
        return folder

    def _active_in_folder(self, user_id: str, folder_id: Optional[str]) -> List[InvoiceRecord]:
        return [i for i in self._invoices.list_for_folder(folder_id) if i.user_id == user_id and i.is_active]

    def _active_for_user(self, user_id: str) -> List[InvoiceRecord]:
        return [i for i in self._invoices.list_for_user(user_id) if i.is_active]

    def folder_analytics(self, *, user_id: str, folder_id: str) -> Optional[FolderAnalytics]:
        folder = self._owned_folder(user_id, folder_id)
        if not folder:
            logger.debug("Folder %s not visible to user %s", folder_id, user_id)
            return None
        return summarize(self._active_in_folder(user_id, folder.folder_id), folder)

    def all_folders_analytics(self, *, user_id: str) -> List[FolderAnalytics]:
        return [
            summarize(self._active_in_folder(user_id, folder.folder_id), folder)
            for folder in self._invoices.list_folders_for_user(user_id)
            if not folder.deleted_at
        ]

    def global_analytics(self, *, user_id: str, include_archived: bool = False) -> FolderAnalytics:
        invoices = [
            i
            for i in self._invoices.list_for_user(user_id)
            if not i.deleted_at and (include_archived or not i.is_archived)
        ]
        return summarize(invoices)

    def unfiled_analytics(self, *, user_id: str) -> FolderAnalytics:
        return summarize(self._active_in_folder(user_id, None))

    def analytics_by_status(self, *, user_id: str) -> Dict[str, StatusAnalytics]:
        groups: Dict[InvoiceStatus, List[InvoiceRecord]] = defaultdict(list)
        for invoice in self._active_for_user(user_id):
            groups[invoice.status].append(invoice)

        out: Dict[str, StatusAnalytics] = {}
        for status, invoices in groups.items():
            total_amount = _amount(invoices)
            out[status.value] = StatusAnalytics(
                count=len(invoices),
                total_amount=total_amount,
                total_hours=sum(i.total_hours for i in invoices),
                average_amount=_average(total_amount, len(invoices)),
            )
        return out

    def analytics_by_client(self, *, user_id: str) -> List[ClientAnalytics]:
        groups: Dict[str, List[InvoiceRecord]] = defaultdict(list)
        for invoice in self._active_for_user(user_id):
            groups[_client_name(invoice)].append(invoice)

        out: List[ClientAnalytics] = []
        for client_name, invoices in groups.items():
            total_amount = _amount(invoices)
            out.append(
                ClientAnalytics(
                    client_name=client_name,
                    invoice_count=len(invoices),
                    total_amount=total_amount,
                    total_hours=sum(i.total_hours for i in invoices),
                    paid_amount=_amount([i for i in invoices if i.status is InvoiceStatus.PAID]),
                    pending_amount=_amount([i for i in invoices if i.status not in SETTLED_STATUSES]),
                    average_amount=_average(total_amount, len(invoices)),
                    last_invoice_date=max(i.issue_date for i in invoices),
                )
            )

        out.sort(key=lambda x: x.total_amount, reverse=True)
        return out

    def monthly_analytics(self, *, user_id: str, year: int) -> List[MonthlyAnalytics]:
        months = {m: MonthlyAnalytics(month=f"{year}-{m:02d}") for m in range(1, 13)}

        for invoice in self._active_for_user(user_id):
            issued = to_date(invoice.issue_date)
            if issued.year != year:
                continue
            bucket = months[issued.month]
            bucket.invoiced += invoice.total_amount
            bucket.hours += invoice.total_hours
            bucket.count += 1
            if invoice.status is InvoiceStatus.PAID:
                bucket.paid += invoice.total_amount

        return [months[m] for m in range(1, 13)]
