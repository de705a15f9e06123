from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.validators import require_number
from ..core.enums import InvoiceStatus


@dataclass(frozen=True)
class LineItem:
    """Additional charge or deduction on an invoice."""

    item_id: str
    description: str
    quantity: float
    unit_price: float
    amount: float

    @classmethod
    def from_dict(cls, data: dict) -> "LineItem":
        return cls(
            item_id=str(data.get("id") or ""),
            description=str(data.get("description") or ""),
            quantity=require_number(data.get("quantity"), "quantity"),
            unit_price=require_number(data.get("unitPrice"), "unitPrice"),
            amount=require_number(data.get("amount"), "amount"),
        )


@dataclass(frozen=True)
class InvoiceTotals:
    total_days: int
    total_hours: float
    subtotal: float
    discount_amount: float
    tax_amount: float
    total_amount: float

    def to_dict(self) -> dict:
        return {
            "totalDays": self.total_days,
            "totalHours": self.total_hours,
            "subtotal": self.subtotal,
            "discountAmount": self.discount_amount,
            "taxAmount": self.tax_amount,
            "totalAmount": self.total_amount,
        }


@dataclass(frozen=True)
class InvoiceFolder:
    folder_id: str
    user_id: str
    name: str
    deleted_at: Optional[str] = None


@dataclass(frozen=True)
class InvoiceRecord:
    """Read-model of a stored invoice, reduced to what analytics needs."""

    invoice_id: str
    user_id: str
    status: InvoiceStatus
    issue_date: str
    total_amount: float
    total_hours: float = 0
    total_days: int = 0
    currency: str = "USD"
    client_name: str = ""
    folder_id: Optional[str] = None
    is_archived: bool = False
    deleted_at: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return not self.deleted_at and not self.is_archived
