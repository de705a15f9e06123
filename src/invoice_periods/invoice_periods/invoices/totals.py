from __future__ import annotations

from typing import Iterable, Optional

from ..common.validators import require_non_negative, require_percent
from ..work_hours.model import WorkDay
from ..work_hours.totals import calculate_work_totals
from .model import InvoiceTotals, LineItem


def calculate_invoice_totals(
    work_days: Iterable[WorkDay],
    *,
    hourly_rate: float,
    line_items: Optional[Iterable[LineItem]] = None,
    discount_percent: float = 0,
    tax_percent: float = 0,
) -> InvoiceTotals:
    """Hours times rate plus line items, then discount, then tax on the discounted amount."""
    hourly_rate = require_non_negative(hourly_rate, "hourly_rate")
    discount_percent = require_percent(discount_percent, "discount_percent")
    tax_percent = require_percent(tax_percent, "tax_percent")

    work = calculate_work_totals(work_days)
    line_items_total = sum(item.amount for item in line_items or ())
    subtotal = work.total_hours * hourly_rate + line_items_total

    discount_amount = subtotal * (discount_percent / 100)
    after_discount = subtotal - discount_amount
    tax_amount = after_discount * (tax_percent / 100)

    return InvoiceTotals(
        total_days=work.total_days,
        total_hours=work.total_hours,
        subtotal=subtotal,
        discount_amount=discount_amount,
        tax_amount=tax_amount,
        total_amount=after_discount + tax_amount,
    )
