from __future__ import annotations

from enum import Enum


class RecurrencePolicy(str, Enum):
    """How the current billing window is derived from today's date."""

    BOTH_15TH_AND_LAST = "BOTH_15TH_AND_LAST"
    EVERY_15TH = "EVERY_15TH"
    EVERY_LAST_DAY = "EVERY_LAST_DAY"
    CUSTOM = "CUSTOM"


class PeriodBatchType(str, Enum):
    """Manually selected period variant, independent of auto-detection."""

    FIRST_BATCH = "1st_batch"
    SECOND_BATCH = "2nd_batch"
    WHOLE_MONTH = "whole_month"


class WorkdayType(str, Enum):
    """Which days of a billing period count as billable dates."""

    WEEKDAYS_ONLY = "WEEKDAYS_ONLY"
    ALL_DAYS = "ALL_DAYS"
    CUSTOM = "CUSTOM"


class InvoiceStatus(str, Enum):
    DRAFT = "DRAFT"
    TO_SEND = "TO_SEND"
    SENT = "SENT"
    VIEWED = "VIEWED"
    PAYMENT_PENDING = "PAYMENT_PENDING"
    PARTIAL_PAYMENT = "PARTIAL_PAYMENT"
    PAID = "PAID"
    OVERDUE = "OVERDUE"
    CANCELLED = "CANCELLED"
    REFUNDED = "REFUNDED"
