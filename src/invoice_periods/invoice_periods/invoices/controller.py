from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, json_endpoint
from ..container import Container
from ..core.exceptions import ValidationError
from ..work_hours.model import parse_work_days
from .model import LineItem
from .totals import calculate_invoice_totals


def register(app: Flask, container: Container) -> None:
    @app.route("/api/invoices/totals", methods=["POST"], endpoint="invoices_totals")
    @json_endpoint
    def invoices_totals():
        data = json_body()
        raw_items = data.get("lineItems") or []
        if not isinstance(raw_items, list):
            raise ValidationError("lineItems must be a list")

        totals = calculate_invoice_totals(
            parse_work_days(data.get("dailyWorkHours") or []),
            hourly_rate=data.get("hourlyRate", 0),
            line_items=[LineItem.from_dict(i) for i in raw_items if isinstance(i, dict)],
            discount_percent=data.get("discountPercent", 0),
            tax_percent=data.get("taxPercent", 0),
        )
        return jsonify(totals.to_dict())
