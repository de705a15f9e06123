from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body, json_endpoint
from ..common.validators import require_hours
from ..container import Container
from ..core.exceptions import ValidationError
from .generator import generate_work_hours_for_period
from .model import parse_work_days
from .totals import calculate_work_totals


def register(app: Flask, container: Container) -> None:
    @app.route("/api/work-hours", methods=["GET"], endpoint="work_hours_generate")
    @json_endpoint
    def work_hours_generate():
        start = request.args.get("start")
        end = request.args.get("end")
        if not start or not end:
            raise ValidationError("start and end are required")
        hours = require_hours(request.args.get("hours", container.default_hours_per_day))

        days = generate_work_hours_for_period(start, end, hours)
        return jsonify({"workDays": [d.to_dict() for d in days], **calculate_work_totals(days).to_dict()})

    @app.route("/api/work-hours/totals", methods=["POST"], endpoint="work_hours_totals")
    @json_endpoint
    def work_hours_totals():
        days = parse_work_days(json_body().get("workDays"))
        return jsonify(calculate_work_totals(days).to_dict())
