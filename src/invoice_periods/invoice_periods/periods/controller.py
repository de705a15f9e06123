from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import to_date
from ..common.http import json_endpoint
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _reference():
        value = request.args.get("date")
        return to_date(value) if value else None

    @app.route("/api/periods/detect", methods=["GET"], endpoint="periods_detect")
    @json_endpoint
    def periods_detect():
        period = container.period_service.detect(request.args.get("policy") or None, _reference())
        return jsonify(period.to_dict())

    @app.route("/api/periods/batch", methods=["GET"], endpoint="periods_batch")
    @json_endpoint
    def periods_batch():
        period = container.period_service.batch(request.args.get("type") or "", _reference())
        return jsonify(period.to_dict())

    @app.route("/api/periods/options", methods=["GET"], endpoint="periods_options")
    @json_endpoint
    def periods_options():
        return jsonify([p.to_dict() for p in container.period_service.options(_reference())])

    @app.route("/api/periods/window", methods=["GET"], endpoint="periods_window")
    @json_endpoint
    def periods_window():
        period = container.period_service.billing_window(request.args.get("policy") or None, _reference())
        return jsonify(period.to_dict())
