from __future__ import annotations

from functools import wraps

from flask import Flask, g, jsonify, request

from ..common.http import json_endpoint
from ..container import Container
from ..core.exceptions import ValidationError

USER_HEADER = "X-User-Id"


def register(app: Flask, container: Container) -> None:
    def identity_required(view):
        """The identity provider's middleware sets the user header upstream."""

        @wraps(view)
        def wrapper(*args, **kwargs):
            user_id = (request.headers.get(USER_HEADER) or "").strip()
            if not user_id:
                return jsonify({"success": False, "message": "Authentication required"}), 401
            g.user_id = user_id
            return view(*args, **kwargs)

        return wrapper

    @app.route("/api/analytics/folders/<folder_id>", methods=["GET"], endpoint="analytics_folder")
    @identity_required
    @json_endpoint
    def analytics_folder(folder_id: str):
        result = container.analytics_service.folder_analytics(user_id=g.user_id, folder_id=folder_id)
        if result is None:
            return jsonify({"success": False, "message": "Folder not found"}), 404
        return jsonify(result.to_dict())

    @app.route("/api/analytics/folders", methods=["GET"], endpoint="analytics_folders")
    @identity_required
    @json_endpoint
    def analytics_folders():
        return jsonify([a.to_dict() for a in container.analytics_service.all_folders_analytics(user_id=g.user_id)])

    @app.route("/api/analytics/global", methods=["GET"], endpoint="analytics_global")
    @identity_required
    @json_endpoint
    def analytics_global():
        include_archived = request.args.get("include_archived", "").lower() in {"1", "true", "yes"}
        result = container.analytics_service.global_analytics(user_id=g.user_id, include_archived=include_archived)
        return jsonify(result.to_dict())

    @app.route("/api/analytics/unfiled", methods=["GET"], endpoint="analytics_unfiled")
    @identity_required
    @json_endpoint
    def analytics_unfiled():
        return jsonify(container.analytics_service.unfiled_analytics(user_id=g.user_id).to_dict())

    @app.route("/api/analytics/by-status", methods=["GET"], endpoint="analytics_by_status")
    @identity_required
    @json_endpoint
    def analytics_by_status():
        result = container.analytics_service.analytics_by_status(user_id=g.user_id)
        return jsonify({status: a.to_dict() for status, a in result.items()})

    @app.route("/api/analytics/by-client", methods=["GET"], endpoint="analytics_by_client")
    @identity_required
    @json_endpoint
    def analytics_by_client():
        return jsonify([a.to_dict() for a in container.analytics_service.analytics_by_client(user_id=g.user_id)])

    @app.route("/api/analytics/monthly", methods=["GET"], endpoint="analytics_monthly")
    @identity_required
    @json_endpoint
    def analytics_monthly():
        year_s = request.args.get("year")
        if year_s:
            try:
                year = int(year_s)
            except ValueError:
                raise ValidationError("year must be a number") from None
        else:
            year = container.clock().year
        result = container.analytics_service.monthly_analytics(user_id=g.user_id, year=year)
        return jsonify([m.to_dict() for m in result])
