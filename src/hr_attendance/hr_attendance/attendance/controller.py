from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, g, jsonify, request

from ..auth.identity_provider import bearer_token
from ..core.exceptions import AuthenticationError, InvalidPeriod, NotFoundError, UpstreamUnavailable, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def token_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                g.subject_id = container.identity_provider.verify(bearer_token(request.headers.get("Authorization")))
            except AuthenticationError as e:
                return jsonify({"error": str(e)}), 401
            return view(*args, **kwargs)

        return wrapper

    def _period_params():
        if request.method == "POST":
            body = request.get_json(silent=True)
            if body is None:
                return None, None
            if not isinstance(body, dict):
                raise InvalidPeriod("request body must be a JSON object")
            return body.get("month"), body.get("year")
        return request.args.get("month"), request.args.get("year")

    def _run(action, label: str):
        try:
            return jsonify(action()), 200
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"error": str(e)}), 404
        except UpstreamUnavailable as e:
            logger.exception("%s failed: upstream unavailable", label)
            return jsonify({"error": str(e)}), 500

    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"}), 200

    @app.route("/api/attendance/summary", methods=["GET", "POST"], endpoint="attendance_summary")
    @token_required
    def attendance_summary():
        def action():
            month, year = _period_params()
            return [s.to_dict() for s in container.attendance_service.summarize_month(month, year)]

        return _run(action, "attendance summary")

    @app.route("/api/attendance/employee/<employee_id>", methods=["GET"], endpoint="attendance_employee")
    @token_required
    def attendance_employee(employee_id: str):
        def action():
            month, year = _period_params()
            return container.attendance_service.employee_month(employee_id, month, year).to_dict()

        return _run(action, f"attendance for employee {employee_id}")
