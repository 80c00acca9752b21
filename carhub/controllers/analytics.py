from __future__ import annotations

from datetime import date, datetime

from flask import Blueprint, current_app, jsonify, request

from ..exceptions import InvalidReferenceTimeError
from ..logging_config import get_logger
from ..services.analytics_service import AnalyticsService, dashboard_summary
from ..utils.filters import parse_instant, to_zone

bp = Blueprint("analytics", __name__, url_prefix="/api")
logger = get_logger(__name__)


def _reference_from_request(tz):
    """Optional ?at=<ISO instant> override for the reference time; None means now."""
    raw = (request.args.get("at") or "").strip()
    if not raw:
        return None
    parsed = parse_instant(raw)
    if not isinstance(parsed, (datetime, date)):
        raise InvalidReferenceTimeError(f"Error: cannot parse reference time '{raw}'")
    return to_zone(parsed, tz)


@bp.errorhandler(InvalidReferenceTimeError)
def bad_reference(err):
    logger.info("Rejected analytics request: %s", err.message)
    return jsonify({"error": err.message}), 400


@bp.get("/health")
def health():
    return jsonify({"status": "ok"})


@bp.get("/admin/analytics")
def admin_analytics():
    """Admin dashboard: every rollup plus the headline summary."""
    tz = current_app.config["TZ"]
    reference = _reference_from_request(tz)
    return jsonify(AnalyticsService.dashboard(reference=reference, tz=tz))


@bp.get("/admin/analytics/summary")
def admin_analytics_summary():
    tz = current_app.config["TZ"]
    reference = _reference_from_request(tz)
    result = AnalyticsService.rollup_from_store(reference=reference, tz=tz)
    return jsonify(dashboard_summary(result))
