from __future__ import annotations

from flask import Flask, jsonify, request

from ..common import datetime_utils
from ..common.validators import require_month, require_year
from ..common.web import session_required


def register(app: Flask, container) -> None:
    login_required = session_required(container)

    def _year_month(now) -> tuple[int, int]:
        year = require_year(request.args.get("year") or now.year)
        month = require_month(request.args.get("month") or now.month)
        return year, month

    @app.route("/api/report/monthly", methods=["GET"], endpoint="report_monthly")
    @login_required
    def report_monthly(services):
        now = datetime_utils.now_local()
        year, month = _year_month(now)
        return jsonify({"success": True, "data": services.dashboard_service.monthly_summary(year, month, now)})

    @app.route("/api/report/trend", methods=["GET"], endpoint="report_trend")
    @login_required
    def report_trend(services):
        year, month = _year_month(datetime_utils.now_local())
        return jsonify({"success": True, "data": services.dashboard_service.work_trend(year, month)})

    @app.route("/api/report/status", methods=["GET"], endpoint="report_status")
    @login_required
    def report_status(services):
        year, month = _year_month(datetime_utils.now_local())
        return jsonify({"success": True, "data": services.dashboard_service.status_breakdown(year, month)})

    @app.route("/api/report/monthly.csv", methods=["GET"], endpoint="report_monthly_csv")
    @login_required
    def report_monthly_csv(services):
        now = datetime_utils.now_local()
        year, month = _year_month(now)

        report = services.report_service.build_monthly_report(year=year, month=month, now=now)
        filename = f"attendance_{year:04d}{month:02d}.csv"
        return app.response_class(
            services.report_service.to_csv(report),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
