from __future__ import annotations

from flask import Flask, jsonify

from ..common import datetime_utils
from ..common.web import session_required


def register(app: Flask, container) -> None:
    login_required = session_required(container)

    @app.route("/api/dashboard/weekly", methods=["GET"], endpoint="dashboard_weekly")
    @login_required
    def dashboard_weekly(services):
        now = datetime_utils.now_local()
        return jsonify({"success": True, "data": services.dashboard_service.weekly_chart(now)})

    @app.route("/api/dashboard/today", methods=["GET"], endpoint="dashboard_today")
    @login_required
    def dashboard_today(services):
        now = datetime_utils.now_local()
        return jsonify({"success": True, "data": services.dashboard_service.today_status(now)})

    @app.route("/api/dashboard/work-leave", methods=["GET"], endpoint="dashboard_work_leave")
    @login_required
    def dashboard_work_leave(services):
        now = datetime_utils.now_local()
        return jsonify({"success": True, "data": services.dashboard_service.work_and_leave(now)})
