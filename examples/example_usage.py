"""Example: use the service layer directly, without Flask.

Fetches this month's records with an existing upstream session and prints the
summary cards. Set WORKHUB_SESSION to a valid JSESSIONID first.
"""

import importlib
import os

from config import get_settings_module

from workhub_dashboard.common.datetime_utils import now_local
from workhub_dashboard.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(api_config=settings.API_CONFIG)
    services = container.for_session(os.environ["WORKHUB_SESSION"])

    now = now_local()
    print(services.dashboard_service.monthly_summary(now.year, now.month, now)["cards"])
    print(services.dashboard_service.weekly_chart(now))


if __name__ == "__main__":
    main()
