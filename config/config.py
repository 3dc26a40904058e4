import os


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "workhub-dashboard-secret"

    # Upstream workhub REST API
    API_BASE_URL = os.environ.get("API_BASE_URL", "http://localhost:8080/api")
    API_TIMEOUT = float(os.environ.get("API_TIMEOUT", "10"))
    SESSION_COOKIE_NAME = os.environ.get("SESSION_COOKIE_NAME", "JSESSIONID")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()


def api_config() -> dict:
    return {
        "base_url": os.getenv("API_BASE_URL", Config.API_BASE_URL),
        "timeout": float(os.getenv("API_TIMEOUT", str(Config.API_TIMEOUT))),
        "cookie_name": os.getenv("SESSION_COOKIE_NAME", Config.SESSION_COOKIE_NAME),
    }
