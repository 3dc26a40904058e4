SECRET_KEY = "test-secret"

API_CONFIG = {
    "base_url": "http://workhub.test/api",
    "timeout": 1,
    "cookie_name": "JSESSIONID",
}

LOG_LEVEL = "WARNING"

DEBUG = False
TESTING = True
