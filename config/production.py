import os

from .config import api_config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

API_CONFIG = api_config()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

DEBUG = False
