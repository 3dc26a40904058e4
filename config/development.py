import os

from .config import api_config

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

API_CONFIG = api_config()

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()

DEBUG = True
