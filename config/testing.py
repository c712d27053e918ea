import os

from config.config import *  # noqa: F401,F403

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

STORE_BACKEND = os.getenv("STORE_BACKEND", "memory")
LOG_LEVEL = "WARNING"
BULK_MAX_WORKERS = 4

AUTO_INIT_DB = False
