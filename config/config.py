"""Settings shared by every environment; environment modules override them."""

import os

SECRET_KEY = os.getenv("SECRET_KEY", "change-me")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hr_management"),
}

# "mysql" or "memory"
STORE_BACKEND = os.getenv("STORE_BACKEND", "mysql")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Worker threads used when marking attendance for several employees at once
BULK_MAX_WORKERS = int(os.getenv("BULK_MAX_WORKERS", "8"))

DEBUG = bool(int(os.getenv("DEBUG", "0")))

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
