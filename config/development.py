import os

from config import env_list

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "facilities_db"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

# "always" multiplies area by height for every work type, "volume_only" just for VOLUME_WORK_TYPES
HEIGHT_POLICY = os.getenv("HEIGHT_POLICY", "always")
VOLUME_WORK_TYPES = env_list("VOLUME_WORK_TYPES", "masonry,plumbing")

# "actual" counts employee rows, "estimate" uses one employee per five tasks
EMPLOYEE_COUNT_POLICY = os.getenv("EMPLOYEE_COUNT_POLICY", "actual")

TREND_MONTHS = int(os.getenv("TREND_MONTHS", "6"))

# None keeps the built-in rate table
DEFAULT_RATES = None
