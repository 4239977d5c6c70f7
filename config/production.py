import os

from config import env_list

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "facilities_db"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

HEIGHT_POLICY = os.getenv("HEIGHT_POLICY", "always")
VOLUME_WORK_TYPES = env_list("VOLUME_WORK_TYPES", "masonry,plumbing")
EMPLOYEE_COUNT_POLICY = os.getenv("EMPLOYEE_COUNT_POLICY", "actual")
TREND_MONTHS = int(os.getenv("TREND_MONTHS", "6"))
DEFAULT_RATES = None
