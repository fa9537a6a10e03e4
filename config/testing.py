import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_db_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

HALF_DAY_MODE = "leave"
WORKED_TIME_BASIS = "span"
PUNCH_SOURCE = "punches"

HOLIDAYS_ENABLED = True
LEAVES_ENABLED = True
LEAVES_EMPLOYEE_SCOPED = True
LEAVES_HAVE_STATUS = True

CACHE_ENABLED = True
VERIFY_EMPLOYEE = False
