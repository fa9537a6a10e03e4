import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_db"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

HALF_DAY_MODE = os.getenv("HALF_DAY_MODE", "leave")
WORKED_TIME_BASIS = os.getenv("WORKED_TIME_BASIS", "span")
PUNCH_SOURCE = os.getenv("PUNCH_SOURCE", "punches")

HOLIDAYS_ENABLED = True
LEAVES_ENABLED = True
LEAVES_EMPLOYEE_SCOPED = True
LEAVES_HAVE_STATUS = True

CACHE_ENABLED = True
VERIFY_EMPLOYEE = bool(int(os.getenv("VERIFY_EMPLOYEE", "1")))
