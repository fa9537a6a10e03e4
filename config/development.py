import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_db"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

# "leave": CL/2 only from leave + full attendance; "duration": short worked days are CL/2 too
HALF_DAY_MODE = os.getenv("HALF_DAY_MODE", "leave")
# "span": last OUT - first IN; "paired": sum of IN/OUT pairs
WORKED_TIME_BASIS = os.getenv("WORKED_TIME_BASIS", "span")
# "punches": attendance_punch table; "swipes": legacy attendance table
PUNCH_SOURCE = os.getenv("PUNCH_SOURCE", "punches")

# None = detect from the tables present at startup
HOLIDAYS_ENABLED = None
LEAVES_ENABLED = None
LEAVES_EMPLOYEE_SCOPED = True
LEAVES_HAVE_STATUS = True

CACHE_ENABLED = bool(int(os.getenv("CACHE_ENABLED", "1")))
VERIFY_EMPLOYEE = bool(int(os.getenv("VERIFY_EMPLOYEE", "0")))
