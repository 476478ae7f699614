import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "volunteer_db_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

MAX_SERVICE_HOURS = 8
SINGLE_PUNCH_HOURS = 1
EXPORT_ACTIVITY_SUFFIX = "生命关怀"
