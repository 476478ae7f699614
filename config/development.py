import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "volunteer_db"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Service-hour rules used by the Excel export
MAX_SERVICE_HOURS = float(os.getenv("MAX_SERVICE_HOURS", "8"))
SINGLE_PUNCH_HOURS = float(os.getenv("SINGLE_PUNCH_HOURS", "1"))
EXPORT_ACTIVITY_SUFFIX = os.getenv("EXPORT_ACTIVITY_SUFFIX", "生命关怀")
