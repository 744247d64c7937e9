import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "ponto_test"),
}

BUSINESS_TIMEZONE = "America/Sao_Paulo"

LOG_LEVEL = "WARNING"
TESTING = True

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

DEFAULT_LATITUDE = -23.5505
DEFAULT_LONGITUDE = -46.6333
MAX_DISTANCE_METERS = 1000.0
SKIP_LOCATION_VALIDATION = True
LOCATION_RADIUS_OVERRIDE_METERS = 0.0
