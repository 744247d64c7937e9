import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "ponto"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "ponto_db"),
}

BUSINESS_TIMEZONE = os.getenv("BUSINESS_TIMEZONE", "America/Sao_Paulo")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

DEFAULT_LATITUDE = float(os.getenv("DEFAULT_LATITUDE", "-23.5505"))
DEFAULT_LONGITUDE = float(os.getenv("DEFAULT_LONGITUDE", "-46.6333"))
MAX_DISTANCE_METERS = float(os.getenv("MAX_DISTANCE_METERS", "1000"))
SKIP_LOCATION_VALIDATION = False
LOCATION_RADIUS_OVERRIDE_METERS = 0.0
