import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "ponto_db"),
}

BUSINESS_TIMEZONE = os.getenv("BUSINESS_TIMEZONE", "America/Sao_Paulo")

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, schema.sql is applied on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

DEFAULT_LATITUDE = float(os.getenv("DEFAULT_LATITUDE", "-23.5505"))
DEFAULT_LONGITUDE = float(os.getenv("DEFAULT_LONGITUDE", "-46.6333"))
MAX_DISTANCE_METERS = float(os.getenv("MAX_DISTANCE_METERS", "1000"))
SKIP_LOCATION_VALIDATION = bool(int(os.getenv("SKIP_LOCATION_VALIDATION", "0")))
# Widens every allowed radius while testing on real devices.
LOCATION_RADIUS_OVERRIDE_METERS = float(os.getenv("LOCATION_RADIUS_OVERRIDE_METERS", "50000"))
