from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv

from .config import get_settings_module
from .container import Container, build_container
from .core.constants import DEFAULT_BUSINESS_TIMEZONE
from .database.bootstrap import apply_schema, list_tables
from .timerecords.location import LocationValidator

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, str(level).upper(), logging.INFO), format=LOG_FORMAT)


def create_container() -> Container:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    db_config = getattr(settings, "DB_CONFIG")

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(db_config, schema_path=SCHEMA_PATH)
        logger.info("schema ready (tables=%d)", len(list_tables(db_config)))

    location_validator = LocationValidator(
        default_latitude=float(getattr(settings, "DEFAULT_LATITUDE")),
        default_longitude=float(getattr(settings, "DEFAULT_LONGITUDE")),
        max_distance_meters=float(getattr(settings, "MAX_DISTANCE_METERS")),
        skip_validation=bool(getattr(settings, "SKIP_LOCATION_VALIDATION", False)),
        radius_override_meters=float(getattr(settings, "LOCATION_RADIUS_OVERRIDE_METERS", 0)),
    )

    return build_container(
        db_config=db_config,
        timezone=getattr(settings, "BUSINESS_TIMEZONE", DEFAULT_BUSINESS_TIMEZONE),
        location_validator=location_validator,
    )
