from __future__ import annotations

import importlib
import logging

from config import get_settings_module

from facilities_tracker.database.bootstrap import SCHEMA_PATH, apply_schema, list_tables
from facilities_tracker.database.connection import DBConfig, DatabaseConnection

logger = logging.getLogger("init_db")


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    settings = importlib.import_module(get_settings_module())
    db = DatabaseConnection(DBConfig.from_dict(dict(settings.DB_CONFIG)))

    apply_schema(db, schema_path=SCHEMA_PATH)
    tables = list_tables(db)
    logger.info(
        "Applied schema.sql -> %s@%s:%s/%s (tables=%s)",
        db.config.user,
        db.config.host,
        db.config.port,
        db.config.database,
        len(tables),
    )


if __name__ == "__main__":
    main()
