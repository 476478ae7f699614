from __future__ import annotations

import importlib
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.logging import setup_logging
from .container import Container, build_container
from .core.constants import DEFAULT_ACTIVITY_SUFFIX, MAX_SERVICE_HOURS, SINGLE_PUNCH_HOURS
from .export.controller import register as register_export


def load_settings():
    load_dotenv(override=False)
    return importlib.import_module(get_settings_module())


def create_app(container: Optional[Container] = None) -> Flask:
    settings = load_settings()
    app = Flask(__name__)

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["MAX_SERVICE_HOURS"] = float(getattr(settings, "MAX_SERVICE_HOURS", MAX_SERVICE_HOURS))
    app.config["SINGLE_PUNCH_HOURS"] = float(getattr(settings, "SINGLE_PUNCH_HOURS", SINGLE_PUNCH_HOURS))
    app.config["EXPORT_ACTIVITY_SUFFIX"] = getattr(settings, "EXPORT_ACTIVITY_SUFFIX", DEFAULT_ACTIVITY_SUFFIX)

    logger = setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings.__name__,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )
        container = build_container(
            db_config=db_config,
            max_hours=app.config["MAX_SERVICE_HOURS"],
            single_punch_hours=app.config["SINGLE_PUNCH_HOURS"],
            activity_suffix=app.config["EXPORT_ACTIVITY_SUFFIX"],
        )

    register_attendance(app, container)
    register_export(app, container)

    return app
