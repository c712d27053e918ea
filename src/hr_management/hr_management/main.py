from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .container import build_container, build_store
from .analytics.controller import register as register_analytics
from .attendance.controller import register as register_attendance
from .departments.controller import register as register_departments
from .employees.controller import register as register_employees
from .performance.controller import register as register_performance
from .projects.controller import register as register_projects
from .store.record_store import RecordStore


def create_app(*, store: RecordStore | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger = logging.getLogger("hr_management")
    logger.info("settings=%s backend=%s", settings_module, getattr(settings, "STORE_BACKEND", "mysql"))

    if store is None:
        store = build_store(
            backend=getattr(settings, "STORE_BACKEND", "mysql"),
            db_config=getattr(settings, "DB_CONFIG", {}),
            auto_init_db=bool(getattr(settings, "AUTO_INIT_DB", False)),
        )
    container = build_container(store=store, bulk_max_workers=int(getattr(settings, "BULK_MAX_WORKERS", 8)))
    app.extensions["hr_container"] = container

    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    register_employees(app, container)
    register_departments(app, container)
    register_attendance(app, container)
    register_performance(app, container)
    register_projects(app, container)
    register_analytics(app, container)

    return app
