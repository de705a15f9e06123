from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .analytics.controller import register as register_analytics
from .invoices.controller import register as register_invoices
from .periods.controller import register as register_periods
from .work_hours.controller import register as register_work_hours

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
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

    if container is None:
        container = build_container(
            default_policy=getattr(settings, "DEFAULT_RECURRENCE_POLICY"),
            default_hours_per_day=getattr(settings, "DEFAULT_HOURS_PER_DAY"),
            invoice_seed_path=getattr(settings, "INVOICE_SEED_PATH", None),
        )
    logger.info("invoice-periods started with settings=%s", settings_module)

    register_periods(app, container)
    register_work_hours(app, container)
    register_invoices(app, container)
    register_analytics(app, container)

    return app
