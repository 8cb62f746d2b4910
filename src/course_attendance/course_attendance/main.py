from __future__ import annotations

import importlib
from datetime import datetime
from typing import Any, Callable, Mapping, Optional

import structlog
from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.datetime_utils import now_local
from .container import build_container
from .core.logging import setup_logging
from .courses.controller import register as register_courses
from .credentials.store import CredentialStore
from .remote.backend import IdentityBackend
from .remote.controller import register as register_remote
from .users.controller import register as register_users

logger = structlog.get_logger(__name__)


def load_settings() -> dict[str, Any]:
    module_name = get_settings_module()
    module = importlib.import_module(module_name)
    settings = {k: getattr(module, k) for k in dir(module) if k.isupper()}
    settings["SETTINGS_MODULE"] = module_name
    return settings


def create_app(
    settings: Optional[Mapping[str, Any]] = None,
    *,
    clock: Callable[[], datetime] = now_local,
    credentials: Optional[CredentialStore] = None,
    identity_backend: Optional[IdentityBackend] = None,
) -> Flask:
    load_dotenv(override=False)
    settings = dict(settings) if settings is not None else load_settings()

    setup_logging(settings.get("LOG_LEVEL", "INFO"))

    app = Flask(__name__)
    app.secret_key = settings.get("SECRET_KEY", "change-me")
    app.config["DEBUG"] = bool(settings.get("DEBUG", False))
    app.config["TESTING"] = bool(settings.get("TESTING", False))

    container = build_container(
        settings=settings,
        clock=clock,
        credentials=credentials,
        identity_backend=identity_backend,
    )
    app.extensions["course_attendance"] = container

    if settings.get("SEED_SAMPLE_DATA"):
        container.store.seed_sample_data()

    # Remembered credentials sign the user back in on startup.
    container.store.restore_session()

    logger.info(
        "app_started",
        settings=settings.get("SETTINGS_MODULE", "custom"),
        identity_backend=settings.get("IDENTITY_BACKEND", "none"),
        authenticated=container.store.current_user is not None,
    )

    register_users(app, container)
    register_courses(app, container)
    register_attendance(app, container)
    register_remote(app, container)

    return app
