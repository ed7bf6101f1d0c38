from __future__ import annotations

import importlib

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .payroll.controller import register as register_payroll


def load_settings():
    load_dotenv(override=False)
    return importlib.import_module(get_settings_module())


def create_app(settings=None) -> Flask:
    if settings is None:
        settings = load_settings()

    app = Flask(__name__)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    if app.config["DEBUG"]:
        print("[payroll-department] settings=", getattr(settings, "__name__", type(settings).__name__))

    container = build_container(settings=settings)

    register_payroll(app, container)

    return app
