from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient

from simulator.app import create_app
from simulator.core.config import Settings


@pytest.fixture()
def app() -> Flask:
    flask_app = create_app(Settings(max_total_months=1200, log_level="DEBUG"))
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client
