from __future__ import annotations

import pytest

from buttonsmith.config import ExportSettings
from buttonsmith.model import config_to_dict, default_config
from buttonsmith.web.app import create_app


@pytest.fixture
def app():
    """Create a Flask app for testing."""
    application = create_app(settings=ExportSettings())
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    """Create a Flask test client."""
    return app.test_client()


@pytest.fixture
def document() -> dict:
    """A default config document that tests may edit freely."""
    return config_to_dict(default_config())
