from __future__ import annotations

from flask import Flask

from buttonsmith.config import ExportSettings


def create_app(
    settings: ExportSettings | None = None,
    config: dict | None = None,
) -> Flask:
    """Create and configure the Flask app."""
    app = Flask(__name__)
    app.config.update(config or {})

    # Export settings are shared by every request
    app.extensions["export_settings"] = settings or ExportSettings()

    from buttonsmith.web.routes.api import api_bp

    app.register_blueprint(api_bp, url_prefix="/api")

    return app
