from __future__ import annotations

import json
import logging

from flask import Blueprint, current_app, jsonify, request

from buttonsmith.emitters import BUILTIN_EMITTERS, render_all
from buttonsmith.errors import ConfigError
from buttonsmith.model import ButtonConfig, config_from_dict, config_to_dict, default_config

api_bp = Blueprint("api", __name__)

log = logging.getLogger(__name__)


@api_bp.after_request
def add_cors_headers(response):
    """Allow cross-origin requests to the API."""
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
    return response


def _request_config() -> ButtonConfig:
    """Decode the request body; an empty body means the default design."""
    if not request.get_data():
        return default_config()
    try:
        data = json.loads(request.get_data(as_text=True))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"request body is not valid JSON: {exc.msg}") from exc
    return config_from_dict(data)


@api_bp.errorhandler(ConfigError)
def config_error(exc: ConfigError):
    log.warning("Rejected config: %s", exc)
    return jsonify({"error": str(exc)}), 400


@api_bp.route("/defaults")
def defaults():
    """Return the canonical default config document."""
    return jsonify(config_to_dict(default_config()))


@api_bp.route("/export", methods=["POST"])
def export_all():
    """Render every format for the posted config."""
    config = _request_config()
    return jsonify(render_all(config, current_app.extensions["export_settings"]))


@api_bp.route("/export/<fmt>", methods=["POST"])
def export_one(fmt: str):
    """Render a single format as its native media type."""
    emitter = BUILTIN_EMITTERS.get(fmt)
    if emitter is None:
        return jsonify({"error": f"unknown format {fmt!r}"}), 404
    config = _request_config()
    text = emitter.render(config, current_app.extensions["export_settings"])
    return current_app.response_class(text, mimetype=emitter.media_type)
