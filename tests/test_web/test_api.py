"""Tests for the JSON compile API."""
from __future__ import annotations

from buttonsmith.config import ExportSettings
from buttonsmith.emitters import generate_css, generate_tailwind_classes
from buttonsmith.model import default_config
from buttonsmith.web.app import create_app


class TestDefaults:
    def test_returns_default_document(self, client, document) -> None:
        resp = client.get("/api/defaults")
        assert resp.status_code == 200
        assert resp.get_json() == document

    def test_cors_headers(self, client) -> None:
        resp = client.get("/api/defaults")
        assert resp.headers["Access-Control-Allow-Origin"] == "*"


class TestExportOne:
    def test_css(self, client, document) -> None:
        resp = client.post("/api/export/css", json=document)
        assert resp.status_code == 200
        assert resp.mimetype == "text/css"
        assert resp.get_data(as_text=True) == generate_css(default_config())

    def test_tailwind_reflects_posted_config(self, client, document) -> None:
        document["layout"]["padding"] = {"top": 12, "right": 12, "bottom": 12, "left": 12}
        resp = client.post("/api/export/tailwind", json=document)
        assert resp.status_code == 200
        assert "p-[12px]" in resp.get_data(as_text=True).split(" ")

    def test_tokens(self, client, document) -> None:
        resp = client.post("/api/export/tokens", json=document)
        assert resp.status_code == 200
        assert resp.mimetype == "application/json"
        assert "loading" not in resp.get_json()["variants"]

    def test_empty_body_uses_defaults(self, client) -> None:
        resp = client.post("/api/export/tailwind")
        assert resp.status_code == 200
        assert resp.get_data(as_text=True) == generate_tailwind_classes(default_config())

    def test_unknown_format(self, client, document) -> None:
        resp = client.post("/api/export/scss", json=document)
        assert resp.status_code == 404
        assert "scss" in resp.get_json()["error"]

    def test_malformed_config(self, client, document) -> None:
        del document["states"]["hover"]
        resp = client.post("/api/export/css", json=document)
        assert resp.status_code == 400
        assert "hover" in resp.get_json()["error"]

    def test_invalid_json_body(self, client) -> None:
        resp = client.post(
            "/api/export/css", data="{nope", content_type="application/json"
        )
        assert resp.status_code == 400
        assert "not valid JSON" in resp.get_json()["error"]

    def test_null_body_must_be_object(self, client) -> None:
        resp = client.post("/api/export/css", data="null", content_type="application/json")
        assert resp.status_code == 400
        error = resp.get_json()["error"]
        assert "expected an object" in error
        assert "not valid JSON" not in error

    def test_selector_from_app_settings(self, document) -> None:
        app = create_app(settings=ExportSettings(selector=".cta"))
        resp = app.test_client().post("/api/export/css", json=document)
        assert resp.get_data(as_text=True).startswith(".cta {")


class TestExportAll:
    def test_all_formats(self, client, document) -> None:
        resp = client.post("/api/export", json=document)
        assert resp.status_code == 200
        data = resp.get_json()
        assert set(data) == {"css", "tailwind", "tokens"}
        assert data["css"] == generate_css(default_config())
