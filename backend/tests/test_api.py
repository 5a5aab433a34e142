"""
API integration tests for the v1 color endpoints.
"""

import base64

import requests

from main import app
from huekit.api.v1 import get_namer
from huekit.services.colors.remote_naming import RemoteColorNamer


class FailingSession:
    def get(self, url, params=None, timeout=None):
        raise requests.ConnectionError("service down")


class TestConvertEndpoint:
    """Test /v1/colors/convert and /v1/colors/from-hsl."""

    def test_convert_hex(self, test_client):
        response = test_client.get("/v1/colors/convert", params={"value": "#FF0000"})

        assert response.status_code == 200
        data = response.json()
        assert data["input_format"] == "HEX"
        assert data["color"]["hex"] == "#ff0000"
        assert data["color"]["rgb"] == {"r": 255, "g": 0, "b": 0}
        assert data["color"]["hsl"] == {"h": 0, "s": 100, "l": 50}
        assert data["color"]["css_rgb"] == "rgb(255, 0, 0)"
        assert data["color"]["css_hsl"] == "hsl(0, 100%, 50%)"
        assert data["name"] == {"name": "Red", "distance": 0.0, "hex": "#ff0000", "source": "local"}

    def test_convert_shorthand_and_rgb_text(self, test_client):
        shorthand = test_client.get("/v1/colors/convert", params={"value": "#abc"}).json()
        assert shorthand["color"]["hex"] == "#aabbcc"

        rgb_text = test_client.get("/v1/colors/convert", params={"value": "0, 128, 0"}).json()
        assert rgb_text["input_format"] == "RGB"
        assert rgb_text["color"]["hex"] == "#008000"
        assert rgb_text["name"]["name"] == "Green"

    def test_convert_invalid_value(self, test_client):
        response = test_client.get("/v1/colors/convert", params={"value": "#12345"})
        assert response.status_code == 400
        assert "Unrecognized color value" in response.json()["detail"]

    def test_convert_missing_value(self, test_client):
        assert test_client.get("/v1/colors/convert").status_code == 422

    def test_from_hsl(self, test_client):
        response = test_client.get("/v1/colors/from-hsl", params={"h": 540, "s": 100, "l": 50})

        assert response.status_code == 200
        data = response.json()
        assert data["color"]["hex"] == "#00ffff"
        assert data["color"]["hsl"]["h"] == 180
        assert data["name"]["name"] == "Cyan"

    def test_from_hsl_out_of_range(self, test_client):
        assert test_client.get("/v1/colors/from-hsl", params={"h": 0, "s": 101, "l": 50}).status_code == 422

    def test_from_hsl_tiny_negative_hue(self, test_client):
        response = test_client.get("/v1/colors/from-hsl", params={"h": -1e-20, "s": 100, "l": 50})

        assert response.status_code == 200
        data = response.json()
        assert 0 <= data["color"]["hsl"]["h"] < 360
        assert data["color"]["hex"] == "#ff0000"

    def test_from_hsl_rejects_non_finite_hue(self, test_client):
        for h in ("nan", "inf", "-inf"):
            response = test_client.get("/v1/colors/from-hsl", params={"h": h, "s": 50, "l": 50})
            assert response.status_code == 422, h


class TestNameEndpoint:
    """Test /v1/colors/name."""

    def test_local_name(self, test_client):
        response = test_client.get("/v1/colors/name", params={"value": "010101"})

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Black"
        assert abs(data["distance"] - 3 ** 0.5) < 1e-9
        assert data["source"] == "local"

    def test_remote_failure_without_fallback(self, test_client):
        app.dependency_overrides[get_namer] = lambda: RemoteColorNamer(
            "https://colors.example", session=FailingSession()
        )

        response = test_client.get("/v1/colors/name", params={"value": "#000000"})

        assert response.status_code == 502
        counters = test_client.get("/metrics").json()["counters"]
        assert counters["failed_total_remote_naming"] == 1

    def test_remote_failure_with_fallback(self, test_client):
        from huekit.services.colors.naming import LocalColorNamer

        app.dependency_overrides[get_namer] = lambda: RemoteColorNamer(
            "https://colors.example", fallback=LocalColorNamer(), session=FailingSession()
        )

        data = test_client.get("/v1/colors/name", params={"value": "#000000"}).json()

        assert data["name"] == "Black"
        assert data["source"] == "remote"


class TestPalettesEndpoint:
    """Test /v1/palettes."""

    def test_all_palettes(self, test_client):
        response = test_client.get("/v1/palettes", params={"value": "#ff0000"})

        assert response.status_code == 200
        data = response.json()
        assert data["base"]["hex"] == "#ff0000"
        assert [g["kind"] for g in data["groups"]] == [
            "tints", "shades", "analogous", "complementary",
            "split_complementary", "triadic", "tetradic", "monochromatic",
        ]
        assert data["jitter_seed"] is None
        assert data["swatch_png_b64"] is None

    def test_selected_kinds(self, test_client):
        response = test_client.get(
            "/v1/palettes",
            params=[("value", "255, 0, 0"), ("kinds", "complementary"), ("kinds", "tints")],
        )

        data = response.json()
        assert [g["title"] for g in data["groups"]] == ["Tints", "Complementary"]
        complementary = data["groups"][1]
        assert [c["hex"] for c in complementary["colors"]] == ["#ff0000", "#00ffff"]
        assert complementary["description"] == "High-contrast opposing colors"

    def test_unknown_kind(self, test_client):
        response = test_client.get("/v1/palettes", params={"value": "#ff0000", "kinds": "pastel"})
        assert response.status_code == 422

    def test_invalid_base(self, test_client):
        assert test_client.get("/v1/palettes", params={"value": "red"}).status_code == 400

    def test_jitter_seed_is_reproducible(self, test_client):
        params = {"value": "#33aa66", "kinds": "analogous", "jitter_seed": 1234}
        first = test_client.get("/v1/palettes", params=params).json()
        second = test_client.get("/v1/palettes", params=params).json()

        assert first["groups"] == second["groups"]
        assert first["jitter_seed"] == 1234

    def test_swatch(self, test_client):
        response = test_client.get(
            "/v1/palettes",
            params={"value": "#ff0000", "kinds": "triadic", "include_swatch": True, "swatch_format": "strip"},
        )

        data = response.json()
        png = base64.b64decode(data["swatch_png_b64"])
        assert png.startswith(b"\x89PNG")
        assert data["swatch_metadata"]["total_colors"] == 3
        assert data["swatch_metadata"]["format"] == "strip"

    def test_bad_swatch_format(self, test_client):
        response = test_client.get("/v1/palettes", params={"value": "#ff0000", "swatch_format": "grid"})
        assert response.status_code == 422


class TestMetrics:
    def test_request_counters(self, test_client):
        test_client.get("/v1/colors/convert", params={"value": "#ffffff"})
        test_client.get("/v1/colors/convert", params={"value": "nope"})

        summary = test_client.get("/metrics").json()
        assert summary["counters"]["requests_total_convert"] == 2
        assert summary["counters"]["failed_total_invalid_color"] == 1
        assert summary["timing_stats"]["convert_duration_ms"]["count"] == 1
