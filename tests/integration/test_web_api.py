"""Integration tests for the REST API."""

from __future__ import annotations

import base64
import json
from urllib.parse import quote

import pytest
from fastapi.testclient import TestClient

from drawers.application.codec import LayoutCodec
from drawers.application.factory import ServiceFactory
from drawers.web.app import create_app
from drawers.web.dependencies import get_service_factory

codec = LayoutCodec()


@pytest.fixture
def client() -> TestClient:
    app = create_app()
    factory = ServiceFactory()
    app.dependency_overrides[get_service_factory] = lambda: factory
    return TestClient(app)


def _place(client: TestClient, definition_id: str, x: int, y: int, token: str | None = None, **extra):
    params = {"layout": token} if token else {}
    return client.post(
        "/api/v1/layout/panels",
        params=params,
        json={"definition_id": definition_id, "x": x, "y": y, **extra},
    )


@pytest.fixture
def placed(client: TestClient) -> dict:
    """Response body for a 1x2 panel placed at the origin."""
    response = _place(client, "gridfinity-bin-1x2", 0, 0)
    assert response.status_code == 200
    return response.json()


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        assert client.get("/health").json() == {"status": "healthy"}


# =============================================================================
# Layout endpoints
# =============================================================================


class TestGetLayout:
    """Tests for GET /layout."""

    def test_default_layout(self, client: TestClient) -> None:
        body = client.get("/api/v1/layout").json()
        assert body["layout"]["drawer"] == {"width_mm": 300, "depth_mm": 420, "height_mm": 60}
        assert body["layout"]["grid"] == {"columns": 7, "rows": 10}
        assert body["layout"]["panels"] == []
        assert body["total_price"] == 0
        assert body["currency"] == "PLN"

    def test_decodes_token(self, client: TestClient, placed: dict) -> None:
        body = client.get("/api/v1/layout", params={"layout": placed["token"]}).json()
        assert body["layout"] == placed["layout"]
        assert body["token"] == placed["token"]

    def test_garbage_token_gives_default_layout(self, client: TestClient) -> None:
        body = client.get("/api/v1/layout", params={"layout": "%%%garbage"}).json()
        assert body["layout"]["panels"] == []

    def test_deeply_nested_token_gives_default_layout(self, client: TestClient) -> None:
        escaped = quote("[" * 200_000).encode("ascii")
        token = base64.urlsafe_b64encode(escaped).decode("ascii").rstrip("=")
        response = client.get("/api/v1/layout", params={"layout": token})
        assert response.status_code == 200
        assert response.json()["layout"]["panels"] == []


class TestLayoutWorkflows:
    """Tests for the layout editing endpoints."""

    def test_place(self, placed: dict) -> None:
        assert placed["panel"]["definition_id"] == "gridfinity-bin-1x2"
        assert placed["panel"]["label"] == "Bin 1×2"
        assert placed["total_price"] == 24
        assert codec.decode(placed["token"]).ok

    def test_place_overlap_conflict(self, client: TestClient, placed: dict) -> None:
        response = _place(client, "gridfinity-bin-1x2", 0, 1, placed["token"])
        assert response.status_code == 409
        body = response.json()
        assert body["error"] == "The panel does not fit at this position."
        assert body["error_type"] == "rejected"

    def test_place_edge_adjacent(self, client: TestClient, placed: dict) -> None:
        response = _place(client, "gridfinity-bin-1x2", 0, 2, placed["token"])
        assert response.status_code == 200
        assert len(response.json()["layout"]["panels"]) == 2

    def test_place_rotated(self, client: TestClient) -> None:
        response = _place(client, "gridfinity-bin-2x3", 0, 0, orientation="rotated")
        assert response.json()["panel"]["orientation"] == "rotated"

    def test_invalid_body(self, client: TestClient) -> None:
        response = client.post("/api/v1/layout/panels", json={"definition_id": "x"})
        assert response.status_code == 422

    def test_auto_place(self, client: TestClient, placed: dict) -> None:
        response = client.post(
            "/api/v1/layout/panels/auto",
            params={"layout": placed["token"]},
            json={"definition_id": "gridfinity-bin-1x2"},
        )
        assert response.status_code == 200
        assert response.json()["panel"]["x"] == 1

    def test_set_drawer(self, client: TestClient, placed: dict) -> None:
        response = client.post(
            "/api/v1/layout/drawer",
            params={"layout": placed["token"]},
            json={"width_mm": 50, "depth_mm": 130, "height_mm": 500},
        )
        body = response.json()
        assert body["layout"]["drawer"] == {"width_mm": 100, "depth_mm": 130, "height_mm": 200}
        assert body["layout"]["grid"] == {"columns": 2, "rows": 3}
        assert len(body["layout"]["panels"]) == 1

    def test_set_drawer_overflowing_number_clamps(self, client: TestClient) -> None:
        """A JSON number too large for a float reads as infinity and clamps."""
        response = client.post(
            "/api/v1/layout/drawer",
            content='{"width_mm": 1e309, "depth_mm": -1e309, "height_mm": 60}',
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 200
        drawer = response.json()["layout"]["drawer"]
        assert drawer == {"width_mm": 1200, "depth_mm": 100, "height_mm": 60}

    def test_move(self, client: TestClient, placed: dict) -> None:
        instance_id = placed["panel"]["instance_id"]
        response = client.post(
            f"/api/v1/layout/panels/{instance_id}/move",
            params={"layout": placed["token"]},
            json={"x": 4, "y": 5},
        )
        assert response.status_code == 200
        assert (response.json()["panel"]["x"], response.json()["panel"]["y"]) == (4, 5)

    def test_move_out_of_bounds(self, client: TestClient, placed: dict) -> None:
        instance_id = placed["panel"]["instance_id"]
        response = client.post(
            f"/api/v1/layout/panels/{instance_id}/move",
            params={"layout": placed["token"]},
            json={"x": 0, "y": 9},
        )
        assert response.status_code == 409

    def test_rotate(self, client: TestClient, placed: dict) -> None:
        instance_id = placed["panel"]["instance_id"]
        response = client.post(
            f"/api/v1/layout/panels/{instance_id}/rotate", params={"layout": placed["token"]}
        )
        assert response.json()["panel"]["orientation"] == "rotated"

    def test_rotate_blocked(self, client: TestClient, placed: dict) -> None:
        token = _place(client, "gridfinity-bin-1x1", 1, 0, placed["token"]).json()["token"]
        instance_id = placed["panel"]["instance_id"]
        response = client.post(
            f"/api/v1/layout/panels/{instance_id}/rotate", params={"layout": token}
        )
        assert response.status_code == 409
        assert response.json()["error"] == "No room to rotate the panel at this position."

    def test_rename(self, client: TestClient, placed: dict) -> None:
        instance_id = placed["panel"]["instance_id"]
        response = client.post(
            f"/api/v1/layout/panels/{instance_id}/rename",
            params={"layout": placed["token"]},
            json={"label": "Knives"},
        )
        panel = response.json()["panel"]
        assert panel["custom_label"] == "Knives"
        assert panel["label"] == "Knives"

    def test_remove(self, client: TestClient, placed: dict) -> None:
        instance_id = placed["panel"]["instance_id"]
        response = client.delete(
            f"/api/v1/layout/panels/{instance_id}", params={"layout": placed["token"]}
        )
        assert response.status_code == 200
        assert response.json()["layout"]["panels"] == []

    def test_remove_unknown(self, client: TestClient) -> None:
        assert client.delete("/api/v1/layout/panels/missing").status_code == 409


# =============================================================================
# Catalog, presets and export
# =============================================================================


class TestCatalog:
    """Tests for GET /catalog."""

    def test_catalog(self, client: TestClient) -> None:
        body = client.get("/api/v1/catalog").json()
        assert body["currency"] == "PLN"
        assert [p["price"] for p in body["panels"]] == [18, 24, 35, 48, 62]
        assert all(p["available"] for p in body["panels"])
        assert body["panels"][3]["width_cm"] == "8.4"

    def test_availability_follows_layout(self, client: TestClient) -> None:
        token = client.post(
            "/api/v1/layout/drawer", json={"width_mm": 100, "depth_mm": 100, "height_mm": 60}
        ).json()["token"]
        panels = client.get("/api/v1/catalog", params={"layout": token}).json()["panels"]
        available = {p["id"]: p["available"] for p in panels}
        assert available["gridfinity-bin-2x2"] is True
        assert available["gridfinity-bin-2x3"] is False


class TestPresets:
    """Tests for the preset endpoints."""

    def test_list(self, client: TestClient) -> None:
        body = client.get("/api/v1/presets").json()
        assert [p["id"] for p in body["presets"]] == ["starter-kitchen", "desk-pro"]

    def test_get(self, client: TestClient) -> None:
        body = client.get("/api/v1/presets/starter-kitchen").json()
        assert body["name"] == "Kitchen starter"
        assert body["total_price"] == 131
        assert not any(p["instance_id"].startswith("preset-") for p in body["layout"]["panels"])
        assert codec.decode(body["token"]).ok

    def test_unknown(self, client: TestClient) -> None:
        response = client.get("/api/v1/presets/garage")
        assert response.status_code == 404
        assert response.json()["error_type"] == "not_found"


class TestExport:
    """Tests for the export endpoints."""

    def test_formats(self, client: TestClient) -> None:
        assert client.get("/api/v1/export/formats").json() == {"formats": ["json", "pdf", "txt"]}

    def test_summary(self, client: TestClient, placed: dict) -> None:
        body = client.get("/api/v1/export/summary", params={"layout": placed["token"]}).json()
        assert "1. Bin 1×2 – 1×2 cells" in body["summary"]
        assert body["total_price"] == 24

    def test_txt(self, client: TestClient, placed: dict) -> None:
        response = client.get("/api/v1/export/txt", params={"layout": placed["token"]})
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert "Total cost: 24 PLN" in response.text

    def test_json(self, client: TestClient, placed: dict) -> None:
        response = client.get("/api/v1/export/json", params={"layout": placed["token"]})
        assert json.loads(response.text)["totalPrice"] == 24

    def test_pdf(self, client: TestClient, placed: dict) -> None:
        response = client.get("/api/v1/export/pdf", params={"layout": placed["token"]})
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert response.content.startswith(b"%PDF-")
        assert "drawer.pdf" in response.headers["content-disposition"]

    def test_unsupported_format(self, client: TestClient) -> None:
        response = client.get("/api/v1/export/docx")
        assert response.status_code == 400
        body = response.json()
        assert body["error_type"] == "unsupported_format"
        assert body["details"]["available"] == ["json", "pdf", "txt"]


class TestConfigErrors:
    """Catalog problems surface as 422 responses."""

    def test_missing_catalog(self, tmp_path) -> None:
        app = create_app()
        factory = ServiceFactory(catalog_path=tmp_path / "missing.json")
        app.dependency_overrides[get_service_factory] = lambda: factory
        response = TestClient(app).get("/api/v1/layout")
        assert response.status_code == 422
        assert response.json()["error_type"] == "file_not_found"
