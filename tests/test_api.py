"""Tests for the HTTP interface."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from asset_classifier.infrastructure.config import Settings
from asset_classifier.infrastructure.local_directory_source import LocalDirectoryAssetSource
from asset_classifier.interface.app import create_app
from asset_classifier.interface import dependencies
from asset_classifier.interface.dependencies import get_asset_source, get_use_case
from asset_classifier.services.import_batch import ImportBatchUseCase


@pytest.fixture
def client() -> Iterator[TestClient]:
    app = create_app()
    app.dependency_overrides[get_use_case] = lambda: ImportBatchUseCase()
    with TestClient(app) as test_client:
        yield test_client


class TestApi:
    """Test cases for the FastAPI routes."""

    def test_health(self, client: TestClient) -> None:
        assert client.get("/health").json() == {"status": "ok"}

    def test_classify(self, client: TestClient) -> None:
        resp = client.post("/classify", json={"names": ["Desktop_UserMgmt_List_Default@2x.png"]})

        assert resp.status_code == 200
        body = resp.json()
        asset = body["assets"][0]
        assert asset["originalName"] == "Desktop_UserMgmt_List_Default@2x.png"
        assert asset["device"] == "desktop"
        assert asset["module"] == "user-management"
        assert asset["scale"] == "2x"
        assert asset["confidence"] == 1.0
        assert body["report"]["confidence"] == 1.0
        assert body["report"]["responsiveStrategy"] == "desktop-first"
        assert list(body["report"]["devices"]) == ["desktop"]

    def test_structure(self, client: TestClient) -> None:
        resp = client.post(
            "/structure",
            json={"names": ["A/Page/X.png", "A/Dialog/Z.png"], "optimize": False},
        )

        assert resp.status_code == 200
        body = resp.json()
        module = body["structure"]["children"][0]
        assert module["type"] == "module"
        assert module["path"] == "/A/"
        dialog = module["children"][1]
        assert dialog["metadata"]["componentType"] == "dialog"
        assert dialog["metadata"]["complexity"] == "simple"
        assert dialog["assets"] == ["Z"]
        assert body["tree"].startswith("root/")

    def test_import(self, client: TestClient) -> None:
        resp = client.post("/import", json={"names": ["A/Page/X.png", "hover-button.svg"]})

        assert resp.status_code == 200
        body = resp.json()
        assert [a["originalName"] for a in body["assets"]] == ["A/Page/X.png", "hover-button.svg"]
        assert body["structure"]["assets"] == ["hover-button"]
        assert "unknown" in body["report"]["modules"]

    def test_empty_names_rejected(self, client: TestClient) -> None:
        resp = client.post("/classify", json={"names": []})

        assert resp.status_code == 422
        assert resp.json()["status"] == "error"

    def test_oversized_batch(self, client: TestClient) -> None:
        client.app.dependency_overrides[get_use_case] = lambda: ImportBatchUseCase(max_batch_size=1)

        resp = client.post("/import", json={"names": ["a.png", "b.png"]})

        assert resp.status_code == 413
        assert resp.json() == {
            "status": "error",
            "message": "Import batch has 2 names; the limit is 1.",
        }

    def test_import_directory(self, client: TestClient, tmp_path: Path) -> None:
        (tmp_path / "A" / "Page").mkdir(parents=True)
        (tmp_path / "A" / "Page" / "X.png").write_bytes(b"")
        (tmp_path / "hover-button.svg").write_bytes(b"")
        client.app.dependency_overrides[get_asset_source] = lambda: LocalDirectoryAssetSource(
            tmp_path
        )

        resp = client.post("/import/directory")

        assert resp.status_code == 200
        body = resp.json()
        assert [a["originalName"] for a in body["assets"]] == ["A/Page/X.png", "hover-button.svg"]
        assert body["structure"]["assets"] == ["hover-button"]
        assert body["structure"]["children"][0]["name"] == "A"

    def test_import_directory_missing(self, client: TestClient, tmp_path: Path) -> None:
        client.app.dependency_overrides[get_asset_source] = lambda: LocalDirectoryAssetSource(
            tmp_path / "missing"
        )

        resp = client.post("/import/directory")

        assert resp.status_code == 404
        assert resp.json()["status"] == "error"

    def test_import_directory_not_configured(
        self, client: TestClient, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("ASSET_DIR", raising=False)
        monkeypatch.setattr(dependencies, "get_settings", lambda: Settings(_env_file=None))

        resp = client.post("/import/directory")

        assert resp.status_code == 404
        assert resp.json() == {
            "status": "error",
            "message": "No asset directory configured (set ASSET_DIR).",
        }
