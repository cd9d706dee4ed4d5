"""Pytest configuration and shared fixtures for the asset classifier."""

from __future__ import annotations

import pytest

from asset_classifier.domain.entities import (
    AssetFormat,
    DeviceType,
    FolderMetadata,
    FolderRole,
    FolderStructure,
    ModuleType,
    PageType,
    ParsedAssetInfo,
    ScaleType,
    StateType,
)
from asset_classifier.services.asset_classifier import AssetClassifier
from asset_classifier.services.folder_hierarchy import FolderHierarchyBuilder


@pytest.fixture
def classifier() -> AssetClassifier:
    """Classifier with the built-in rule tables."""
    return AssetClassifier()


@pytest.fixture
def builder() -> FolderHierarchyBuilder:
    return FolderHierarchyBuilder()


def make_info(
    device: DeviceType = DeviceType.UNKNOWN,
    module: ModuleType = ModuleType.UNKNOWN,
    page: PageType = PageType.UNKNOWN,
    state: StateType = StateType.UNKNOWN,
    confidence: float = 0.0,
    name: str = "asset.png",
) -> ParsedAssetInfo:
    return ParsedAssetInfo(
        original_name=name,
        device=device,
        module=module,
        page=page,
        state=state,
        format=AssetFormat.PNG,
        scale=ScaleType.X1,
        confidence=confidence,
    )


def make_folder(
    name: str,
    role: FolderRole = FolderRole.PAGE,
    *,
    state: str | None = None,
    children: list[FolderStructure] | None = None,
    assets: list[str] | None = None,
) -> FolderStructure:
    return FolderStructure(
        name=name,
        role=role,
        path=f"/{name}/",
        children=children or [],
        assets=assets or [],
        metadata=FolderMetadata(state=state),
    )
