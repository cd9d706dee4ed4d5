"""FastAPI dependency injection wiring."""

from __future__ import annotations

from functools import lru_cache

from asset_classifier.domain.exceptions import AssetSourceError
from asset_classifier.domain.ports.asset_source import AssetNameSource
from asset_classifier.infrastructure.config import get_settings
from asset_classifier.infrastructure.local_directory_source import LocalDirectoryAssetSource
from asset_classifier.services.asset_classifier import AssetClassifier
from asset_classifier.services.folder_hierarchy import FolderHierarchyBuilder
from asset_classifier.services.import_batch import ImportBatchUseCase
from asset_classifier.services.rule_tables import default_rules


@lru_cache(maxsize=1)
def get_use_case() -> ImportBatchUseCase:
    """Build (or return cached) use case; the rule tables are compiled once."""
    settings = get_settings()
    return ImportBatchUseCase(
        classifier=AssetClassifier(default_rules(settings.state_fallback)),
        builder=FolderHierarchyBuilder(root_name=settings.root_name),
        max_batch_size=settings.max_batch_size,
        optimize_structure=settings.optimize_structure,
    )


def get_asset_source() -> AssetNameSource:
    """Directory source for ``ASSET_DIR``; unset means no server-side batch."""
    asset_dir = get_settings().asset_dir
    if not asset_dir:
        raise AssetSourceError("No asset directory configured (set ASSET_DIR).")
    return LocalDirectoryAssetSource(asset_dir)
