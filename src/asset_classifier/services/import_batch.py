"""Import-batch use case — the orchestration entry point.

Classification and structure inference run independently over the same
batch: each name is tagged on its own, while the folder tree is built from
the whole batch and then optimized.  The interface layer and the
directory source only ever talk to this class.
"""

from __future__ import annotations

import logging
from typing import Sequence

from asset_classifier.domain.entities import (
    AssetStructure,
    FolderStructure,
    ImportBatchResult,
    ParsedAssetInfo,
)
from asset_classifier.domain.exceptions import BatchTooLargeError, EmptyBatchError
from asset_classifier.domain.ports.asset_source import AssetNameSource, NamedAsset
from asset_classifier.services.aggregate_reporter import build_asset_structure
from asset_classifier.services.asset_classifier import AssetClassifier
from asset_classifier.services.folder_hierarchy import FolderHierarchyBuilder, asset_name
from asset_classifier.services.structure_optimizer import optimize
from asset_classifier.services.structure_renderer import iter_nodes

logger = logging.getLogger(__name__)


class ImportBatchUseCase:
    """Classify a batch of asset names and infer their folder structure.

    Parameters
    ----------
    classifier:
        Per-item classifier (owns the rule tables).
    builder:
        Folder hierarchy builder.
    max_batch_size:
        Reject batches larger than this.
    optimize_structure:
        Run prune + merge on the built tree by default.
    """

    def __init__(
        self,
        classifier: AssetClassifier | None = None,
        builder: FolderHierarchyBuilder | None = None,
        max_batch_size: int = 5_000,
        optimize_structure: bool = True,
    ) -> None:
        self._classifier = classifier or AssetClassifier()
        self._builder = builder or FolderHierarchyBuilder()
        self._max_batch_size = max_batch_size
        self._optimize = optimize_structure

    # ── Public entry points ─────────────────────────────────────────────

    def execute(self, items: Sequence[str | NamedAsset]) -> ImportBatchResult:
        """Run classification, aggregation and structure inference."""
        names = self._validate(items)
        logger.info("Importing batch of %d asset name(s)", len(names))

        assets = self._classifier.classify_batch(names)
        report = build_asset_structure(assets)
        structure = self._build(names, self._optimize)

        logger.info(
            "Batch confidence %.2f; %d folder node(s)",
            report.confidence,
            sum(1 for _ in iter_nodes(structure)) - 1,
        )
        return ImportBatchResult(assets=assets, structure=structure, report=report)

    def execute_source(self, source: AssetNameSource) -> ImportBatchResult:
        """Pull the batch from *source*, then :meth:`execute` it."""
        return self.execute(source.list_names())

    def classify(
        self, items: Sequence[str | NamedAsset]
    ) -> tuple[list[ParsedAssetInfo], AssetStructure]:
        """Per-item tags plus the batch report, without the folder tree."""
        names = self._validate(items)
        assets = self._classifier.classify_batch(names)
        return assets, build_asset_structure(assets)

    def build_structure(
        self,
        items: Sequence[str | NamedAsset],
        optimize_structure: bool | None = None,
    ) -> FolderStructure:
        """Folder tree only; *optimize_structure* overrides the default."""
        names = self._validate(items)
        run_optimizer = self._optimize if optimize_structure is None else optimize_structure
        return self._build(names, run_optimizer)

    # ── Internals ───────────────────────────────────────────────────────

    def _validate(self, items: Sequence[str | NamedAsset]) -> list[str]:
        if not items:
            raise EmptyBatchError("Import batch contains no asset names.")
        if len(items) > self._max_batch_size:
            raise BatchTooLargeError(
                f"Import batch has {len(items)} names; "
                f"the limit is {self._max_batch_size}."
            )
        return [asset_name(item) for item in items]

    def _build(self, names: list[str], run_optimizer: bool) -> FolderStructure:
        root = self._builder.build(names)
        if run_optimizer:
            optimize(root)
        return root
