"""Asset classifier — one filename in, one :class:`ParsedAssetInfo` out."""

from __future__ import annotations

from typing import Iterable

from asset_classifier.domain.entities import (
    ModuleType,
    PageType,
    ParsedAssetInfo,
    StateType,
)
from asset_classifier.services.confidence import score_confidence
from asset_classifier.services.dimension_classifier import (
    DeviceClassifier,
    DimensionClassifier,
)
from asset_classifier.services.format_scale import extract_format, extract_scale
from asset_classifier.services.name_normalizer import normalize
from asset_classifier.services.rule_tables import DimensionRules, default_rules


class AssetClassifier:
    """Compose the normalizer, the four dimension classifiers and the scorer.

    Holds no state between calls besides its read-only rule tables, so a
    single instance can classify any number of batches.
    """

    def __init__(self, rules: DimensionRules | None = None) -> None:
        if rules is None:
            rules = default_rules()
        self._device = DeviceClassifier(rules.device)
        self._module = DimensionClassifier(rules.module, ModuleType)
        self._page = DimensionClassifier(rules.page, PageType)
        self._state = DimensionClassifier(rules.state, StateType)

    def classify(self, file_name: str) -> ParsedAssetInfo:
        """Tag a single filename.  Never raises for any string input."""
        clean_name = normalize(file_name)
        asset_format = extract_format(file_name)
        scale = extract_scale(file_name)

        device = self._device.classify(clean_name)
        module = self._module.classify(clean_name)
        page = self._page.classify(clean_name)
        state = self._state.classify(clean_name)

        return ParsedAssetInfo(
            original_name=file_name,
            device=device,
            module=module,
            page=page,
            state=state,
            format=asset_format,
            scale=scale,
            confidence=score_confidence(device, module, page, state),
        )

    def classify_batch(self, file_names: Iterable[str]) -> list[ParsedAssetInfo]:
        """Classify every name; output order equals input order."""
        return [self.classify(name) for name in file_names]
