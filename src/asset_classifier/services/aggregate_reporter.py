"""Aggregate reporter — group a classified batch by device and module."""

from __future__ import annotations

from typing import Sequence

from asset_classifier.domain.entities import AssetStructure, DeviceType, ParsedAssetInfo

_DIMENSIONS = ("device", "module", "page", "state")

# Share above which a single device family decides the responsive strategy.
_DOMINANT_SHARE = 0.6


def batch_confidence(assets: Sequence[ParsedAssetInfo]) -> float:
    """Mean confidence, two decimals; ``0.0`` for an empty batch."""
    if not assets:
        return 0.0
    total = sum(asset.confidence for asset in assets)
    return round(total / len(assets), 2)


def dimension_distribution(
    assets: Sequence[ParsedAssetInfo], dimension: str
) -> dict[str, float]:
    """Share of the batch per label of *dimension*, in first-occurrence order."""
    if dimension not in _DIMENSIONS:
        raise ValueError(f"Unknown dimension: '{dimension}'.")
    counts: dict[str, int] = {}
    for asset in assets:
        label = getattr(asset, dimension).value
        counts[label] = counts.get(label, 0) + 1
    total = len(assets)
    return {label: round(count / total, 2) for label, count in counts.items()}


def responsive_strategy(device_distribution: dict[str, float]) -> str:
    """``mobile-first`` / ``desktop-first`` when one family dominates, else ``adaptive``."""
    if device_distribution.get(DeviceType.MOBILE.value, 0.0) > _DOMINANT_SHARE:
        return "mobile-first"
    if device_distribution.get(DeviceType.DESKTOP.value, 0.0) > _DOMINANT_SHARE:
        return "desktop-first"
    return "adaptive"


def build_asset_structure(assets: Sequence[ParsedAssetInfo]) -> AssetStructure:
    """Bucket *assets* by device and by module in one pass.

    ``unknown`` is a bucket like any other; no asset is dropped.
    """
    devices: dict[str, list[ParsedAssetInfo]] = {}
    modules: dict[str, list[ParsedAssetInfo]] = {}
    for asset in assets:
        devices.setdefault(asset.device.value, []).append(asset)
        modules.setdefault(asset.module.value, []).append(asset)

    distribution = dimension_distribution(assets, "device")
    return AssetStructure(
        devices=devices,
        modules=modules,
        confidence=batch_confidence(assets),
        device_distribution=distribution,
        responsive_strategy=responsive_strategy(distribution),
    )
