"""Confidence scorer — a quarter point per classified dimension."""

from __future__ import annotations

from asset_classifier.domain.entities import UNKNOWN

_WEIGHT_PER_DIMENSION = 0.25


def score_confidence(*labels: object) -> float:
    """Return ``0.25 × (number of labels that are not unknown)``, two decimals.

    Accepts plain strings or ``str``-valued enums.
    """
    known = sum(1 for label in labels if _value(label) != UNKNOWN)
    return round(_WEIGHT_PER_DIMENSION * known, 2)


def _value(label: object) -> object:
    return getattr(label, "value", label)
