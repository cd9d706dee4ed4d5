"""Dimension classifiers — first-match label lookup over ordered rule tables."""

from __future__ import annotations

import re
from enum import Enum
from typing import Generic, TypeVar

from asset_classifier.domain.entities import DeviceType, UNKNOWN
from asset_classifier.domain.value_objects import RuleTable
from asset_classifier.services.rule_tables import DEVICE_SIZE_THRESHOLDS

LabelT = TypeVar("LabelT", bound=Enum)

_SIZE_RE = re.compile(r"(\d{3,4})")


class DimensionClassifier(Generic[LabelT]):
    """Classify a normalized name along one dimension.

    Parameters
    ----------
    table:
        Ordered rule table; the first matching label wins.
    label_type:
        Enum the resulting label is converted to.
    """

    def __init__(self, table: RuleTable, label_type: type[LabelT]) -> None:
        self._table = table
        self._label_type = label_type

    def _match(self, clean_name: str) -> str:
        return self._table.classify(clean_name)

    def classify(self, clean_name: str) -> LabelT:
        return self._label_type(self._match(clean_name))


class DeviceClassifier(DimensionClassifier[DeviceType]):
    """Device classifier with a numeric-width fallback.

    When no keyword rule matches, the first 3–4 digit run in the name is read
    as a frame width and bucketed against ``DEVICE_SIZE_THRESHOLDS``.
    """

    def __init__(
        self,
        table: RuleTable,
        thresholds: tuple[tuple[int, str], ...] = DEVICE_SIZE_THRESHOLDS,
    ) -> None:
        super().__init__(table, DeviceType)
        self._thresholds = thresholds

    def _match(self, clean_name: str) -> str:
        label = self._table.first_match(clean_name)
        if label is not None:
            return label
        return self._from_size(clean_name)

    def _from_size(self, clean_name: str) -> str:
        match = _SIZE_RE.search(clean_name)
        if not match:
            return UNKNOWN
        size = int(match.group(1))
        for minimum, label in self._thresholds:
            if size >= minimum:
                return label
        return UNKNOWN
