"""Tests for format/scale extraction, confidence scoring and the asset classifier."""

from __future__ import annotations

import dataclasses
import random

import pytest

from asset_classifier.domain.entities import (
    AssetFormat,
    DeviceType,
    ModuleType,
    PageType,
    ParsedAssetInfo,
    ScaleType,
    StateType,
)
from asset_classifier.services.asset_classifier import AssetClassifier
from asset_classifier.services.confidence import score_confidence
from asset_classifier.services.format_scale import extract_format, extract_scale
from asset_classifier.services.rule_tables import default_rules

SAMPLE_NAMES = [
    "Desktop_UserMgmt_List_Default@2x.png",
    "hover-button.svg",
    "Mobile_Cart_Detail_Loading@3x.jpg",
    "tablet/dashboard/overview.json",
    "zzz.bin",
    "",
    "全域管理/Toast/清除快取/Success.png",
    "iPad_Login_Form_Error.png",
    "frame_1366_welcome.html",
]


class TestExtractFormat:
    """Test cases for extract_format."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("a.png", AssetFormat.PNG),
            ("a.JPEG", AssetFormat.JPG),
            ("a.jpg", AssetFormat.JPG),
            ("a.svg", AssetFormat.SVG),
            ("tokens.json", AssetFormat.JSON),
            ("style.css", AssetFormat.CSS),
            ("page.htm", AssetFormat.HTML),
            ("a.webp", AssetFormat.PNG),
            ("no_extension", AssetFormat.PNG),
            ("svg", AssetFormat.PNG),
            ("icons.v2/json", AssetFormat.PNG),
            ("Web\\Icons\\logo.SVG", AssetFormat.SVG),
        ],
    )
    def test_extension_table(self, name: str, expected: AssetFormat) -> None:
        assert extract_format(name) == expected


class TestExtractScale:
    """Test cases for extract_scale."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("icon@3x.png", ScaleType.X3),
            ("icon_3x.png", ScaleType.X3),
            ("icon@2x.png", ScaleType.X2),
            ("icon@2x.svg", ScaleType.X2),
            ("icon.svg", ScaleType.VECTOR),
            ("icon.SVG", ScaleType.VECTOR),
            ("icon.png", ScaleType.X1),
            ("svg", ScaleType.X1),
            ("svg/icon", ScaleType.X1),
        ],
    )
    def test_suffix_conventions(self, name: str, expected: ScaleType) -> None:
        assert extract_scale(name) == expected


class TestScoreConfidence:
    """Test cases for score_confidence."""

    def test_all_unknown(self) -> None:
        assert score_confidence("unknown", "unknown", "unknown", "unknown") == 0.0

    def test_all_known(self) -> None:
        assert score_confidence(
            DeviceType.DESKTOP, ModuleType.AUTH, PageType.FORM, StateType.DEFAULT
        ) == 1.0

    def test_partial(self) -> None:
        assert score_confidence(
            DeviceType.UNKNOWN, ModuleType.AUTH, PageType.UNKNOWN, StateType.HOVER
        ) == 0.5


class TestAssetClassifier:
    """Test cases for AssetClassifier."""

    def test_convention_delimited_name(self, classifier: AssetClassifier) -> None:
        info = classifier.classify("Desktop_UserMgmt_List_Default@2x.png")

        assert info.original_name == "Desktop_UserMgmt_List_Default@2x.png"
        assert info.device == DeviceType.DESKTOP
        assert info.module == ModuleType.USER_MANAGEMENT
        assert info.page == PageType.LIST
        assert info.state == StateType.DEFAULT
        assert info.format == AssetFormat.PNG
        assert info.scale == ScaleType.X2
        assert info.confidence == 1.0

    def test_vector_hover_asset(self, classifier: AssetClassifier) -> None:
        info = classifier.classify("hover-button.svg")

        assert info.scale == ScaleType.VECTOR
        assert info.state == StateType.HOVER
        assert info.format == AssetFormat.SVG
        assert info.device == DeviceType.UNKNOWN
        assert info.confidence == 0.25

    def test_mobile_loading_asset(self, classifier: AssetClassifier) -> None:
        info = classifier.classify("Mobile_Cart_Detail_Loading@3x.jpg")

        assert info.device == DeviceType.MOBILE
        assert info.module == ModuleType.COMMERCE
        assert info.page == PageType.DETAIL
        assert info.state == StateType.LOADING
        assert info.format == AssetFormat.JPG
        assert info.scale == ScaleType.X3

    def test_unrecognised_name_degrades(self, classifier: AssetClassifier) -> None:
        info = classifier.classify("zzz.bin")

        assert info.device == DeviceType.UNKNOWN
        assert info.module == ModuleType.UNKNOWN
        assert info.page == PageType.UNKNOWN
        assert info.state == StateType.DEFAULT
        assert info.confidence == 0.25

    def test_strict_state_can_reach_zero(self) -> None:
        strict = AssetClassifier(default_rules(state_fallback="unknown"))
        info = strict.classify("zzz.bin")

        assert info.state == StateType.UNKNOWN
        assert info.confidence == 0.0

    def test_explicit_none_uses_default_rules(self) -> None:
        info = AssetClassifier(None).classify("zzz.bin")

        assert info.state == StateType.DEFAULT
        assert info.confidence == 0.25

    def test_empty_name_does_not_raise(self, classifier: AssetClassifier) -> None:
        info = classifier.classify("")
        assert info.original_name == ""
        assert info.format == AssetFormat.PNG

    def test_record_is_immutable(self, classifier: AssetClassifier) -> None:
        info = classifier.classify("hover-button.svg")
        with pytest.raises(dataclasses.FrozenInstanceError):
            info.state = StateType.ACTIVE  # type: ignore[misc]

    @pytest.mark.parametrize("name", SAMPLE_NAMES)
    def test_confidence_counts_known_dimensions(
        self, classifier: AssetClassifier, name: str
    ) -> None:
        info = classifier.classify(name)
        known = sum(
            1
            for label in (info.device, info.module, info.page, info.state)
            if label.value != "unknown"
        )
        assert info.confidence in {0.0, 0.25, 0.5, 0.75, 1.0}
        assert info.confidence == 0.25 * known

    def test_batch_preserves_input_order(self, classifier: AssetClassifier) -> None:
        results = classifier.classify_batch(SAMPLE_NAMES)
        assert [r.original_name for r in results] == SAMPLE_NAMES

    def test_classification_is_order_independent(
        self, classifier: AssetClassifier
    ) -> None:
        shuffled = SAMPLE_NAMES[:]
        random.Random(7).shuffle(shuffled)

        forward: dict[str, ParsedAssetInfo] = {
            r.original_name: r for r in classifier.classify_batch(SAMPLE_NAMES)
        }
        permuted = {r.original_name: r for r in classifier.classify_batch(shuffled)}

        assert forward == permuted
