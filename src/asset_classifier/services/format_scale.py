"""Format / scale extraction — read from the raw filename, never the normalized one.

Neither attribute feeds the four semantic dimensions.
"""

from __future__ import annotations

import re

from asset_classifier.domain.entities import AssetFormat, ScaleType

_FORMAT_BY_EXTENSION: dict[str, AssetFormat] = {
    "png": AssetFormat.PNG,
    "jpg": AssetFormat.JPG,
    "jpeg": AssetFormat.JPG,
    "svg": AssetFormat.SVG,
    "json": AssetFormat.JSON,
    "css": AssetFormat.CSS,
    "html": AssetFormat.HTML,
    "htm": AssetFormat.HTML,
}

_DEFAULT_FORMAT = AssetFormat.PNG

_VECTOR_FORMATS: frozenset[AssetFormat] = frozenset({AssetFormat.SVG})


def _extension(file_name: str) -> str:
    base = re.split(r"[\\/]", file_name)[-1]
    if "." not in base:
        return ""
    return base.rsplit(".", maxsplit=1)[-1].lower()


def extract_format(file_name: str) -> AssetFormat:
    """Map the extension to an :class:`AssetFormat`; unknown extensions are PNG."""
    return _FORMAT_BY_EXTENSION.get(_extension(file_name), _DEFAULT_FORMAT)


def extract_scale(file_name: str) -> ScaleType:
    """Detect ``@3x`` / ``@2x`` suffixes, else vector for SVG, else ``1x``."""
    if "3x" in file_name:
        return ScaleType.X3
    if "2x" in file_name:
        return ScaleType.X2
    if extract_format(file_name) in _VECTOR_FORMATS:
        return ScaleType.VECTOR
    return ScaleType.X1
