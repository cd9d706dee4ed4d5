"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class DeviceType(str, Enum):
    """Target device an asset was designed for."""

    DESKTOP = "desktop"
    TABLET = "tablet"
    MOBILE = "mobile"
    UNKNOWN = "unknown"


class ModuleType(str, Enum):
    """Business module an asset belongs to."""

    USER_MANAGEMENT = "user-management"
    DASHBOARD = "dashboard"
    COMMERCE = "commerce"
    AUTH = "auth"
    CONTENT = "content"
    UNKNOWN = "unknown"


class PageType(str, Enum):
    """Kind of page the asset depicts."""

    LIST = "list"
    DETAIL = "detail"
    FORM = "form"
    LANDING = "landing"
    UNKNOWN = "unknown"


class StateType(str, Enum):
    """Interaction state captured by the asset."""

    DEFAULT = "default"
    HOVER = "hover"
    ACTIVE = "active"
    LOADING = "loading"
    ERROR = "error"
    SUCCESS = "success"
    UNKNOWN = "unknown"


class AssetFormat(str, Enum):
    """Encoding of the exported asset, derived from its extension."""

    PNG = "png"
    JPG = "jpg"
    SVG = "svg"
    JSON = "json"
    CSS = "css"
    HTML = "html"


class ScaleType(str, Enum):
    """Resolution multiplier of the exported asset."""

    X1 = "1x"
    X2 = "2x"
    X3 = "3x"
    VECTOR = "vector"


class FolderRole(str, Enum):
    """Structural role of a folder node, inferred from its depth."""

    MODULE = "module"
    PAGE = "page"
    SUBPAGE = "subpage"
    ASSET = "asset"


class Complexity(str, Enum):
    """Rough implementation-effort hint attached to folder nodes."""

    SIMPLE = "simple"
    MODERATE = "moderate"


UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class ParsedAssetInfo:
    """Four-dimensional semantic tag for a single asset name."""

    original_name: str
    device: DeviceType
    module: ModuleType
    page: PageType
    state: StateType
    format: AssetFormat
    scale: ScaleType
    confidence: float


@dataclass(slots=True)
class FolderMetadata:
    """Descriptive metadata attached to a folder node.

    Every field is optional; only keys recognised by the hierarchy builder
    exist, so the shape stays checkable.
    """

    description: str | None = None
    state: str | None = None
    complexity: Complexity | None = None
    category: str | None = None
    component_type: str | None = None

    def copy(self) -> FolderMetadata:
        return FolderMetadata(
            description=self.description,
            state=self.state,
            complexity=self.complexity,
            category=self.category,
            component_type=self.component_type,
        )


@dataclass(slots=True)
class FolderStructure:
    """A node of the inferred folder tree.

    Children are owned exclusively by their parent; there are no
    back-references.  ``path`` is unique across one tree.
    """

    name: str
    role: FolderRole
    path: str
    children: list[FolderStructure] = field(default_factory=list)
    assets: list[str] = field(default_factory=list)
    metadata: FolderMetadata = field(default_factory=FolderMetadata)

    @property
    def is_prunable(self) -> bool:
        return not self.children and not self.assets


@dataclass(frozen=True, slots=True)
class AssetStructure:
    """Batch-level aggregate of classified assets."""

    devices: dict[str, list[ParsedAssetInfo]]
    modules: dict[str, list[ParsedAssetInfo]]
    confidence: float
    device_distribution: dict[str, float] = field(default_factory=dict)
    responsive_strategy: str = "adaptive"


@dataclass(frozen=True, slots=True)
class ImportBatchResult:
    """Everything the engine derives from one import batch."""

    assets: list[ParsedAssetInfo]
    structure: FolderStructure
    report: AssetStructure
