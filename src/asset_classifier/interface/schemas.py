"""Pydantic request / response DTOs for the API boundary.

Field names are serialised in camelCase (``originalName``,
``componentType``) because other components persist these shapes as-is.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from asset_classifier.domain.entities import (
    AssetStructure,
    FolderMetadata,
    FolderStructure,
    ParsedAssetInfo,
)


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── Requests ────────────────────────────────────────────────────────────────


class ImportRequest(_CamelModel):
    """Request body for ``POST /classify`` and ``POST /import``."""

    names: list[str]

    @field_validator("names")
    @classmethod
    def _must_not_be_empty(cls, v: list[str]) -> list[str]:
        if not v:
            msg = "names must contain at least one asset name."
            raise ValueError(msg)
        return v


class StructureRequest(ImportRequest):
    """Request body for ``POST /structure``."""

    optimize: bool | None = None


# ── Responses ───────────────────────────────────────────────────────────────


class ParsedAssetSchema(_CamelModel):
    original_name: str
    device: str
    module: str
    page: str
    state: str
    format: str
    scale: str
    confidence: float

    @classmethod
    def from_entity(cls, info: ParsedAssetInfo) -> ParsedAssetSchema:
        return cls(
            original_name=info.original_name,
            device=info.device.value,
            module=info.module.value,
            page=info.page.value,
            state=info.state.value,
            format=info.format.value,
            scale=info.scale.value,
            confidence=info.confidence,
        )


class FolderMetadataSchema(_CamelModel):
    description: str | None = None
    state: str | None = None
    complexity: str | None = None
    category: str | None = None
    component_type: str | None = None

    @classmethod
    def from_entity(cls, metadata: FolderMetadata) -> FolderMetadataSchema:
        return cls(
            description=metadata.description,
            state=metadata.state,
            complexity=metadata.complexity.value if metadata.complexity else None,
            category=metadata.category,
            component_type=metadata.component_type,
        )


class FolderStructureSchema(_CamelModel):
    name: str
    type: str
    path: str
    children: list[FolderStructureSchema]
    assets: list[str]
    metadata: FolderMetadataSchema

    @classmethod
    def from_entity(cls, node: FolderStructure) -> FolderStructureSchema:
        return cls(
            name=node.name,
            type=node.role.value,
            path=node.path,
            children=[cls.from_entity(child) for child in node.children],
            assets=list(node.assets),
            metadata=FolderMetadataSchema.from_entity(node.metadata),
        )


class AssetStructureSchema(_CamelModel):
    devices: dict[str, list[ParsedAssetSchema]]
    modules: dict[str, list[ParsedAssetSchema]]
    confidence: float
    device_distribution: dict[str, float]
    responsive_strategy: str

    @classmethod
    def from_entity(cls, report: AssetStructure) -> AssetStructureSchema:
        return cls(
            devices={k: [ParsedAssetSchema.from_entity(a) for a in v] for k, v in report.devices.items()},
            modules={k: [ParsedAssetSchema.from_entity(a) for a in v] for k, v in report.modules.items()},
            confidence=report.confidence,
            device_distribution=dict(report.device_distribution),
            responsive_strategy=report.responsive_strategy,
        )


class ClassifyResponse(_CamelModel):
    """Successful response from ``POST /classify``."""

    assets: list[ParsedAssetSchema]
    report: AssetStructureSchema


class StructureResponse(_CamelModel):
    """Successful response from ``POST /structure``."""

    structure: FolderStructureSchema
    tree: str


class ImportResponse(_CamelModel):
    """Successful response from ``POST /import``."""

    assets: list[ParsedAssetSchema]
    structure: FolderStructureSchema
    report: AssetStructureSchema


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    status: str = "error"
    message: str
