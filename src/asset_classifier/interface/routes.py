"""API routes — thin controllers that delegate to the use case."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from asset_classifier.domain.ports.asset_source import AssetNameSource
from asset_classifier.interface.dependencies import get_asset_source, get_use_case
from asset_classifier.interface.schemas import (
    AssetStructureSchema,
    ClassifyResponse,
    ErrorResponse,
    FolderStructureSchema,
    ImportRequest,
    ImportResponse,
    ParsedAssetSchema,
    StructureRequest,
    StructureResponse,
)
from asset_classifier.services.import_batch import ImportBatchUseCase
from asset_classifier.services.structure_renderer import render_tree

router = APIRouter()

_BATCH_ERRORS: dict[int | str, dict[str, object]] = {
    413: {"model": ErrorResponse, "description": "Batch exceeds the configured maximum size"},
    422: {"model": ErrorResponse, "description": "Empty or malformed batch"},
}


@router.post("/classify", response_model=ClassifyResponse, responses=_BATCH_ERRORS)
def classify(
    body: ImportRequest,
    use_case: ImportBatchUseCase = Depends(get_use_case),
) -> ClassifyResponse:
    """Tag every asset name and report the batch aggregate."""
    assets, report = use_case.classify(body.names)
    return ClassifyResponse(
        assets=[ParsedAssetSchema.from_entity(a) for a in assets],
        report=AssetStructureSchema.from_entity(report),
    )


@router.post("/structure", response_model=StructureResponse, responses=_BATCH_ERRORS)
def structure(
    body: StructureRequest,
    use_case: ImportBatchUseCase = Depends(get_use_case),
) -> StructureResponse:
    """Infer the folder tree of a batch."""
    root = use_case.build_structure(body.names, optimize_structure=body.optimize)
    return StructureResponse(
        structure=FolderStructureSchema.from_entity(root),
        tree=render_tree(root),
    )


@router.post("/import", response_model=ImportResponse, responses=_BATCH_ERRORS)
def import_batch(
    body: ImportRequest,
    use_case: ImportBatchUseCase = Depends(get_use_case),
) -> ImportResponse:
    """Classification, folder tree and batch report in one call."""
    result = use_case.execute(body.names)
    return ImportResponse(
        assets=[ParsedAssetSchema.from_entity(a) for a in result.assets],
        structure=FolderStructureSchema.from_entity(result.structure),
        report=AssetStructureSchema.from_entity(result.report),
    )


@router.post(
    "/import/directory",
    response_model=ImportResponse,
    responses={
        **_BATCH_ERRORS,
        404: {"model": ErrorResponse, "description": "Asset directory missing or not configured"},
    },
)
def import_directory(
    source: AssetNameSource = Depends(get_asset_source),
    use_case: ImportBatchUseCase = Depends(get_use_case),
) -> ImportResponse:
    """Same as ``/import``, with the names listed from the configured directory."""
    result = use_case.execute_source(source)
    return ImportResponse(
        assets=[ParsedAssetSchema.from_entity(a) for a in result.assets],
        structure=FolderStructureSchema.from_entity(result.structure),
        report=AssetStructureSchema.from_entity(result.report),
    )
