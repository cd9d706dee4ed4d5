"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from asset_classifier.interface.error_handlers import register_error_handlers
from asset_classifier.interface.routes import router


def create_app() -> FastAPI:
    """Build and wire the FastAPI application."""
    app = FastAPI(
        title="Design Asset Classifier",
        version="1.0.0",
        description=(
            "Tags exported design-asset filenames by device, module, page and "
            "state, and infers the folder structure they were exported from."
        ),
    )

    register_error_handlers(app)
    app.include_router(router)

    # ── Health check (simple liveness probe) ────────────────────────────

    @app.get("/health", include_in_schema=False)
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
