"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from catalog_tracker.api.admin import router as admin_router
from catalog_tracker.api.catalog import router as catalog_router
from catalog_tracker.app_logging import configure_logging
from catalog_tracker.containers import AppContainer
from catalog_tracker.domain.errors import CatalogError, RecordValidationError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Catalog Tracker")
    app.state.container = container

    app.include_router(admin_router)
    app.include_router(catalog_router)

    @app.exception_handler(RecordValidationError)
    async def validation_error_handler(
        request: Request, exc: RecordValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc)},
        )

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
        logger.warning("Catalog request rejected: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
