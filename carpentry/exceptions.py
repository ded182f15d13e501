"""Error handlers that turn calculation errors into JSON responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .services.errors import CarpentryError, CutExceedsBoardError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(CutExceedsBoardError)
    async def cut_exceeds_board_handler(
        request: Request, exc: CutExceedsBoardError
    ) -> JSONResponse:
        logger.warning(f"{request.url.path}: {exc}")
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": exc.error_type,
                "details": {
                    "cut_id": exc.cut.id,
                    "label": exc.cut.label,
                    "length": exc.cut.length,
                    "board_length": exc.board_length,
                },
            },
        )

    @app.exception_handler(CarpentryError)
    async def carpentry_error_handler(
        request: Request, exc: CarpentryError
    ) -> JSONResponse:
        logger.warning(f"{request.url.path}: {exc}")
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": exc.error_type,
                "details": None,
            },
        )
