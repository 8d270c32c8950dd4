"""
FastAPI Error Mapping for Repository Errors

Translates the repository's error policy into HTTP responses:
DocumentNotFoundError becomes 404, driver failures become 500.
"""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from docrepo.utils.error_handler import DocumentNotFoundError

logger = logging.getLogger(__name__)


def error_body(error: str, message: str) -> dict:
    return {
        "error": error,
        "message": message,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


async def document_not_found_handler(request: Request, exc: DocumentNotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=404,
        content=error_body(exc.error_code, exc.message)
    )


async def store_failure_handler(request: Request, exc: PyMongoError) -> JSONResponse:
    logger.error(f"Database error on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content=error_body("INTERNAL_SERVER_ERROR", "An unexpected error occurred")
    )


def register_exception_handlers(app: FastAPI) -> FastAPI:
    """Install the repository error handlers on app"""
    app.add_exception_handler(DocumentNotFoundError, document_not_found_handler)
    app.add_exception_handler(PyMongoError, store_failure_handler)
    return app
