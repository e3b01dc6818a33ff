"""Exception-to-response mapping for the catalog API.

Every error body has the shape ``{"error", "message", "details"}``. Domain
exceptions carry their own code; framework errors get a fixed one. 5xx
bodies drop ``details`` outside debug so repository internals never leak.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog.core.config import get_settings
from catalog.domain.exceptions import CatalogException

logger = logging.getLogger(__name__)

_STATUS_BY_CODE: dict[str, int] = {
    "VALIDATION_ERROR": 400,
    "RESOURCE_NOT_FOUND": 404,
    "RESOURCE_ALREADY_EXISTS": 409,
    "INTERNAL_ERROR": 500,
    "SERVICE_UNAVAILABLE": 503,
}


def _error_body(code: str, message: str, details=None) -> dict:
    return {"error": code, "message": message, "details": details or {}}


def _on_catalog_error(request: Request, exc: CatalogException) -> JSONResponse:
    status = _STATUS_BY_CODE.get(exc.error_code, 400)
    body = exc.to_dict()
    if status >= 500 and not get_settings().debug:
        body["details"] = {}
    return JSONResponse(status_code=status, content=body)


def _on_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Body/path/header schema violations: 422 with pydantic's error list."""
    return JSONResponse(
        status_code=422,
        content=_error_body(
            "VALIDATION_ERROR", "Request validation failed", jsonable_encoder(exc.errors())
        ),
    )


def _on_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body("HTTP_ERROR", str(exc.detail)),
    )


def _on_unhandled(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    message = str(exc) if get_settings().debug else "Internal server error"
    return JSONResponse(status_code=500, content=_error_body("INTERNAL_ERROR", message))


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers above; call once per app instance."""
    app.add_exception_handler(CatalogException, _on_catalog_error)
    app.add_exception_handler(RequestValidationError, _on_request_validation)
    app.add_exception_handler(StarletteHTTPException, _on_http_error)
    app.add_exception_handler(Exception, _on_unhandled)
