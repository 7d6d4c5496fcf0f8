import logging
import traceback
from typing import Any, Dict

from fastapi import Request
from fastapi.responses import JSONResponse

from coolload import config
from coolload.errors import HVACCalculationError, ValidationError, log_error_with_context

logger = logging.getLogger(__name__)


def create_error_response(error_type: str, message: str, details: Dict[str, Any] = None) -> Dict[str, Any]:
    """Create structured error response"""
    error = {
        "type": error_type,
        "message": message,
    }
    if details:
        error["details"] = details
    return {"error": error}


def _json_safe(details: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value if isinstance(value, (int, float, str, bool, type(None), list)) else str(value)
            for key, value in details.items()}


async def validation_exception_handler(request: Request, exc: ValidationError):
    logger.warning(f"Rejected {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=422,
        content=create_error_response(type(exc).__name__, exc.message, _json_safe(exc.details)),
    )


async def calculation_exception_handler(request: Request, exc: HVACCalculationError):
    log_error_with_context(exc, {'path': request.url.path, 'method': request.method})
    return JSONResponse(
        status_code=500,
        content=create_error_response(type(exc).__name__, exc.message, _json_safe(exc.details)),
    )


async def traceback_exception_handler(request: Request, exc: Exception):
    tb = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    logger.error(tb)

    message = tb if config.DEBUG else "Internal server error"
    return JSONResponse(
        status_code=500,
        content=create_error_response("InternalServerError", message),
    )
