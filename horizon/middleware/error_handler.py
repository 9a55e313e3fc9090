"""
Error handling middleware.
"""

import traceback
from fastapi import FastAPI, Request, HTTPException
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..exceptions import BaseCustomException, PlaidApiException, VendorApiException
from ..utils.logger import get_logger
from ..settings import settings

logger = get_logger(__name__)


def _error_response(status_code: int, message, error_type: str, **extra) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "code": status_code,
                "message": message,
                "type": error_type,
                **extra,
            }
        },
    )


async def plaid_api_exception_handler(
    request: Request, exc: PlaidApiException
) -> JSONResponse:
    """Handle Plaid API specific exceptions."""
    if exc.plaid_error:
        log_message = (
            f"Plaid API error at {request.url.path}: "
            f"Code='{exc.plaid_error.error_code}', "
            f"RequestID='{exc.plaid_error.request_id}'"
        )
    else:
        log_message = f"Plaid API error at {request.url.path}: {exc.detail}"

    logger.warning(log_message)

    return _error_response(exc.status_code, exc.detail, "plaid_api_error")


async def vendor_api_exception_handler(
    request: Request, exc: VendorApiException
) -> JSONResponse:
    """Handle Appwrite, Dwolla and Checkbook errors."""
    logger.warning(
        f"{exc.vendor} API error at {request.url.path}: "
        f"Status={exc.vendor_status}, Message='{exc.message}'"
    )

    return _error_response(
        exc.status_code, exc.detail, f"{exc.vendor.lower()}_api_error"
    )


async def custom_http_exception_handler(
    request: Request, exc: HTTPException
) -> JSONResponse:
    """Handle HTTP exceptions."""
    logger.warning(f"HTTP {exc.status_code} error at {request.url.path}: {exc.detail}")

    return _error_response(exc.status_code, exc.detail, "http_error")


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle validation errors."""
    logger.warning(f"Validation error at {request.url.path}: {exc.errors()}")

    return _error_response(
        422,
        "Validation error",
        "validation_error",
        details=jsonable_encoder(exc.errors()),
    )


async def custom_exception_handler(
    request: Request, exc: BaseCustomException
) -> JSONResponse:
    """Handle custom exceptions."""
    logger.warning(f"Custom error at {request.url.path}: {exc.detail}")

    return _error_response(exc.status_code, exc.detail, "application_error")


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle general exceptions."""
    logger.error(f"Unhandled error at {request.url.path}: {str(exc)}")

    if settings.debug:
        logger.error(f"Traceback: {traceback.format_exc()}")

    return _error_response(
        500,
        "Internal server error",
        "server_error",
        **({"details": str(exc)} if settings.debug else {}),
    )


def add_exception_handlers(app: FastAPI) -> None:
    """Add exception handlers to the application."""
    app.add_exception_handler(PlaidApiException, plaid_api_exception_handler)
    app.add_exception_handler(VendorApiException, vendor_api_exception_handler)
    app.add_exception_handler(StarletteHTTPException, custom_http_exception_handler)
    app.add_exception_handler(HTTPException, custom_http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(BaseCustomException, custom_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
