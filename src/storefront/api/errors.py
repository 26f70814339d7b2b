"""API error envelope and exception handlers.

Every failure leaves the API as
``{"success": false, "error": {"message", "code", "details"?}}``.
"""

from enum import Enum

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError

from storefront.booking.exceptions import ProductsNotAvailableError


class ErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    PRODUCTS_NOT_AVAILABLE = "PRODUCTS_NOT_AVAILABLE"
    BOOKING_CREATE_ERROR = "BOOKING_CREATE_ERROR"
    BOOKINGS_FETCH_ERROR = "BOOKINGS_FETCH_ERROR"
    NO_TOKEN = "NO_TOKEN"
    INVALID_TOKEN = "INVALID_TOKEN"
    PRODUCT_NOT_FOUND = "PRODUCT_NOT_FOUND"


class ApiError(Exception):
    """An error with a fixed HTTP status and error code."""

    status_code = 500
    code = ErrorCode.BOOKING_CREATE_ERROR
    message = "Internal server error"

    def __init__(self, message=None, code=None, status_code=None):
        self.message = message or self.message
        self.code = code or self.code
        self.status_code = status_code or self.status_code
        super().__init__(self.message)


class NoTokenError(ApiError):
    status_code = 401
    code = ErrorCode.NO_TOKEN
    message = "Access denied. No token provided."


class InvalidTokenError(ApiError):
    status_code = 401
    code = ErrorCode.INVALID_TOKEN
    message = "Invalid token"


class BookingCreateError(ApiError):
    status_code = 500
    code = ErrorCode.BOOKING_CREATE_ERROR
    message = "Failed to create booking"


class BookingsFetchError(ApiError):
    status_code = 500
    code = ErrorCode.BOOKINGS_FETCH_ERROR
    message = "Failed to fetch bookings"


def error_response(status_code: int, message: str, code: ErrorCode, details=None) -> JSONResponse:
    error = {"message": message, "code": code.value}
    if details is not None:
        error["details"] = details
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder({"success": False, "error": error}),
    )


def _request_validation_details(exc: RequestValidationError) -> list[dict]:
    details = []
    for error in exc.errors():
        # Drop the leading "body"/"query" segment from the location
        location = [str(part) for part in error.get("loc", ())[1:]]
        details.append({"field": ".".join(location), "message": error.get("msg", "Invalid value")})
    return details


def _protean_validation_details(exc: ValidationError) -> list[dict]:
    messages = exc.messages if isinstance(exc.messages, dict) else {"_entity": exc.messages}
    details = []
    for field, errors in messages.items():
        for message in errors if isinstance(errors, list) else [errors]:
            details.append({"field": field, "message": str(message)})
    return details


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(
        400,
        "Validation failed",
        ErrorCode.VALIDATION_ERROR,
        details=_request_validation_details(exc),
    )


async def domain_validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return error_response(
        400,
        "Validation failed",
        ErrorCode.VALIDATION_ERROR,
        details=_protean_validation_details(exc),
    )


async def products_not_available_handler(request: Request, exc: ProductsNotAvailableError) -> JSONResponse:
    return error_response(400, str(exc), ErrorCode.PRODUCTS_NOT_AVAILABLE)


async def object_not_found_handler(request: Request, exc: ObjectNotFoundError) -> JSONResponse:
    return error_response(404, "Product not found", ErrorCode.PRODUCT_NOT_FOUND)


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return error_response(exc.status_code, exc.message, exc.code)


def register_error_handlers(app: FastAPI) -> None:
    """Install the envelope-producing handlers on ``app``."""
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ValidationError, domain_validation_handler)
    app.add_exception_handler(ProductsNotAvailableError, products_not_available_handler)
    app.add_exception_handler(ObjectNotFoundError, object_not_found_handler)
    app.add_exception_handler(ApiError, api_error_handler)
