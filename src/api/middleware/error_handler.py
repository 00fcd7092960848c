"""Global exception handlers for the FastAPI application.

Errors are answered with a plain-text body and the matching status code;
the details go to the process log only.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse, Response
from loguru import logger

from src.api.constants import HTTP_422_UNPROCESSABLE_CONTENT
from src.core.exceptions import NotFoundError, SolarSystemError, ValidationError

INVALID_PLANET_ID_MESSAGE = "Invalid planet id."
INTERNAL_ERROR_MESSAGE = "Internal server error"


def status_code_for(exc: SolarSystemError) -> int:
    """Map an exception type to its HTTP status code.

    Args:
        exc: The exception raised by a handler.

    Returns:
        int: The HTTP status code to answer with.
    """
    if isinstance(exc, ValidationError):
        return HTTP_422_UNPROCESSABLE_CONTENT
    if isinstance(exc, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def solar_system_error_handler(request: Request, exc: Exception) -> Response:
    """Handle SolarSystemError exceptions.

    Args:
        request: The request that caused the exception
        exc: The SolarSystemError exception to handle

    Returns:
        Response: Plain-text response carrying the exception message

    Raises:
        TypeError: If exc is not a SolarSystemError instance
    """
    if not isinstance(exc, SolarSystemError):
        raise TypeError(f"Expected SolarSystemError, got {type(exc).__name__}")

    status_code = status_code_for(exc)
    log = logger.bind(
        method=request.method,
        path=request.url.path,
        status_code=status_code,
        error_code=exc.error_code,
        **exc.context,
    )
    if exc.is_expected:
        log.warning("Handling {}: {}", type(exc).__name__, exc.message)
    else:
        log.opt(exception=exc.cause).error(
            "Handling {}: {}", type(exc).__name__, exc.message
        )

    return PlainTextResponse(exc.message, status_code=status_code)


async def validation_error_handler(request: Request, exc: Exception) -> Response:
    """Handle FastAPI RequestValidationError exceptions.

    The request is answered as a ValidationError, keeping the individual
    messages for the log only.

    Args:
        request: The request that failed validation
        exc: The RequestValidationError exception to handle

    Returns:
        Response: 422 plain-text response

    Raises:
        TypeError: If exc is not a RequestValidationError instance
    """
    if not isinstance(exc, RequestValidationError):
        raise TypeError(f"Expected RequestValidationError, got {type(exc).__name__}")

    error = ValidationError(
        INVALID_PLANET_ID_MESSAGE,
        context={"validation_errors": [detail.get("msg") for detail in exc.errors()]},
        cause=exc,
    )
    return await solar_system_error_handler(request, error)


async def generic_exception_handler(request: Request, exc: Exception) -> Response:
    """Handle exceptions no other handler claimed.

    Args:
        request: The request that caused the exception
        exc: The unhandled exception

    Returns:
        Response: 500 plain-text response without internal details
    """
    logger.opt(exception=exc).error(
        "Unhandled exception: {}",
        type(exc).__name__,
        method=request.method,
        path=request.url.path,
    )
    return PlainTextResponse(
        INTERNAL_ERROR_MESSAGE,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(SolarSystemError, solar_system_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    logger.info("Exception handlers registered")
