"""
RAG error handling utilities.

Maps domain exceptions to HTTP status codes and the ``{"error": ...}``
response body, both per-route (decorator) and app-wide (exception handlers).
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from semantic_search.core.exceptions import SemanticSearchException, ValidationError

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the failure body shared by every RAG endpoint."""
    return JSONResponse(status_code=status_code, content={"error": message})


def status_for(exc: SemanticSearchException) -> int:
    """HTTP status for a domain exception: 400 for bad input, 500 otherwise."""
    if isinstance(exc, ValidationError):
        return status.HTTP_400_BAD_REQUEST
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def handle_rag_errors(fallback_message: str) -> Callable[[F], F]:
    """
    Decorator turning domain errors into ``{"error": ...}`` responses.

    This centralizes:
    - Logging of errors with their details
    - Mapping exceptions to HTTP status codes
    - A generic message for unexpected failures

    Args:
        fallback_message: Message returned for unexpected exceptions
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)

            except ValidationError as e:
                logger.warning(
                    "Invalid RAG request",
                    extra={"error": e.message, "details": e.details},
                )
                return error_response(status_for(e), e.message)

            except SemanticSearchException as e:
                logger.error(
                    "RAG operation failed",
                    extra={"error_type": type(e).__name__, "error": e.message, "details": e.details},
                )
                return error_response(status_for(e), e.message)

            except Exception as e:
                logger.exception(
                    "Unexpected failure in RAG operation",
                    extra={"error": str(e)},
                )
                return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, fallback_message)

        return wrapper  # type: ignore

    return decorator


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields = sorted({".".join(str(part) for part in err["loc"][1:]) for err in exc.errors()})
    logger.warning(
        "Request body validation failed",
        extra={"path": request.url.path, "fields": fields},
    )
    detail = ", ".join(f for f in fields if f) or "body"
    return error_response(status.HTTP_400_BAD_REQUEST, f"Missing or invalid fields: {detail}")


async def _domain_error_handler(request: Request, exc: SemanticSearchException) -> JSONResponse:
    logger.error(
        "Unhandled domain error",
        extra={"path": request.url.path, "error_type": type(exc).__name__, "error": exc.message},
    )
    return error_response(status_for(exc), exc.message)


def register_exception_handlers(app: FastAPI) -> None:
    """Install app-wide handlers for body validation and domain errors raised outside routes."""
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(SemanticSearchException, _domain_error_handler)
