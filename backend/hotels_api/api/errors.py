"""
Error-to-response mapping for the HTTP layer.

Domain errors become an empty body with their status code. Any other failure
on a hotel route (persistence errors included) is logged and reported as
404, the conservative default for anything the client should not learn
about.
"""

from typing import Callable

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.routing import APIRoute
from starlette.responses import Response

from hotels_api.core.logging import get_logger
from hotels_api.domain.errors import DomainError, ErrorCode, NotFound

logger = get_logger(__name__)

_STATUS_BY_CODE = {
    ErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_DATA: status.HTTP_402_PAYMENT_REQUIRED,
}


def status_code_for(error: Exception) -> int:
    """HTTP status for an error. Non-domain errors map to 404."""
    if isinstance(error, DomainError):
        return _STATUS_BY_CODE[error.code]
    return status.HTTP_404_NOT_FOUND


class MaskedErrorRoute(APIRoute):
    """
    Route class that turns unexpected failures into NotFound.
    Wraps dependency resolution too, so auth and session errors are covered.
    """

    def get_route_handler(self) -> Callable:
        original_handler = super().get_route_handler()

        async def handler(request: Request) -> Response:
            try:
                return await original_handler(request)
            except (DomainError, HTTPException, RequestValidationError):
                raise
            except Exception as e:
                logger.error(
                    "request_error_masked",
                    error=str(e),
                    error_type=type(e).__name__,
                    exc_info=True,
                )
                raise NotFound() from e

        return handler


async def domain_error_handler(request: Request, exc: DomainError) -> Response:
    headers = {"WWW-Authenticate": "Bearer"} if exc.code is ErrorCode.UNAUTHORIZED else None
    return Response(status_code=status_code_for(exc), headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
