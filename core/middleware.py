"""
Middleware

Correlation IDs for every request, and the 422 handlers for malformed
request bodies and stat rows that break the corpus contract.
"""

import uuid

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from core.logging import get_logger, set_correlation_id
from schemas.common import ApiStatus, error_response
from stats.corpus import StatLineContractError

log = get_logger("api")


class CorrelationMiddleware(BaseHTTPMiddleware):
    """
    Middleware to inject and propagate correlation IDs.

    - Reads X-Correlation-ID from incoming request headers
    - Generates a new UUID if not present
    - Sets the correlation ID in context for logging
    - Adds X-Correlation-ID to response headers
    """

    HEADER_NAME = "X-Correlation-ID"

    async def dispatch(self, request: Request, call_next) -> Response:
        correlation_id = request.headers.get(self.HEADER_NAME) or str(uuid.uuid4())
        set_correlation_id(correlation_id)

        response = await call_next(request)
        response.headers[self.HEADER_NAME] = correlation_id
        return response


def setup_middleware(app: FastAPI):
    """Setup correlation IDs and global exception handlers"""

    app.add_middleware(CorrelationMiddleware)

    # Malformed corpus in a request body
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        log.warning("request_validation_failed", path=request.url.path, errors=exc.errors())
        return JSONResponse(
            status_code=422,
            content=error_response(
                message="Request validation failed",
                status=ApiStatus.VALIDATION_ERROR,
                error_code="VALIDATION_ERROR",
                data={"errors": jsonable_errors(exc.errors())},
            ),
        )

    @app.exception_handler(StatLineContractError)
    async def contract_exception_handler(request: Request, exc: StatLineContractError):
        log.warning("stat_line_contract_violation", path=request.url.path, index=exc.index)
        return JSONResponse(
            status_code=422,
            content=error_response(
                message=str(exc),
                status=ApiStatus.VALIDATION_ERROR,
                error_code="STAT_LINE_CONTRACT",
                data={"index": exc.index, "errors": jsonable_errors(exc.errors)},
            ),
        )


def jsonable_errors(errors) -> list[dict]:
    """Reduce pydantic error dicts to their JSON-safe fields."""
    return [
        {"loc": list(e.get("loc", ())), "msg": e.get("msg", ""), "type": e.get("type", "")}
        for e in errors
    ]
