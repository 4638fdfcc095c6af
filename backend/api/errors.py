"""Mapping of service errors to HTTP responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from domain.shared.errors import ServiceError

logger = logging.getLogger(__name__)


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    """Render a ServiceError with its status and public message.

    Internal errors are logged with their original cause; the caller only
    sees the generic message.
    """
    if exc.is_public:
        logger.info(
            f"{request.method} {request.url.path} -> {exc.status_code} {exc.kind}: {exc.message}"
        )
    else:
        cause = exc.__cause__ or exc
        logger.error(
            f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}",
            exc_info=(type(cause), cause, cause.__traceback__),
        )

    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ServiceError, service_error_handler)  # type: ignore[arg-type]
