"""
Domain exceptions and the handlers that translate them into HTTP responses.

Services raise ``DomainException`` subclasses; nothing below the router
layer knows about status codes.
"""

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError, ResponseValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

logger = logging.getLogger(__name__)


class DomainException(Exception):
    internal_code = "DOMAIN_ERROR"

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ResourceNotFoundException(DomainException):
    internal_code = "RESOURCE_NOT_FOUND"

    def __init__(self, detail: str = "Resource not found", resource_id: Optional[Any] = None):
        resource_info = f" (ID: {resource_id})" if resource_id is not None else ""
        super().__init__(f"{detail}{resource_info}")
        self.resource_id = resource_id


class ClientNotFoundError(ResourceNotFoundException):
    def __init__(self, client_id: Any):
        super().__init__("Client not found", resource_id=client_id)


STATUS_BY_CODE = {
    "RESOURCE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
}


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    status_code = STATUS_BY_CODE.get(exc.internal_code, status.HTTP_400_BAD_REQUEST)
    logger.warning(
        "Domain exception: %s | Code: %s | Path: %s", exc.detail, exc.internal_code, request.url.path
    )
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.detail, "code": exc.internal_code},
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed JSON, wrong field types and non-integer path ids all land here
    logger.warning("Rejected request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


async def response_validation_handler(request: Request, exc: ResponseValidationError) -> PlainTextResponse:
    detail = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
    )
    logger.error("Could not serialize response for %s: %s", request.url.path, detail)
    return PlainTextResponse(detail, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ResponseValidationError, response_validation_handler)
