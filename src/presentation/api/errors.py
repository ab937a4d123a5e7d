"""Mapping of domain exceptions to HTTP responses."""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from src.domain.exceptions import (ConflictException,
                                   ResourceNotFoundException,
                                   TimelineException, ValidationException)
from src.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

# Most specific first
_STATUS_BY_EXCEPTION: list[tuple[type[TimelineException], int]] = [
    (ValidationException, status.HTTP_422_UNPROCESSABLE_CONTENT),
    (ConflictException, status.HTTP_409_CONFLICT),
    (ResourceNotFoundException, status.HTTP_404_NOT_FOUND),
]


def status_code_for(exc: TimelineException) -> int:
    for exception_type, status_code in _STATUS_BY_EXCEPTION:
        if isinstance(exc, exception_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


async def timeline_exception_handler(request: Request, exc: TimelineException) -> JSONResponse:
    status_code = status_code_for(exc)
    logger.info(
        "%s %s rejected with %d: %s", request.method, request.url.path, status_code, exc.message
    )
    return JSONResponse(status_code=status_code, content=exc.to_dict())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TimelineException, timeline_exception_handler)
