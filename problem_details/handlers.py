# This project was developed with assistance from AI tools.
"""FastAPI wiring that serializes problems into HTTP responses.

Install with ``register_problem_handlers(app)``. Every error leaving the
app is then an RFC 9457 body whose ``status`` matches the response code.
"""

import logging
import uuid

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.config import settings
from .errors import (
    ProblemDetailsError,
    bad_request,
    default_title,
    from_status,
    internal_server_error,
    new,
)
from .schemas.error import ProblemDetails

logger = logging.getLogger(__name__)

VALIDATION_TITLE = "Validation Failed"


def _request_id(request: Request) -> str:
    return request.headers.get(settings.REQUEST_ID_HEADER, str(uuid.uuid4()))


def _log_problem(problem: ProblemDetails, request_id: str) -> None:
    if problem.status >= 500:
        logger.error("Problem %d (request_id=%s): %s", problem.status, request_id, problem)
    else:
        logger.warning("Problem %d (request_id=%s): %s", problem.status, request_id, problem)


def _wire_status(problem: ProblemDetails) -> int:
    """Return ``problem.status`` when it is an error code, else 500."""
    if 400 <= problem.status <= 599:
        return problem.status
    logger.error("Problem status %d is not an error code, sending 500", problem.status)
    return 500


def problem_response(problem: ProblemDetails, request: Request | None = None) -> JSONResponse:
    """Serialize a problem with the transport status set to ``problem.status``.

    A status outside 400-599 cannot carry this body, so the response goes
    out as 500 while the body keeps the value the caller set.
    """
    if request is not None and settings.PROBLEM_INSTANCE_FROM_PATH and not problem.instance:
        problem = problem.with_instance(request.url.path)
    return JSONResponse(
        status_code=_wire_status(problem),
        content=problem.to_dict(),
        media_type=settings.PROBLEM_MEDIA_TYPE,
    )


async def problem_details_error_handler(request: Request, exc: ProblemDetailsError):
    """Return the carried problem verbatim."""
    request_id = _request_id(request)
    problem = exc.problem
    if problem is None:
        logger.error("ProblemDetailsError raised without a problem (request_id=%s)", request_id)
        problem = internal_server_error(
            new(settings.UNHANDLED_ERROR_DETAIL), default_title(500)
        )
    _log_problem(problem, request_id)
    return problem_response(problem, request)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Convert HTTPException to Problem Details."""
    problem = from_status(
        exc.status_code, new(str(exc.detail)), default_title(exc.status_code)
    )
    _log_problem(problem, _request_id(request))
    response = problem_response(problem, request)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Convert request validation errors to a 400 problem."""
    problem = bad_request(new(str(exc.errors())), VALIDATION_TITLE)
    _log_problem(problem, _request_id(request))
    return problem_response(problem, request)


async def unhandled_exception_handler(request: Request, exc: Exception):
    """Catch-all for unhandled exceptions -- log and return 500."""
    request_id = _request_id(request)
    logger.exception("Unhandled exception (request_id=%s)", request_id)
    problem = internal_server_error(
        new(settings.UNHANDLED_ERROR_DETAIL), default_title(500)
    )
    return problem_response(problem, request)


def register_problem_handlers(app: FastAPI) -> None:
    """Register problem details exception handlers on a FastAPI application."""
    app.add_exception_handler(ProblemDetailsError, problem_details_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
