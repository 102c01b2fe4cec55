# This project was developed with assistance from AI tools.
"""Problem Details (RFC 9457) error payloads and status-class constructors."""

from .errors import (
    ProblemDetailsError,
    SimpleError,
    bad_gateway,
    bad_request,
    default_title,
    from_status,
    internal_server_error,
    new,
    not_found_error,
)
from .schemas.error import ProblemDetails, render_problem

__version__ = "0.1.0"

__all__ = [
    "ProblemDetails",
    "ProblemDetailsError",
    "SimpleError",
    "__version__",
    "bad_gateway",
    "bad_request",
    "default_title",
    "from_status",
    "internal_server_error",
    "new",
    "not_found_error",
    "render_problem",
]
