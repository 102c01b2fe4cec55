# This project was developed with assistance from AI tools.
"""Problem details constructors and lightweight error primitives.

Pure functions with no FastAPI or HTTP transport dependencies. Each
constructor copies the underlying error's message verbatim into
``detail``, sets ``status`` and ``title``, and leaves ``type`` and
``instance`` empty for the caller to enrich.
"""

from http import HTTPStatus

from .schemas.error import ProblemDetails, render_problem


def default_title(status_code: int) -> str:
    """Return the standard reason phrase for a status code, or ``"Error"``."""
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def from_status(status_code: int, err: BaseException, title: str) -> ProblemDetails:
    """Build a problem for an arbitrary status code.

    ``err`` must not be None; its ``str()`` becomes ``detail`` unchanged.
    """
    return ProblemDetails(
        status=int(status_code),
        detail=str(err),
        title=title,
    )


def internal_server_error(err: BaseException, title: str) -> ProblemDetails:
    return from_status(HTTPStatus.INTERNAL_SERVER_ERROR, err, title)


def not_found_error(err: BaseException, title: str) -> ProblemDetails:
    return from_status(HTTPStatus.NOT_FOUND, err, title)


def bad_request(err: BaseException, title: str) -> ProblemDetails:
    return from_status(HTTPStatus.BAD_REQUEST, err, title)


def bad_gateway(err: BaseException, title: str) -> ProblemDetails:
    return from_status(HTTPStatus.BAD_GATEWAY, err, title)


class SimpleError(Exception):
    """Error carrying only a message; ``str()`` returns it exactly."""

    def __init__(self, text: str) -> None:
        super().__init__(text)
        self.text = text

    def __str__(self) -> str:
        return self.text


def new(text: str) -> SimpleError:
    """Create a lightweight error whose rendering is exactly ``text``."""
    return SimpleError(text)


class ProblemDetailsError(Exception):
    """Raisable carrier for a :class:`ProblemDetails` value.

    Raise it from request handling code; ``handlers.register_problem_handlers``
    turns it into a problem response with the carried status.
    """

    def __init__(self, problem: ProblemDetails | None) -> None:
        super().__init__(render_problem(problem))
        self.problem = problem

    def __str__(self) -> str:
        return render_problem(self.problem)
