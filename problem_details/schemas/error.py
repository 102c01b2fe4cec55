# This project was developed with assistance from AI tools.
"""RFC 9457 Problem Details error payload schema."""

from pydantic import BaseModel, ConfigDict, Field

NIL_RENDERING = "<nil>"


class ProblemDetails(BaseModel):
    """RFC 9457 Problem Details for HTTP APIs.

    See https://datatracker.ietf.org/doc/html/rfc9457

    Unset fields keep their zero value. ``type`` is *not* defaulted to
    ``about:blank``; callers that want it set it explicitly.
    """

    model_config = ConfigDict(frozen=True)

    type: str = Field(
        default="",
        description="URI reference identifying the problem type.",
    )
    status: int = Field(
        default=0,
        description="HTTP status code generated for this occurrence.",
    )
    title: str = Field(
        default="",
        description="Short human-readable summary of the problem type.",
    )
    detail: str = Field(
        default="",
        description="Human-readable explanation specific to this occurrence.",
    )
    instance: str = Field(
        default="",
        description="URI reference identifying the specific occurrence of the problem.",
    )

    def __str__(self) -> str:
        return (
            f"Error: {self.type}, Title: {self.title}, "
            f"Detail: {self.detail}, Instance: {self.instance}"
        )

    def to_dict(self) -> dict[str, str | int]:
        """Return the wire representation keyed by the RFC field names."""
        return self.model_dump()

    def with_type(self, type_uri: str) -> "ProblemDetails":
        """Return a copy with ``type`` set. The receiver is left untouched."""
        return self.model_copy(update={"type": type_uri})

    def with_instance(self, instance_uri: str) -> "ProblemDetails":
        """Return a copy with ``instance`` set. The receiver is left untouched."""
        return self.model_copy(update={"instance": instance_uri})


def render_problem(problem: ProblemDetails | None) -> str:
    """Render a problem for humans, tolerating a missing value.

    Returns ``"<nil>"`` for ``None`` instead of raising.
    """
    if problem is None:
        return NIL_RENDERING
    return str(problem)
