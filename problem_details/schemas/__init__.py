# This project was developed with assistance from AI tools.
"""Shared schema components."""

from .error import ProblemDetails, render_problem

__all__ = ["ProblemDetails", "render_problem"]
