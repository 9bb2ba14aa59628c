"""Shared spline exception types."""

from __future__ import annotations


class SplineError(Exception):
    """Base class for errors raised by crspline."""


class EmptySplineError(SplineError, ValueError):
    """Raised when a spline with no control points is evaluated."""

    def __init__(self, message: str = "Cannot evaluate a spline with no control points.") -> None:
        super().__init__(message)
