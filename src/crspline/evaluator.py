"""Uniform Catmull-Rom basis evaluation."""

from __future__ import annotations

from typing import Any, Sequence

from .access import VALUE, ElementAccess, coerce_like, promote_scalar, value_half_difference


def catmull_rom(p0: Any, p1: Any, p2: Any, p3: Any, t: Any, v0: Any = None, v1: Any = None) -> Any:
    """
    Evaluate one uniform Catmull-Rom segment between `p1` and `p2`.

    Points only need ``+``, ``-`` and multiplication by a scalar. Constants are
    built in ``type(t)`` so a ``numpy.float32`` parameter keeps single
    precision. `t` is not clamped: values outside [0, 1] extrapolate the
    same cubic.

    Args:
        p0, p1, p2, p3: Window of control point values.
        t: Local parameter; ``t == 0`` gives `p1` exactly.
        v0, v1: Optional precomputed tangents. Default to
            ``(p2 - p0) * 0.5`` and ``(p3 - p1) * 0.5``.

    Returns:
        The interpolated value (not coerced back to the point type).
    """
    real = type(t)
    half = real(0.5)
    if v0 is None:
        v0 = (p2 - p0) * half
    if v1 is None:
        v1 = (p3 - p1) * half

    t2 = t * t
    t3 = t2 * t
    a = p1 * real(2.0) - p2 * real(2.0) + v0 + v1
    b = p1 * real(-3.0) + p2 * real(3.0) - v0 * real(2.0) - v1
    return a * t3 + b * t2 + v0 * t + p1


def catmull_rom_window(window: Sequence[Any], t: Any, access: ElementAccess = VALUE) -> Any:
    """
    Evaluate a 4-handle window through `access` and coerce to the type of ``window[1]``.

    Each handle is dereferenced exactly once. `t` is widened to the precision
    of the points, so a ``numpy.float32`` parameter on Python floats still
    evaluates in double precision.
    """
    if len(window) != 4:
        raise ValueError(f"`window` must hold exactly 4 handles; got {len(window)}.")
    p0, p1, p2, p3 = access.deref_window(window)
    t = promote_scalar(t, p1)
    half = type(t)(0.5)
    v0 = value_half_difference(p0, p2, half)
    v1 = value_half_difference(p1, p3, half)
    return coerce_like(catmull_rom(p0, p1, p2, p3, t, v0=v0, v1=v1), p1)
