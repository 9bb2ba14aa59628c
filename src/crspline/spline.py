"""Catmull-Rom spline over owned, borrowed or aliased control points."""

from __future__ import annotations

from copy import deepcopy
import logging
import math
from typing import Any, Iterable, Optional

import numpy as np

from .access import REFERENCE, VALUE, ElementAccess, alias
from .evaluator import catmull_rom_window
from .exceptions import EmptySplineError
from .storage import Ownership, PointStorage


logger = logging.getLogger(__name__)


def _check_percent(percent: Any) -> None:
    if isinstance(percent, bool) or not isinstance(percent, (float, np.floating)):
        raise TypeError(
            f"`percent` must be a floating-point value between 0.0 and 1.0; "
            f"got {type(percent).__name__}."
        )
    if not math.isfinite(percent):
        raise ValueError(f"`percent` must be finite; got {percent!r}.")


def uniform_parameters(num_samples: int, t_start: float = 0.0, t_end: float = 1.0) -> list[float]:
    """``num_samples + 1`` evenly spaced floats from `t_start` to `t_end`, both ends exact."""
    if num_samples <= 0:
        raise ValueError(f"`num_samples` must be > 0; got {num_samples}.")
    start, end = float(t_start), float(t_end)
    span = end - start
    return [start + span * i / num_samples for i in range(num_samples)] + [end]


def window_indices(segment: int, size: int) -> tuple[int, int, int, int]:
    """Indices of the 4-point window around `segment`, repeating endpoints at both ends."""
    return (
        segment if segment == 0 else segment - 1,
        segment,
        size - 1 if segment > size - 2 else segment + 1,
        size - 1 if segment > size - 3 else segment + 2,
    )


class CatmullRomSpline:
    """
    Uniform Catmull-Rom spline through an ordered list of control points.

    Points are evaluated lazily: every query re-reads the current handles, so
    appends, index assignment, and edits to borrowed or aliased caller storage
    all show up in the next `get_point` call.
    """

    def __init__(
        self,
        points: Optional[Iterable[Any]] = None,
        *,
        access: ElementAccess = VALUE,
        _storage: Optional[PointStorage] = None,
    ):
        """
        Args:
            points: Optional handles copied into owned storage. An empty spline
                is created when omitted.
            access: How handles become values: `VALUE` for plain points,
                `REFERENCE` for handles exposing ``get()``.
        """
        if _storage is None:
            _storage = PointStorage.owned(points if points is not None else ())
        elif points is not None:
            raise ValueError("Pass either `points` or storage, not both.")
        self._storage = _storage
        self._access = access

    @classmethod
    def with_size(cls, size: int, fill: Any = 0.0) -> "CatmullRomSpline":
        """Owned spline of `size` independent copies of `fill`."""
        if size < 0:
            raise ValueError(f"`size` must be >= 0; got {size}.")
        logger.debug("Creating pre-sized spline with %d points.", size)
        return cls(deepcopy(fill) for _ in range(size))

    @classmethod
    def borrowing(cls, points: list[Any], access: ElementAccess = VALUE) -> "CatmullRomSpline":
        """Use the caller's list as storage, without copying it."""
        if access.is_reference:
            raise TypeError(
                "Borrowed storage holds plain values; use `aliasing` or `from_refs(..., borrow=True)` "
                "for reference handles."
            )
        logger.debug("Borrowing caller list with %d points.", len(points))
        return cls(access=access, _storage=PointStorage.borrowed(points))

    @classmethod
    def aliasing(cls, values: list[Any]) -> "CatmullRomSpline":
        """
        Own one reference per element of `values`.

        Replacing ``values[i]`` is seen by the spline. Inserting into or
        removing from `values` afterwards shifts what each reference reads.
        """
        logger.debug("Aliasing %d caller-owned values.", len(values))
        return cls(alias(values), access=REFERENCE)

    @classmethod
    def from_refs(cls, refs: list[Any], borrow: bool = False) -> "CatmullRomSpline":
        """
        Spline over reference handles (objects with ``get()``).

        By default the handles are copied into owned storage. With
        ``borrow=True`` the caller's list itself is used, so retargeting
        ``refs[i]`` later is seen by the spline.
        """
        logger.debug("Creating spline from %d reference handles (borrow=%s).", len(refs), borrow)
        if borrow:
            return cls(access=REFERENCE, _storage=PointStorage.borrowed(refs))
        return cls(refs, access=REFERENCE)

    @classmethod
    def from_array(cls, points: np.ndarray, copy: bool = True) -> "CatmullRomSpline":
        """
        Spline through the rows of an ``(N, D)`` array.

        With ``copy=False`` each control point is a row view, so in-place
        writes to the array (``points[i] = ...``) move the curve.
        """
        pts = np.array(points, dtype=float, copy=True) if copy else np.asarray(points)
        if pts.ndim != 2:
            raise ValueError(f"`points` must be a 2D array of shape (N, D); got ndim={pts.ndim}.")
        if not np.all(np.isfinite(pts)):
            raise ValueError("`points` contains non-finite values (NaN/Inf).")
        return cls(list(pts))

    @property
    def access(self) -> ElementAccess:
        return self._access

    @property
    def ownership(self) -> Ownership:
        return self._storage.ownership

    @property
    def points(self) -> list[Any]:
        """The live list of handles (the caller's list when borrowed)."""
        return self._storage.items

    def add_point(self, point: Any) -> None:
        self._storage.append(point)

    def add_points(self, points: Iterable[Any]) -> None:
        self._storage.extend(points)

    def get_point(self, percent: float) -> Any:
        """
        Evaluate the curve at `percent` in [0, 1].

        0.0 returns the first point and 1.0 the last. Values outside [0, 1]
        are not rejected: they extrapolate the first or last segment.

        Raises:
            EmptySplineError: If the spline has no points.
            TypeError: If `percent` is not a float.
        """
        _check_percent(percent)
        size = len(self._storage)
        if size == 0:
            raise EmptySplineError()

        position = percent * (size - 1)
        segment = int(position)
        if size > 1:
            # Out-of-range positions extrapolate the first or last real segment.
            if position > size - 1:
                segment = size - 2
            elif segment < 0:
                segment = 0
        weight = position - segment

        window = [self._storage[i] for i in window_indices(segment, size)]
        return catmull_rom_window(window, weight, self._access)

    def sample(self, num_samples: int = 100) -> list[Any]:
        """
        Evaluate at ``i / num_samples`` for ``i = 0..num_samples``.

        `num_samples` counts intervals, so ``num_samples + 1`` values are
        returned with both ends included.
        """
        params = uniform_parameters(num_samples)
        logger.debug("Sampling %d-point spline at %d intervals.", len(self), num_samples)
        return [self.get_point(t) for t in params]

    def evaluate(self, num_samples: int) -> np.ndarray:
        """
        Sample the spline at `num_samples` uniform parameters in [0, 1] as an array.

        Unlike `sample`, `num_samples` counts values, not intervals:
        ``evaluate(n)`` matches ``sample(n - 1)`` for ``n >= 2``.
        """
        if num_samples <= 0:
            return np.empty((0,), dtype=float)
        if len(self) == 0:
            raise EmptySplineError()
        params = uniform_parameters(num_samples - 1) if num_samples > 1 else [0.0]
        return np.asarray([self.get_point(t) for t in params])

    def __len__(self) -> int:
        return len(self._storage)

    def __getitem__(self, index: int) -> Any:
        return self._storage[index]

    def __setitem__(self, index: int, handle: Any) -> None:
        self._storage[index] = handle

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(size={len(self)}, access={self._access.name}, "
            f"ownership={self.ownership.value})"
        )


Spline = CatmullRomSpline

