"""Generic Catmull-Rom spline evaluation over owned, borrowed or aliased control points."""

from .access import (
    REFERENCE,
    VALUE,
    ElementAccess,
    Ref,
    ReferenceAccess,
    SlotRef,
    ValueAccess,
    alias,
    coerce_like,
    promote_scalar,
    value_half_difference,
)
from .config import PlotConfig, SamplingConfig, SplineRunConfig
from .evaluator import catmull_rom, catmull_rom_window
from .exceptions import EmptySplineError, SplineError
from .spline import CatmullRomSpline, Spline, uniform_parameters, window_indices
from .storage import Ownership, PointStorage
from .visualization import plot_spline

__all__ = [
    "alias",
    "catmull_rom",
    "catmull_rom_window",
    "CatmullRomSpline",
    "coerce_like",
    "ElementAccess",
    "EmptySplineError",
    "Ownership",
    "plot_spline",
    "PlotConfig",
    "PointStorage",
    "promote_scalar",
    "Ref",
    "REFERENCE",
    "ReferenceAccess",
    "SamplingConfig",
    "SlotRef",
    "Spline",
    "SplineError",
    "SplineRunConfig",
    "uniform_parameters",
    "VALUE",
    "ValueAccess",
    "value_half_difference",
    "window_indices",
]
