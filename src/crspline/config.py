"""Configuration models for spline sampling runs."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
import json
from pathlib import Path
from typing import Any, Optional

import numpy as np

from .spline import uniform_parameters


SUPPORTED_DTYPES = ("float", "int", "float32", "vector")


def _path_or_none(value: Optional[str | Path]) -> Optional[Path]:
    if value is None:
        return None
    return Path(value)


def _serialize_paths(payload: Any) -> Any:
    if isinstance(payload, Path):
        return str(payload)
    if isinstance(payload, list):
        return [_serialize_paths(v) for v in payload]
    if isinstance(payload, dict):
        return {k: _serialize_paths(v) for k, v in payload.items()}
    return payload


def _validate_choice(field_name: str, value: str, allowed: tuple[str, ...]) -> None:
    if value not in allowed:
        allowed_str = ", ".join(allowed)
        raise ValueError(f"Invalid `{field_name}`: {value!r}. Allowed values: {allowed_str}.")


@dataclass
class SamplingConfig:
    """Uniform sampling of the curve parameter."""

    num_samples: int = 100  # intervals; num_samples + 1 values are produced.
    t_start: float = 0.0
    t_end: float = 1.0

    def __post_init__(self) -> None:
        if self.num_samples <= 0:
            raise ValueError("`num_samples` must be > 0.")
        if self.t_end < self.t_start:
            raise ValueError("`t_end` must be >= `t_start`.")

    def parameters(self) -> list[float]:
        """Same spacing as `CatmullRomSpline.sample`, over [t_start, t_end]."""
        return uniform_parameters(self.num_samples, self.t_start, self.t_end)


@dataclass
class PlotConfig:
    """Visual style for spline plots."""

    curve_color: str = "#D500F9"
    curve_linewidth: float = 2.0
    point_color: str = "#00E676"
    marker_size: float = 60.0
    show_control_polygon: bool = True
    polygon_color: str = "#888888"


@dataclass
class SplineRunConfig:
    """Top-level config for building and sampling one spline."""

    points: list[Any] = field(default_factory=list)
    dtype: str = "float"
    sampling: SamplingConfig = field(default_factory=SamplingConfig)
    plot: PlotConfig = field(default_factory=PlotConfig)
    plot_output: Optional[Path] = None

    def __post_init__(self) -> None:
        _validate_choice("dtype", self.dtype, SUPPORTED_DTYPES)
        if self.dtype == "vector":
            if any(not isinstance(p, (list, tuple)) for p in self.points):
                raise ValueError("`points` must be lists of coordinates when dtype='vector'.")
            if len({len(p) for p in self.points}) > 1:
                raise ValueError("All vector `points` must have the same dimension.")
        elif any(isinstance(p, (list, tuple)) for p in self.points):
            raise ValueError(f"`points` must be scalars when dtype={self.dtype!r}.")

    def control_points(self) -> list[Any]:
        """Convert the raw point payload to values of the configured dtype."""
        if self.dtype == "int":
            return [int(p) for p in self.points]
        if self.dtype == "float32":
            return [np.float32(p) for p in self.points]
        if self.dtype == "vector":
            return [np.asarray(p, dtype=float) for p in self.points]
        return [float(p) for p in self.points]

    def to_dict(self) -> dict[str, Any]:
        raw = asdict(self)
        return _serialize_paths(raw)

    def to_json(self, output_path: Path) -> None:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json.dumps(self.to_dict(), indent=2))

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "SplineRunConfig":
        sampling_raw = payload.get("sampling", {})
        plot_raw = payload.get("plot", {})
        return cls(
            points=list(payload.get("points", [])),
            dtype=payload.get("dtype", "float"),
            sampling=SamplingConfig(**sampling_raw),
            plot=PlotConfig(**plot_raw),
            plot_output=_path_or_none(payload.get("plot_output")),
        )

    @classmethod
    def from_json(cls, input_path: Path) -> "SplineRunConfig":
        payload = json.loads(input_path.read_text())
        return cls.from_dict(payload)
