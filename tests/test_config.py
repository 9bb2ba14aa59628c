from __future__ import annotations

from pathlib import Path
import tempfile
import unittest
import sys


SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

import numpy as np

from crspline.config import PlotConfig, SamplingConfig, SplineRunConfig


class SamplingConfigTest(unittest.TestCase):
    def test_defaults(self) -> None:
        cfg = SamplingConfig()
        self.assertEqual(cfg.num_samples, 100)
        self.assertEqual(cfg.t_start, 0.0)
        self.assertEqual(cfg.t_end, 1.0)

    def test_parameters_cover_both_ends(self) -> None:
        params = SamplingConfig(num_samples=4).parameters()
        self.assertEqual(params, [0.0, 0.25, 0.5, 0.75, 1.0])

    def test_integer_bounds_still_produce_floats(self) -> None:
        params = SamplingConfig(num_samples=2, t_start=0, t_end=1).parameters()
        self.assertTrue(all(isinstance(t, float) for t in params))

    def test_rejects_invalid_values(self) -> None:
        with self.assertRaises(ValueError):
            SamplingConfig(num_samples=0)
        with self.assertRaises(ValueError):
            SamplingConfig(t_start=1.0, t_end=0.0)


class SplineRunConfigTest(unittest.TestCase):
    def test_rejects_unknown_dtype(self) -> None:
        with self.assertRaises(ValueError):
            SplineRunConfig(points=[1.0], dtype="complex")

    def test_vector_points_must_share_dimension(self) -> None:
        with self.assertRaises(ValueError):
            SplineRunConfig(points=[[0.0, 1.0], [1.0, 2.0, 3.0]], dtype="vector")
        with self.assertRaises(ValueError):
            SplineRunConfig(points=[1.0, 2.0], dtype="vector")

    def test_scalar_dtypes_reject_vectors(self) -> None:
        with self.assertRaises(ValueError):
            SplineRunConfig(points=[[0.0, 1.0]], dtype="float")

    def test_control_points_follow_dtype(self) -> None:
        self.assertEqual(SplineRunConfig(points=[1, 2.0]).control_points(), [1.0, 2.0])

        ints = SplineRunConfig(points=[0, 100.0], dtype="int").control_points()
        self.assertEqual(ints, [0, 100])
        self.assertTrue(all(isinstance(p, int) for p in ints))

        singles = SplineRunConfig(points=[0.5], dtype="float32").control_points()
        self.assertIsInstance(singles[0], np.float32)

        vectors = SplineRunConfig(points=[[0, 1], [2, 3]], dtype="vector").control_points()
        np.testing.assert_array_equal(vectors[1], [2.0, 3.0])

    def test_json_round_trip(self) -> None:
        cfg = SplineRunConfig(
            points=[[0.0, 0.0], [1.0, 2.0]],
            dtype="vector",
            sampling=SamplingConfig(num_samples=10),
            plot=PlotConfig(curve_color="#000000"),
            plot_output=Path("outputs/curve.png"),
        )

        with tempfile.TemporaryDirectory() as tmp_dir:
            config_path = Path(tmp_dir) / "nested" / "config.json"
            cfg.to_json(config_path)
            loaded = SplineRunConfig.from_json(config_path)

        self.assertEqual(loaded.points, [[0.0, 0.0], [1.0, 2.0]])
        self.assertEqual(loaded.dtype, "vector")
        self.assertEqual(loaded.sampling.num_samples, 10)
        self.assertEqual(loaded.plot.curve_color, "#000000")
        self.assertEqual(loaded.plot_output, Path("outputs/curve.png"))

        as_dict = loaded.to_dict()
        self.assertIsInstance(as_dict["plot_output"], str)

    def test_from_dict_uses_defaults(self) -> None:
        cfg = SplineRunConfig.from_dict({"points": [1, 2, 3]})
        self.assertEqual(cfg.dtype, "float")
        self.assertEqual(cfg.sampling.num_samples, 100)
        self.assertIsNone(cfg.plot_output)


if __name__ == "__main__":
    unittest.main()
