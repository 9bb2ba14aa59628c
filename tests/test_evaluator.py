from __future__ import annotations

from pathlib import Path
import unittest
import sys


SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

import numpy as np

from crspline.access import REFERENCE, Ref
from crspline.evaluator import catmull_rom, catmull_rom_window


class CatmullRomTest(unittest.TestCase):
    def test_segment_ends_are_interpolated(self) -> None:
        self.assertEqual(catmull_rom(0.0, 1.0, 2.0, 3.0, 0.0), 1.0)
        self.assertEqual(catmull_rom(0.0, 1.0, 2.0, 3.0, 1.0), 2.0)

    def test_evenly_spaced_collinear_points_are_linear(self) -> None:
        self.assertEqual(catmull_rom(0.0, 1.0, 2.0, 3.0, 0.5), 1.5)
        self.assertEqual(catmull_rom(0.0, 1.0, 2.0, 3.0, 0.25), 1.25)

    def test_parameter_is_not_clamped(self) -> None:
        # Clamped window [0, 0, 1, 1] is -t^3 + 1.5 t^2 + 0.5 t.
        self.assertEqual(catmull_rom(0.0, 0.0, 1.0, 1.0, 2.0), -1.0)
        self.assertEqual(catmull_rom(0.0, 0.0, 1.0, 1.0, -1.0), 2.0)

    def test_explicit_tangents_override_defaults(self) -> None:
        self.assertEqual(catmull_rom(0.0, 0.0, 1.0, 1.0, 0.5, v0=0.0, v1=0.0), 0.5)
        self.assertEqual(catmull_rom(0.0, 0.0, 1.0, 1.0, 0.25, v0=0.0, v1=0.0), 0.15625)

    def test_numpy_vectors(self) -> None:
        p = [np.array([0.0, 0.0]), np.array([1.0, 2.0]), np.array([2.0, 2.0]), np.array([3.0, 0.0])]
        np.testing.assert_array_equal(catmull_rom(*p, 0.0), p[1])
        np.testing.assert_allclose(catmull_rom(*p, 1.0), p[2], atol=1e-12)

    def test_float32_parameter_keeps_single_precision(self) -> None:
        p = [np.float32(v) for v in (0.0, 1.0, 3.0, 4.0)]
        out = catmull_rom(*p, np.float32(0.5))
        self.assertEqual(out.dtype, np.float32)


class CatmullRomWindowTest(unittest.TestCase):
    def test_requires_four_handles(self) -> None:
        with self.assertRaises(ValueError):
            catmull_rom_window([0.0, 1.0, 2.0], 0.5)

    def test_reference_window_is_dereferenced(self) -> None:
        window = [Ref(0.0), Ref(1.0), Ref(2.0), Ref(3.0)]
        self.assertEqual(catmull_rom_window(window, 0.5, REFERENCE), 1.5)

    def test_each_handle_is_read_once(self) -> None:
        class CountingRef(Ref):
            __slots__ = ("reads",)

            def __init__(self, value: float) -> None:
                super().__init__(value)
                self.reads = 0

            def get(self) -> float:
                self.reads += 1
                return super().get()

        window = [CountingRef(v) for v in (0.0, 1.0, 2.0, 3.0)]
        catmull_rom_window(window, 0.5, REFERENCE)
        self.assertEqual([ref.reads for ref in window], [1, 1, 1, 1])

    def test_float32_parameter_is_widened_for_float_points(self) -> None:
        out = catmull_rom_window([0.1, 0.1, 0.2, 0.3], np.float32(0.0))
        self.assertIs(type(out), float)
        self.assertEqual(out, 0.1)

    def test_integer_window_returns_integer(self) -> None:
        out = catmull_rom_window([0, 0, 100, 0], 0.5)
        self.assertIsInstance(out, int)
        self.assertEqual(out, 56)

    def test_integer_tangents_are_truncated(self) -> None:
        # Tangents 5 / 2 truncate to 2 (0.96875); exact tangents would reach 1.015625.
        self.assertEqual(catmull_rom_window([0, 0, 5, 5], 0.25), 0)
        self.assertEqual(catmull_rom_window([0.0, 0.0, 5.0, 5.0], 0.25), 1.015625)


if __name__ == "__main__":
    unittest.main()
