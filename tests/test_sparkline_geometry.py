from __future__ import annotations

from decimal import Decimal
import unittest

import numpy as np

from luvatrix_sparkline import InvalidInputError, RegionSize, SampleLimits, render
from luvatrix_sparkline.style import FillMode, PointsMode, SparklineStyle


STYLE = SparklineStyle()


class SparklineGeometryTests(unittest.TestCase):
    def test_reference_example_maps_to_inset_region(self) -> None:
        geometry = render([0, 10, 5], RegionSize(100, 50), STYLE)
        self.assertEqual(geometry.stroke.vertices, ((1.0, 49.0), (50.0, 1.0), (99.0, 25.0)))
        self.assertEqual(geometry.limits, SampleLimits(min=0.0, max=10.0))
        self.assertFalse(geometry.degenerate)
        self.assertFalse(geometry.stroke.closed)

    def test_stroke_has_one_vertex_per_sample_in_index_order(self) -> None:
        rng = np.random.default_rng(7)
        for count in (2, 3, 10, 257):
            samples = rng.normal(size=count) * 40.0 - 3.0
            geometry = render(samples, (240, 60), STYLE)
            self.assertEqual(len(geometry.stroke.vertices), count)
            self.assertTrue(np.all(np.diff(geometry.stroke.xs()) > 0))

    def test_y_coordinates_stay_inside_inset_band(self) -> None:
        rng = np.random.default_rng(11)
        style = SparklineStyle(line_width=5.0)
        samples = rng.uniform(-1e6, 1e6, size=64)
        geometry = render(samples, (320, 90), style)
        ys = geometry.stroke.ys()
        usable = 90 - 5.0
        self.assertGreaterEqual(float(ys.min()), 2.5)
        self.assertLessEqual(float(ys.max()), usable + 2.5)
        self.assertAlmostEqual(float(ys.min()), 2.5)
        self.assertAlmostEqual(float(ys.max()), usable + 2.5)

    def test_y_band_is_inclusive_under_rounding(self) -> None:
        rng = np.random.default_rng(2024)
        for _ in range(500):
            line_width = float(rng.uniform(0.5, 6.0))
            height = float(rng.uniform(10.0, 120.0))
            samples = rng.normal(size=int(rng.integers(2, 40))) * float(rng.uniform(1e-3, 1e3))
            ys = render(samples, (200, height), SparklineStyle(line_width=line_width)).stroke.ys()
            self.assertGreaterEqual(float(ys.min()), line_width / 2)
            self.assertLessEqual(float(ys.max()), (height - line_width) + line_width / 2)

    def test_span_wider_than_float_range_stays_finite(self) -> None:
        geometry = render([-1e308, 0.0, 1e308], RegionSize(100, 50), STYLE)
        self.assertEqual(geometry.stroke.vertices, ((1.0, 49.0), (50.0, 25.0), (99.0, 1.0)))
        self.assertFalse(geometry.degenerate)

    def test_rejects_non_finite_precomputed_limits(self) -> None:
        with self.assertRaisesRegex(InvalidInputError, "limits must be finite"):
            render([1.0], (10, 10), STYLE, limits=SampleLimits(min=0.0, max=float("inf")))

    def test_larger_values_map_to_smaller_y(self) -> None:
        geometry = render([1.0, 2.0], (50, 50), STYLE)
        (_, y_low), (_, y_high) = geometry.stroke.vertices
        self.assertGreater(y_low, y_high)

    def test_render_is_idempotent(self) -> None:
        style = SparklineStyle(fill_mode=FillMode.ABOVE, points_mode=PointsMode.ALL)
        first = render([3, 1, 4, 1, 5, 9, 2, 6], (120, 40), style)
        second = render([3, 1, 4, 1, 5, 9, 2, 6], (120, 40), style)
        self.assertEqual(first, second)

    def test_flat_data_sits_on_bottom_of_band(self) -> None:
        geometry = render([5, 5, 5], (100, 50), STYLE)
        self.assertTrue(geometry.degenerate)
        self.assertEqual({y for _, y in geometry.stroke.vertices}, {49.0})
        self.assertEqual([x for x, _ in geometry.stroke.vertices], [1.0, 50.0, 99.0])

    def test_single_sample_has_one_vertex_and_no_fill(self) -> None:
        style = SparklineStyle(fill_mode=FillMode.BELOW, points_mode=PointsMode.ALL)
        geometry = render([3.0], (100, 50), style)
        self.assertEqual(geometry.stroke.vertices, ((1.0, 49.0),))
        self.assertIsNone(geometry.fill)
        self.assertIsNone(geometry.fill_paint)
        self.assertEqual(geometry.markers, ((1.0, 49.0),))

    def test_last_points_mode_marks_final_vertex_only(self) -> None:
        style = SparklineStyle(points_mode=PointsMode.LAST)
        for count in range(1, 6):
            geometry = render(list(range(count)), (80, 30), style)
            self.assertEqual(geometry.markers, (geometry.stroke.vertices[-1],))

    def test_all_and_none_points_modes(self) -> None:
        samples = [2, 4, 3]
        everything = render(samples, (80, 30), SparklineStyle(points_mode=PointsMode.ALL))
        nothing = render(samples, (80, 30), STYLE)
        self.assertEqual(everything.markers, everything.stroke.vertices)
        self.assertEqual(nothing.markers, ())
        self.assertEqual(everything.point_paint.size, 4.0)

    def test_below_fill_closes_along_bottom_edge(self) -> None:
        style = SparklineStyle(fill_mode=FillMode.BELOW)
        geometry = render([0, 10, 5], (100, 50), style)
        assert geometry.fill is not None
        outline = geometry.fill.vertices
        self.assertTrue(geometry.fill.closed)
        self.assertEqual(outline[:3], geometry.stroke.vertices)
        self.assertEqual(outline[3], (100.0, 25.0))
        self.assertEqual(outline[4], (100.0, 50.0))
        self.assertEqual(outline[5], (0.0, 50.0))
        self.assertEqual(outline[6], (0.0, 49.0))
        self.assertEqual(geometry.fill_paint.color, style.fill_color)

    def test_above_fill_closes_along_top_edge(self) -> None:
        style = SparklineStyle(fill_mode=FillMode.ABOVE)
        geometry = render([0, 10, 5], (100, 50), style)
        assert geometry.fill is not None
        self.assertEqual(geometry.fill.vertices[4:6], ((100.0, 0.0), (0.0, 0.0)))

    def test_stroke_paint_follows_sharp_corners(self) -> None:
        rounded = render([1, 2], (10, 10), STYLE).stroke_paint
        sharp = render([1, 2], (10, 10), SparklineStyle(sharp_corners=True)).stroke_paint
        self.assertEqual((rounded.cap, rounded.join), ("round", "round"))
        self.assertEqual((sharp.cap, sharp.join), ("round", "miter"))
        self.assertEqual(rounded.width, 2.0)

    def test_region_smaller_than_stroke_collapses_to_center_of_stroke(self) -> None:
        geometry = render([1, 7, 3], (1, 1), STYLE)
        self.assertEqual(set(geometry.stroke.vertices), {(1.0, 1.0)})

    def test_accepts_numpy_and_decimal_samples(self) -> None:
        from_array = render(np.asarray([1, 2, 3], dtype=np.int32), (40, 20), STYLE)
        from_decimal = render([Decimal("1"), Decimal("2"), Decimal("3")], (40, 20), STYLE)
        self.assertEqual(from_array.stroke, from_decimal.stroke)

    def test_precomputed_limits_are_used(self) -> None:
        geometry = render([5.0], (20, 20), STYLE, limits=SampleLimits(min=0.0, max=10.0))
        self.assertEqual(geometry.stroke.vertices, ((1.0, 10.0),))

    def test_rejects_malformed_samples(self) -> None:
        for bad in ([], [1.0, float("nan")], [float("inf")], [[1, 2], [3, 4]], ["a", "b"], [None], "123"):
            with self.subTest(samples=bad):
                with self.assertRaises(InvalidInputError):
                    render(bad, (10, 10), STYLE)
        with self.assertRaisesRegex(InvalidInputError, "1-D"):
            render(np.zeros((2, 2)), (10, 10), STYLE)

    def test_rejects_malformed_region(self) -> None:
        with self.assertRaisesRegex(InvalidInputError, ">= 0"):
            render([1, 2], (-1, 10), STYLE)
        with self.assertRaisesRegex(InvalidInputError, "finite"):
            render([1, 2], (float("inf"), 10), STYLE)

    def test_invalid_input_error_is_value_error(self) -> None:
        with self.assertRaises(ValueError):
            render([], (10, 10), STYLE)


if __name__ == "__main__":
    unittest.main()
