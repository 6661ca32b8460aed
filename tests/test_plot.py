from __future__ import annotations

import unittest

from plot_fixtures import FixedComponent

from facetplot import (
    Bounds,
    DefaultXTransformer,
    InvalidArgumentError,
    LogXTransformer,
    LogYTransformer,
    Padding,
    Plot,
    Point,
    PointRenderer,
    Position,
)


class PlotDescriptorTests(unittest.TestCase):
    def test_defaults(self) -> None:
        plot = Plot()
        self.assertEqual(plot.xbounds, Bounds(0.0, 1.0))
        self.assertFalse(plot.xfixed)
        self.assertFalse(plot.yfixed)
        self.assertEqual(plot.components, ())
        self.assertIsInstance(plot.xtransform, DefaultXTransformer)

    def test_set_bounds_fixes_axis_and_leaves_original_untouched(self) -> None:
        base = Plot()
        fixed = base.set_xbounds(Bounds(-1.0, 1.0))
        self.assertTrue(fixed.xfixed)
        self.assertFalse(fixed.yfixed)
        self.assertEqual(fixed.xbounds, Bounds(-1.0, 1.0))
        self.assertEqual(base.xbounds, Bounds(0.0, 1.0))
        self.assertFalse(base.xfixed)

        both = fixed.set_ybounds(2.0, 4.0)
        self.assertTrue(both.yfixed)
        self.assertEqual(both.ybounds, Bounds(2.0, 4.0))

    def test_set_bounds_argument_forms(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            Plot().set_xbounds(1.0)
        with self.assertRaises(InvalidArgumentError):
            Plot().set_xbounds(Bounds(0.0, 1.0), 2.0)
        with self.assertRaises(InvalidArgumentError):
            Plot().set_ybounds(3.0, 1.0)

    def test_update_bounds_skips_fixed_axes(self) -> None:
        plot = Plot().set_xbounds(0.0, 5.0)
        updated = plot.update_bounds(Bounds(-9.0, 9.0), Bounds(10.0, 20.0))
        self.assertEqual(updated.xbounds, Bounds(0.0, 5.0))
        self.assertEqual(updated.ybounds, Bounds(10.0, 20.0))
        self.assertFalse(updated.yfixed)

    def test_update_bounds_accepts_zero_width_defaults(self) -> None:
        updated = Plot().update_bounds(Bounds(3.0, 3.0), Bounds(0.0, 0.0))
        self.assertEqual(updated.xbounds.range, 0.0)

    def test_set_transform_controls_fixed_flag(self) -> None:
        plot = Plot().set_xtransform(LogXTransformer())
        self.assertIsInstance(plot.xtransform, LogXTransformer)
        self.assertTrue(plot.xfixed)
        loose = Plot().set_ytransform(LogYTransformer(), fixed=False)
        self.assertFalse(loose.yfixed)

    def test_components_keep_insertion_order(self) -> None:
        a = FixedComponent(Position.LEFT, width=10.0)
        b = FixedComponent(Position.TOP, height=5.0)
        c = FixedComponent(Position.LEFT, width=20.0)
        base = Plot()
        plot = base.add_component(a).add_component(b).add_component(c)
        self.assertEqual(plot.components, (a, b, c))
        self.assertEqual(plot.left_components, (a, c))
        self.assertEqual(plot.top_components, (b,))
        self.assertEqual(base.components, ())
        self.assertEqual(plot.prepend_component(b).components, (b, a, b, c))

    def test_component_without_position_rejected(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            Plot().add_component(object())  # type: ignore[arg-type]

    def test_in_bounds(self) -> None:
        plot = Plot().set_xbounds(0.0, 10.0).set_ybounds(-1.0, 1.0)
        self.assertTrue(plot.in_bounds(Point(10.0, -1.0)))
        self.assertFalse(plot.in_bounds(Point(5.0, 2.0)))

    def test_padding(self) -> None:
        plot = Plot().pad_left(12.0).pad_bottom(3.0)
        self.assertEqual(plot.components, (Padding(Position.LEFT, 12.0), Padding(Position.BOTTOM, 3.0)))
        self.assertEqual(plot.plot_offset, Point(12.0, 0.0))
        self.assertIs(plot.pad_right(0.0), plot)
        with self.assertRaises(InvalidArgumentError):
            plot.pad_top(-1.0)
        with self.assertRaises(InvalidArgumentError):
            Padding(Position.OVERLAY, 1.0)

    def test_with_renderer_returns_copy(self) -> None:
        renderer = PointRenderer(points=(Point(0.5, 0.5),))
        base = Plot()
        plot = base.with_renderer(renderer)
        self.assertIs(plot.renderer, renderer)
        self.assertIsNot(base.renderer, renderer)


if __name__ == "__main__":
    unittest.main()
