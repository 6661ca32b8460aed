from __future__ import annotations

import unittest

from plot_fixtures import FixedComponent, placed_leaves

from facetplot import (
    DEFAULT_EXTENT,
    BackgroundFill,
    Border,
    Extent,
    InvalidArgumentError,
    Plot,
    PlotLabel,
    Point,
    PointRenderer,
    Position,
    resolve_extent,
)
from facetplot.drawable import Disc, EmptyDrawable, FilledRect, StrokedRect, Text, Translate
from facetplot.text import load_font, quarter_turns, text_size


class PlotLabelTests(unittest.TestCase):
    def test_side_labels_are_rotated(self) -> None:
        plot = Plot()
        top = PlotLabel("Temperature", position=Position.TOP, pad_px=3.0)
        left = PlotLabel("Temperature", position=Position.LEFT, pad_px=3.0)
        top_size = top.size(plot)
        left_size = left.size(plot)
        self.assertEqual(left.rotate_deg, 90)
        self.assertEqual(left_size.width, top_size.height)
        self.assertEqual(left_size.height, top_size.width)
        self.assertGreater(top_size.width, 0)

    def test_label_reserves_space_on_its_side(self) -> None:
        label = PlotLabel("title", position=Position.BOTTOM)
        plot = Plot().add_component(label)
        height = label.size(plot).height
        self.assertEqual(plot.plot_extent(DEFAULT_EXTENT), Extent(800.0, 600.0 - height))

    def test_label_renders_centered_text(self) -> None:
        label = PlotLabel("abc", position=Position.TOP)
        out = label.render(Plot(), Extent(300.0, 40.0))
        self.assertIsInstance(out, Translate)
        x, y, leaf = placed_leaves(out)[0]
        self.assertIsInstance(leaf, Text)
        self.assertEqual(leaf.text, "abc")
        self.assertAlmostEqual(x * 2 + leaf.extent.width, 300.0)
        self.assertAlmostEqual(y * 2 + leaf.extent.height, 40.0)

    def test_label_requires_side_position(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            PlotLabel("x", position=Position.OVERLAY)

    def test_text_size_rotation_and_validation(self) -> None:
        w0, h0 = text_size("value", font_size_px=18.0)
        w1, h1 = text_size("value", font_size_px=18.0, rotate_deg=270)
        self.assertEqual((w1, h1), (h0, w0))
        self.assertEqual(text_size("", font_size_px=18.0)[0], 0)
        self.assertEqual(quarter_turns(-90), 3)
        with self.assertRaises(InvalidArgumentError):
            quarter_turns(45)


    def test_missing_font_falls_back_to_default(self) -> None:
        with self.assertLogs("facetplot.text", level="DEBUG"):
            font = load_font("no-such-font-face.ttf", 13.0)
        self.assertIsNotNone(font)
        w, h = text_size("abc", font_family="no-such-font-face.ttf", font_size_px=13.0)
        self.assertGreater(w, 0)
        self.assertGreater(h, 0)


class DecorationTests(unittest.TestCase):
    def test_background_fill_covers_extent(self) -> None:
        fill = BackgroundFill(color=(1, 2, 3, 255))
        plot = Plot().add_component(fill)
        self.assertEqual(plot.background_components, (fill,))
        self.assertEqual(fill.render(plot, Extent(50.0, 20.0)), FilledRect(50.0, 20.0, (1, 2, 3, 255)))

    def test_border_frames_data_area(self) -> None:
        plot = (
            Plot()
            .add_component(FixedComponent(Position.LEFT, width=20.0))
            .add_component(FixedComponent(Position.TOP, height=10.0))
            .add_component(Border())
        )
        x, y, leaf = placed_leaves(plot.overlay_components[0].render(plot, Extent(120.0, 90.0)))[0]
        self.assertIsInstance(leaf, StrokedRect)
        self.assertEqual((x, y), (20.0, 10.0))
        self.assertEqual(leaf.extent, Extent(100.0, 80.0))

    def test_padding_renders_empty_space(self) -> None:
        padded = Plot().pad_top(7.0)
        component = padded.top_components[0]
        self.assertEqual(component.size(padded), Extent(0.0, 7.0))
        self.assertEqual(component.render(padded, Extent(30.0, 7.0)), EmptyDrawable(Extent(30.0, 7.0)))


class PointRendererTests(unittest.TestCase):
    def test_points_map_through_transformers(self) -> None:
        renderer = PointRenderer.from_xy([0.0, 10.0, 20.0], [0.0, 10.0, 5.0], radius=2.0)
        plot = Plot(renderer=renderer).set_xbounds(0.0, 10.0).set_ybounds(0.0, 10.0)
        out = renderer.render(plot, Extent(100.0, 100.0))
        leaves = placed_leaves(out)
        self.assertEqual(len(leaves), 2)
        self.assertEqual([(x, y) for x, y, _ in leaves], [(-2.0, 98.0), (98.0, -2.0)])
        self.assertTrue(all(isinstance(leaf, Disc) for _, _, leaf in leaves))

    def test_no_visible_points_renders_empty(self) -> None:
        renderer = PointRenderer(points=(Point(50.0, 50.0),))
        out = renderer.render(Plot(), Extent(10.0, 10.0))
        self.assertEqual(out, EmptyDrawable(Extent(10.0, 10.0)))

    def test_length_mismatch_rejected(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            PointRenderer.from_xy([1.0, 2.0], [1.0])


class SettingsTests(unittest.TestCase):
    def test_resolve_extent(self) -> None:
        self.assertEqual(resolve_extent(), DEFAULT_EXTENT)
        self.assertEqual(resolve_extent(width=800), Extent(800.0, 600.0))
        self.assertEqual(resolve_extent(height=300, aspect_ratio=2.0), Extent(600.0, 300.0))
        self.assertEqual(resolve_extent(640, 480), Extent(640.0, 480.0))
        with self.assertRaises(InvalidArgumentError):
            resolve_extent(width=-1)
        with self.assertRaises(ValueError):
            resolve_extent(aspect_ratio=0.0)


if __name__ == "__main__":
    unittest.main()
