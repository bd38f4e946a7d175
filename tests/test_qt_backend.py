"""Tests for the PySide6 backend: painter device, window and session."""

import os
import sys
import unittest

# Offscreen rendering, must be set before QApplication import
os.environ["QT_QPA_PLATFORM"] = "offscreen"

_root = os.path.join(os.path.dirname(__file__), "..")
if _root not in sys.path:
    sys.path.insert(0, _root)

from PySide6.QtCore import QEvent, Qt  # noqa: E402
from PySide6.QtGui import QKeyEvent  # noqa: E402
from PySide6.QtWidgets import QApplication  # noqa: E402

# Single QApplication for all tests
app = QApplication.instance() or QApplication(sys.argv)

from gloss.Events import Event  # noqa: E402
from gloss.Picture import (  # noqa: E402
    Black, Blue, Red, White, RGBA, points,
    Circle, Colored, Line, Pictures, Polygon, ThickCircle, Translate,
)
from gloss.SceneRenderer import SceneRenderer  # noqa: E402
from gloss.errors import SetupError, WindowAlreadyOpenError  # noqa: E402
from gloss.qt.app import demo_picture  # noqa: E402
from gloss.qt.painter_device import QPainterDevice  # noqa: E402
from gloss.qt.window import Session  # noqa: E402


def rgb(image, x, y):
    c = image.pixelColor(x, y)
    return (c.red(), c.green(), c.blue())


class TestQPainterDevice(unittest.TestCase):

    def setUp(self):
        self.presented = []
        self.device = QPainterDevice(100, 100,
                                     on_present=self.presented.append)
        self.renderer = SceneRenderer(
            self.device, background=Black, foreground=White,
            circle_points=50, miter_limit=10.0, strict=False)

    def test_clear_to_background(self):
        self.renderer.draw(Pictures([]))
        self.assertEqual(rgb(self.device.image, 0, 0), (0, 0, 0))
        self.assertEqual(rgb(self.device.image, 99, 99), (0, 0, 0))

    def test_present_hands_over_image(self):
        self.renderer.draw(Pictures([]))
        self.assertEqual(len(self.presented), 1)
        self.assertIs(self.presented[0], self.device.image)

    def test_filled_circle(self):
        self.renderer.draw(Colored(Red, Circle(20.0)))
        image = self.device.image
        self.assertEqual(rgb(image, 50, 50), (255, 0, 0))
        self.assertEqual(rgb(image, 50 + 10, 50 - 10), (255, 0, 0))
        self.assertEqual(rgb(image, 50 + 25, 50), (0, 0, 0))

    def test_polygon_y_points_up(self):
        square = points((10, 10), (40, 10), (40, 40), (10, 40))
        self.renderer.draw(Polygon(square))
        image = self.device.image
        self.assertEqual(rgb(image, 75, 25), (255, 255, 255))
        self.assertEqual(rgb(image, 75, 75), (0, 0, 0))

    def test_ring_leaves_center_empty(self):
        self.renderer.draw(Colored(Blue, ThickCircle(6.0, 30.0)))
        image = self.device.image
        self.assertEqual(rgb(image, 80, 50), (0, 0, 255))
        self.assertEqual(rgb(image, 20, 50), (0, 0, 255))
        self.assertEqual(rgb(image, 50, 50), (0, 0, 0))

    def test_line_strip_is_stroked(self):
        self.renderer.draw(Colored(Red, Line(points((-40, -0.5), (40, -0.5)))))
        self.assertGreater(self.device.image.pixelColor(50, 50).red(), 100)
        self.assertEqual(rgb(self.device.image, 50, 20), (0, 0, 0))

    def test_sibling_after_colored_uses_foreground(self):
        self.renderer.draw(Pictures([
            Colored(Red, Translate(-25, 0, Circle(10.0))),
            Translate(25, 0, Circle(10.0)),
        ]))
        image = self.device.image
        self.assertEqual(rgb(image, 25, 50), (255, 0, 0))
        self.assertEqual(rgb(image, 75, 50), (255, 255, 255))

    def test_out_of_range_channels_are_clamped(self):
        self.renderer.draw(Colored(RGBA(2.0, -1.0, 0.0, 1.0), Circle(10.0)))
        self.assertEqual(rgb(self.device.image, 50, 50), (255, 0, 0))

    def test_resize(self):
        self.device.resize(40, 30)
        self.renderer.draw(Circle(5.0))
        self.assertEqual(self.device.width, 40)
        self.assertEqual(self.device.height, 30)
        self.assertEqual(rgb(self.device.image, 20, 15), (255, 255, 255))

    def test_invalid_size(self):
        with self.assertRaises(SetupError):
            QPainterDevice(0, 0)


class TestWindow(unittest.TestCase):

    def setUp(self):
        self.session = Session()
        self.window = self.session.open_window(120, 80, "test", Black)

    def tearDown(self):
        self.window.close()
        self.window.deleteLater()

    def test_one_window_per_session(self):
        with self.assertRaises(WindowAlreadyOpenError):
            self.session.open_window()

    def test_draw_presents_frame(self):
        report = self.window.draw(demo_picture())
        self.assertTrue(report.complete)
        self.assertEqual(report.draw_calls, 3)
        self.assertIsNotNone(self.window._frame)

    def test_escape_reaches_handler(self):
        QApplication.sendEvent(
            self.window,
            QKeyEvent(QEvent.Type.KeyPress, Qt.Key.Key_Escape,
                      Qt.KeyboardModifier.NoModifier))
        seen = []
        self.window.poll_events(seen.append)
        self.assertEqual(seen.count(Event.KeyPress), 1)

    def test_close(self):
        self.assertFalse(self.window.done())
        self.window.request_close()
        self.assertTrue(self.window.done())


if __name__ == "__main__":
    unittest.main()
