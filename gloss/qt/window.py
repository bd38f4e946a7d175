# Qt Window - frame loop host for Gloss pictures
#
# Session owns the QApplication and at most one GlossWindow.
# GlossWindow renders pictures through a SceneRenderer backed by a
# QPainterDevice, shows the presented image, and queues translated
# input events until the frame loop polls them.

import logging
import sys

from PySide6.QtCore import QTimer
from PySide6.QtGui import QPainter
from PySide6.QtWidgets import QApplication, QWidget

from .. import utils_core as Utils
from ..Events import EventQueue
from ..SceneRenderer import SceneRenderer
from ..errors import WindowAlreadyOpenError
from .events import translate_event
from .painter_device import QPainterDevice

FRAME_INTERVAL_MS = 16  # ~60 frames per second


class GlossWindow(QWidget):
    """Top-level widget drawing one picture per frame.

    Use Session.open_window() rather than creating it directly.
    """

    def __init__(self, width=None, height=None, title=None,
                 background=None, parent=None):
        """
        Args:
            width, height: Client area size in pixels.
            title: Window title.
            background: Color the window is cleared to every frame.

        Arguments left as None are read from the [Window] section.
        """
        super().__init__(parent)
        if width is None:
            width = Utils.getInt("Window", "width", 400)
        if height is None:
            height = Utils.getInt("Window", "height", 400)
        if title is None:
            title = Utils.getStr("Window", "title", "Gloss")

        self.events = EventQueue()
        self.device = QPainterDevice(width, height,
                                     on_present=self._on_present)
        self.renderer = SceneRenderer(self.device, background=background)
        self._frame = None
        self._should_close = False

        self.setWindowTitle(title)
        self.resize(width, height)

    # ------------------------------------------------------------------
    # Frame API
    # ------------------------------------------------------------------
    def draw(self, picture):
        """Render picture as the next frame.

        Returns:
            The renderer's FrameReport.
        """
        return self.renderer.draw(picture)

    def poll_events(self, handler):
        """Process pending Qt events, then pass each translated
        Event to handler in arrival order.

        Returns:
            Number of events handled.
        """
        QApplication.processEvents()
        return self.events.dispatch(handler)

    def done(self):
        """True once the window was asked to close."""
        return self._should_close

    def request_close(self):
        self._should_close = True
        self.close()

    def _on_present(self, image):
        self._frame = image.copy()
        self.update()

    # ------------------------------------------------------------------
    # Qt overrides
    # ------------------------------------------------------------------
    def paintEvent(self, event):
        if self._frame is None:
            return
        painter = QPainter(self)
        painter.drawImage(0, 0, self._frame)
        painter.end()

    def closeEvent(self, event):
        self._should_close = True
        super().closeEvent(event)

    def resizeEvent(self, event):
        size = event.size()
        if size.width() > 0 and size.height() > 0:
            self.device.resize(size.width(), size.height())
        self.events.push(translate_event(event))
        super().resizeEvent(event)

    def keyPressEvent(self, event):
        self.events.push(translate_event(event))
        event.accept()

    def keyReleaseEvent(self, event):
        self.events.push(translate_event(event))
        event.accept()

    def mousePressEvent(self, event):
        self.events.push(translate_event(event))
        event.accept()

    def mouseMoveEvent(self, event):
        self.events.push(translate_event(event))
        event.accept()


class Session:
    """One application run: the QApplication and its single window.

    Opening a second window in the same session raises
    WindowAlreadyOpenError.
    """

    def __init__(self, argv=None):
        self.app = QApplication.instance() or QApplication(
            argv if argv is not None else sys.argv)
        self.app.setApplicationName(Utils.__prg__)
        self.app.setApplicationVersion(Utils.__version__)
        self.window = None
        self._timer = None

    def open_window(self, width=None, height=None, title=None,
                    background=None):
        if self.window is not None:
            raise WindowAlreadyOpenError("this session already has a window")
        self.window = GlossWindow(width, height, title, background)
        self.window.show()
        return self.window

    def run(self, picture, update=None):
        """Run the frame loop until the window closes.

        Every frame first hands pending events to update, then draws
        the current picture.

        Args:
            picture: The initial Picture.
            update: Optional callable (picture, event) -> picture
                    returning the picture for the following frames.

        Returns:
            The QApplication exit code.
        """
        if self.window is None:
            self.open_window()
        window = self.window
        state = {"picture": picture}

        def _handle(event):
            if update is not None:
                state["picture"] = update(state["picture"], event)

        def _frame():
            window.events.dispatch(_handle)
            if window.done():
                self._timer.stop()
                self.app.quit()
                return
            window.draw(state["picture"])

        self._timer = QTimer()
        self._timer.setInterval(FRAME_INTERVAL_MS)
        self._timer.timeout.connect(_frame)
        self._timer.start()
        logging.debug("Frame loop started")
        return self.app.exec()
