# Qt Painter Device - software drawing device on a QImage
#
# Implements the DrawingDevice contract with QPainter. Fans and
# strips are split into triangles and filled with the current
# color; line strips are stroked with a cosmetic pen. Vertices are
# mapped from picture space with ViewTransform.picture_to_canvas.

from PySide6.QtCore import Qt, QPointF
from PySide6.QtGui import QBrush, QColor, QImage, QPainter, QPen, QPolygonF

from .. import ViewTransform
from ..Device import DrawingDevice
from ..errors import SetupError


def _qcolor(rgba):
    """QColor from an (r, g, b, a) tuple, channels clamped to [0, 1]."""
    return QColor.fromRgbF(*(min(1.0, max(0.0, float(c))) for c in rgba))


class QPainterDevice(DrawingDevice):
    """Drawing device rendering into a QImage.

    The painter is opened by clear() and closed by present(), which
    then hands the finished image to on_present, if given.
    """

    def __init__(self, width, height, on_present=None):
        """
        Args:
            width, height: Image size in pixels.
            on_present: Optional callable receiving the QImage of
                        each presented frame.
        """
        self.on_present = on_present
        self._clear_color = QColor(0, 0, 0)
        self._color = (1.0, 1.0, 1.0, 1.0)
        self._vertices = []
        self._painter = None
        self.image = None
        self.resize(width, height)

    @property
    def width(self):
        return self.image.width()

    @property
    def height(self):
        return self.image.height()

    def resize(self, width, height):
        """Replace the target image. Any frame in progress is dropped."""
        self._end()
        image = QImage(int(width), int(height),
                       QImage.Format.Format_ARGB32_Premultiplied)
        if image.isNull():
            raise SetupError(f"cannot create a {width}x{height} image")
        image.fill(self._clear_color)
        self.image = image

    # ------------------------------------------------------------------
    # Painter lifecycle
    # ------------------------------------------------------------------
    def _begin(self):
        if self._painter is None:
            painter = QPainter()
            if not painter.begin(self.image):
                raise SetupError("QPainter failed to open the target image")
            self._painter = painter
        return self._painter

    def _end(self):
        if self._painter is not None:
            self._painter.end()
            self._painter = None

    # ------------------------------------------------------------------
    # DrawingDevice
    # ------------------------------------------------------------------
    def set_clear_color(self, r, g, b, a):
        self._clear_color = _qcolor((r, g, b, a))

    def clear(self):
        self._end()
        self.image.fill(self._clear_color)
        self._begin()

    def upload_vertices(self, points):
        self._vertices = ViewTransform.picture_to_canvas(
            points, self.width, self.height)

    def draw_triangle_fan(self, count):
        v = self._vertices[:count]
        self._fill([(v[0], v[i], v[i + 1]) for i in range(1, len(v) - 1)])

    def draw_triangle_strip(self, count):
        v = self._vertices[:count]
        self._fill([(v[i], v[i + 1], v[i + 2]) for i in range(len(v) - 2)])

    def draw_line_strip(self, count):
        v = self._vertices[:count]
        if len(v) < 2:
            return
        painter = self._begin()
        pen = QPen(_qcolor(self._color))
        pen.setWidthF(1.0)
        pen.setCosmetic(True)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        painter.setPen(pen)
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawPolyline(QPolygonF([QPointF(x, y) for x, y in v]))

    def _fill(self, triangles):
        if not triangles:
            return
        painter = self._begin()
        # No antialiasing: shared triangle edges must not show seams
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, False)
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QBrush(_qcolor(self._color)))
        for tri in triangles:
            painter.drawPolygon(QPolygonF([QPointF(x, y) for x, y in tri]))

    def set_uniform_color(self, r, g, b, a):
        self._color = (r, g, b, a)

    def get_uniform_color(self):
        return self._color

    def present(self):
        self._end()
        if self.on_present is not None:
            self.on_present(self.image)
