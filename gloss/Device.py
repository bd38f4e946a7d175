# Device - Drawing device contract
#
# The SceneRenderer only talks to a DrawingDevice: upload vertices,
# issue a draw call over them, and keep a current color. How the
# calls are backed (OpenGL, QPainter, a recorder in tests) is up to
# the device.
#
# RecordingDevice is a headless device that keeps every draw call
# as a DrawCommand, in order. It is used by the tests and is handy
# for inspecting what a picture turns into.

from abc import ABC, abstractmethod

TRIANGLE_FAN = "triangle_fan"
TRIANGLE_STRIP = "triangle_strip"
LINE_STRIP = "line_strip"


class DrawingDevice(ABC):
    """Capabilities the renderer needs from a graphics backend.

    upload_vertices() followed immediately by a draw call must
    render exactly the uploaded vertices.
    """

    @abstractmethod
    def set_clear_color(self, r, g, b, a):
        pass

    @abstractmethod
    def clear(self):
        pass

    @abstractmethod
    def upload_vertices(self, points):
        pass

    @abstractmethod
    def draw_triangle_fan(self, count):
        pass

    @abstractmethod
    def draw_triangle_strip(self, count):
        pass

    @abstractmethod
    def draw_line_strip(self, count):
        pass

    @abstractmethod
    def set_uniform_color(self, r, g, b, a):
        pass

    @abstractmethod
    def get_uniform_color(self):
        pass

    @abstractmethod
    def present(self):
        pass


class DrawCommand:
    """One recorded draw call."""

    __slots__ = ("kind", "vertices", "color")

    def __init__(self, kind, vertices, color):
        """
        Args:
            kind: TRIANGLE_FAN, TRIANGLE_STRIP or LINE_STRIP.
            vertices: Tuple of Points drawn by the call.
            color: (r, g, b, a) current when the call was made.
        """
        self.kind = kind
        self.vertices = vertices
        self.color = color

    def __repr__(self):
        return (f"DrawCommand({self.kind}, {len(self.vertices)} vertices, "
                f"color={self.color})")


class RecordingDevice(DrawingDevice):
    """Drawing device that records draw calls instead of rendering.

    The list of commands is reset by clear(), so after a full
    SceneRenderer.draw() it holds exactly the last frame.
    """

    def __init__(self, color=(1.0, 1.0, 1.0, 1.0)):
        self.clear_color = (0.0, 0.0, 0.0, 1.0)
        self.color = tuple(color)
        self.commands = []
        self.color_changes = []
        self.frames = 0
        self._vertices = ()

    def set_clear_color(self, r, g, b, a):
        self.clear_color = (r, g, b, a)

    def clear(self):
        self.commands = []
        self.color_changes = []

    def upload_vertices(self, points):
        self._vertices = tuple(points)

    def _draw(self, kind, count):
        self.commands.append(
            DrawCommand(kind, self._vertices[:count], self.color))

    def draw_triangle_fan(self, count):
        self._draw(TRIANGLE_FAN, count)

    def draw_triangle_strip(self, count):
        self._draw(TRIANGLE_STRIP, count)

    def draw_line_strip(self, count):
        self._draw(LINE_STRIP, count)

    def set_uniform_color(self, r, g, b, a):
        self.color = (r, g, b, a)
        self.color_changes.append(self.color)

    def get_uniform_color(self):
        return self.color

    def present(self):
        self.frames += 1
