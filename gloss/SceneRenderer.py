# SceneRenderer - Draws Picture trees onto a DrawingDevice
#
# The renderer walks a Picture recursively and turns each leaf into
# a vertex list (via PathGeometry) and one draw call. Colored and
# transform nodes push onto stacks owned by the renderer and pop on
# the way out, so their effect never leaks to siblings, even when
# drawing a subtree raises.
#
# Usage:
#   renderer = SceneRenderer(device)
#   report = renderer.draw(picture)   # once per frame

import logging

from . import PathGeometry
from . import ViewTransform
from . import utils_core as Utils
from .Device import TRIANGLE_FAN, TRIANGLE_STRIP, LINE_STRIP
from .Picture import (
    PICTURE_TYPES, Black, White, color_to_rgba,
    Blank, Polygon, Line, Circle, ThickCircle, Arc, ThickArc,
    Text, Bitmap, Colored, Translate, Rotate, Scale, Pictures,
)
from .errors import SetupError, UnsupportedPictureError


class FrameReport:
    """What happened while drawing one frame."""

    __slots__ = ("draw_calls", "unsupported")

    def __init__(self):
        self.draw_calls = 0
        self.unsupported = []

    @property
    def complete(self):
        """True when every node of the picture was drawn."""
        return not self.unsupported


class SceneRenderer:
    """Stateful visitor rendering pictures through a drawing device.

    Constructor arguments left as None are read from the [Window]
    and [Render] configuration sections.
    """

    def __init__(self, device, background=None, foreground=None,
                 circle_points=None, miter_limit=None, strict=None):
        """
        Args:
            device: A DrawingDevice.
            background: Color the target is cleared to every frame.
            foreground: Color used outside any Colored node.
            circle_points: Rim points of a tessellated full circle.
            miter_limit: Longest miter of thick outlines, as a multiple
                         of half the thickness. 0 or less disables it.
            strict: Raise UnsupportedPictureError for pictures that
                    cannot be drawn instead of skipping them.

        Raises:
            SetupError: circle_points is below 3.
        """
        self.device = device
        self.background = (background if background is not None
                           else Utils.getColor("Window", "background", Black))
        self.foreground = (foreground if foreground is not None
                           else Utils.getColor("Render", "foreground", White))
        self.circle_points = (circle_points if circle_points is not None
                              else Utils.getInt("Render", "circle_points", 50))
        if self.circle_points < 3:
            raise SetupError(
                f"circle_points must be at least 3, got {self.circle_points}")
        if miter_limit is None:
            miter_limit = Utils.getFloat(
                "Render", "miter_limit", PathGeometry.MITER_LIMIT)
        self.miter_limit = miter_limit if miter_limit > 0 else None
        self.strict = (strict if strict is not None
                       else Utils.getBool("Render", "strict", False))

        self._handlers = {
            Blank: self._render_blank,
            Polygon: self._render_polygon,
            Line: self._render_line,
            Circle: self._render_circle,
            ThickCircle: self._render_thick_circle,
            Arc: self._render_arc,
            ThickArc: self._render_thick_arc,
            Text: self._unsupported,
            Bitmap: self._unsupported,
            Colored: self._render_colored,
            Translate: self._render_translate,
            Rotate: self._render_rotate,
            Scale: self._render_scale,
            Pictures: self._render_pictures,
        }
        missing = [t.__name__ for t in PICTURE_TYPES
                   if t not in self._handlers]
        if missing:
            raise TypeError(
                f"no renderer for picture types: {', '.join(missing)}")

        self._colors = [color_to_rgba(self.foreground)]
        self._transforms = [ViewTransform.IDENTITY]
        self._report = FrameReport()
        self._warned = set()

    # ------------------------------------------------------------------
    # Frame
    # ------------------------------------------------------------------
    def draw(self, picture):
        """Render one full frame: clear, draw picture, present.

        Returns:
            FrameReport for the frame.
        """
        self.device.set_clear_color(*color_to_rgba(self.background))
        self.device.clear()

        self._colors = [color_to_rgba(self.foreground)]
        self._transforms = [ViewTransform.IDENTITY]
        self._report = FrameReport()
        self.device.set_uniform_color(*self._colors[-1])

        self.render(picture)
        self.device.present()
        return self._report

    @property
    def color(self):
        """The (r, g, b, a) color nodes are currently drawn with."""
        return self._colors[-1]

    @property
    def transform(self):
        return self._transforms[-1]

    def render(self, node):
        """Render a picture with the current color and transform."""
        try:
            handler = self._handlers[type(node)]
        except KeyError:
            raise TypeError(f"not a picture: {node!r}") from None
        handler(node)

    def _draw(self, kind, pts):
        vertices = ViewTransform.apply(self._transforms[-1], pts)
        self.device.upload_vertices(vertices)
        if kind == TRIANGLE_FAN:
            self.device.draw_triangle_fan(len(vertices))
        elif kind == TRIANGLE_STRIP:
            self.device.draw_triangle_strip(len(vertices))
        else:
            self.device.draw_line_strip(len(vertices))
        self._report.draw_calls += 1

    # ------------------------------------------------------------------
    # Leaves
    # ------------------------------------------------------------------
    def _render_blank(self, node):
        pass

    def _render_polygon(self, node):
        self._draw(TRIANGLE_FAN, node.points)

    def _render_line(self, node):
        self._draw(LINE_STRIP, node.points)

    def _render_circle(self, node):
        fan = PathGeometry.circle_to_polygon(node.radius, self.circle_points)
        self._draw(TRIANGLE_FAN, fan)

    def _render_thick_circle(self, node):
        if node.thickness == 0:
            self._render_circle(Circle(node.radius))
            return
        rim = PathGeometry.circle_outline(node.radius, self.circle_points)
        self._draw_outline(rim, node.thickness)

    def _render_arc(self, node):
        fan = PathGeometry.arc_to_polygon(
            node.start, node.end, node.radius, self.circle_points)
        if len(fan) < 3:
            return
        self._draw(TRIANGLE_FAN, fan)

    def _render_thick_arc(self, node):
        if node.thickness == 0:
            self._render_arc(Arc(node.start, node.end, node.radius))
            return
        rim = PathGeometry.arc_outline(
            node.start, node.end, node.radius, self.circle_points)
        if len(rim) < 2:
            return
        self._draw_outline(rim, node.thickness)

    def _draw_outline(self, rim, thickness):
        strip = PathGeometry.extrude_thickline(
            rim, thickness, closed=True, miter_limit=self.miter_limit)
        self._draw(TRIANGLE_STRIP, strip)

    def _unsupported(self, node):
        if self.strict:
            raise UnsupportedPictureError(node)
        name = type(node).__name__
        if name not in self._warned:
            self._warned.add(name)
            logging.warning("%s pictures are not supported yet, skipping",
                            name)
        else:
            logging.debug("Skipped unsupported %s picture", name)
        self._report.unsupported.append(node)

    # ------------------------------------------------------------------
    # Wrappers
    # ------------------------------------------------------------------
    def _render_colored(self, node):
        rgba = color_to_rgba(node.color)
        self._colors.append(rgba)
        self.device.set_uniform_color(*rgba)
        try:
            self.render(node.picture)
        finally:
            self._colors.pop()
            self.device.set_uniform_color(*self._colors[-1])

    def _with_transform(self, local, child):
        self._transforms.append(
            ViewTransform.compose(self._transforms[-1], local))
        try:
            self.render(child)
        finally:
            self._transforms.pop()

    def _render_translate(self, node):
        self._with_transform(
            ViewTransform.translation(node.dx, node.dy), node.picture)

    def _render_rotate(self, node):
        self._with_transform(
            ViewTransform.rotation(node.degrees), node.picture)

    def _render_scale(self, node):
        self._with_transform(
            ViewTransform.scaling(node.sx, node.sy), node.picture)

    def _render_pictures(self, node):
        for child in node.pictures:
            self.render(child)
