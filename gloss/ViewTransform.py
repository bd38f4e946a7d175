# ViewTransform - Toolkit-independent coordinate transformation math
#
# 2D affine transforms for the Translate, Rotate and Scale picture
# nodes, and the mapping from picture space (origin at the center,
# y up) to canvas pixels (origin top-left, y down).
#
# A transform is a 6-tuple (a, b, c, d, e, f) mapping
#     x' = a*x + c*y + e
#     y' = b*x + d*y + f

import math

from .Picture import Point

IDENTITY = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)

# Coordinate clipping boundary for canvas output
MAXDIST = 10000


def translation(dx, dy):
    return (1.0, 0.0, 0.0, 1.0, float(dx), float(dy))


def rotation(degrees):
    """Clockwise rotation by the given angle in degrees."""
    rad = math.radians(degrees)
    c = math.cos(rad)
    s = math.sin(rad)
    return (c, -s, s, c, 0.0, 0.0)


def scaling(sx, sy):
    return (float(sx), 0.0, 0.0, float(sy), 0.0, 0.0)


def compose(outer, inner):
    """Transform applying inner first and then outer."""
    a1, b1, c1, d1, e1, f1 = outer
    a2, b2, c2, d2, e2, f2 = inner
    return (
        a1 * a2 + c1 * b2,
        b1 * a2 + d1 * b2,
        a1 * c2 + c1 * d2,
        b1 * c2 + d1 * d2,
        a1 * e2 + c1 * f2 + e1,
        b1 * e2 + d1 * f2 + f1,
    )


def apply(m, pts):
    """Transform a sequence of Points.

    The identity transform returns the points as given.
    """
    if m == IDENTITY:
        return tuple(pts)
    a, b, c, d, e, f = m
    return tuple(Point(a * p.x + c * p.y + e, b * p.x + d * p.y + f)
                 for p in pts)


def picture_to_canvas(pts, width, height):
    """Map picture points to canvas pixel coordinates.

    The picture origin sits at the canvas center and the Y-axis
    is flipped (negated) for screen coordinates.

    Returns:
        List of (cx, cy) tuples, clamped to +/-MAXDIST.
    """
    hw = width / 2.0
    hh = height / 2.0
    return _clamp_coords([(hw + p.x, hh - p.y) for p in pts])


def _clamp_coords(coords):
    return [
        (max(-MAXDIST, min(MAXDIST, x)), max(-MAXDIST, min(MAXDIST, y)))
        for x, y in coords
    ]
