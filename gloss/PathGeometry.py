# PathGeometry - Toolkit-independent geometry generation
#
# Pure functions turning picture shapes into vertex lists: circle
# and arc tessellation for triangle fans, and thick-line extrusion
# with mitered joins for triangle strips. All functions work on
# Points and floats and keep no state, so the same input always
# yields the same vertices in the same order.

import math

from .Picture import Point
from .errors import DegenerateGeometryError

# Cross products smaller than this are treated as parallel tangents
EPSILON = 1e-6

# Longest miter allowed, as a multiple of the half thickness
MITER_LIMIT = 10.0

ZERO = Point(0.0, 0.0)


# ----------------------------------------------------------------------
# Vector helpers
# ----------------------------------------------------------------------
def add(a, b):
    return Point(a.x + b.x, a.y + b.y)


def sub(a, b):
    return Point(a.x - b.x, a.y - b.y)


def mul(v, scalar):
    return Point(v.x * scalar, v.y * scalar)


def cross(a, b):
    return a.x * b.y - a.y * b.x


def length(v):
    return math.hypot(v.x, v.y)


def normalize(v):
    """Scale v to unit length. The zero vector is returned unchanged.

    Components are divided by their hypot, so tiny and huge vectors
    still come out finite and of unit length.
    """
    if v.x == 0.0 and v.y == 0.0:
        return v
    size = math.hypot(v.x, v.y)
    return Point(v.x / size, v.y / size)


# ----------------------------------------------------------------------
# Normals and miters
# ----------------------------------------------------------------------
def get_normal(prev, cur):
    """Left-hand perpendicular of the unit tangent prev - cur."""
    tangent = normalize(sub(prev, cur))
    return Point(-tangent.y, tangent.x)


def get_miter(prev, cur, nxt, miter_limit=MITER_LIMIT):
    """Miter vector at cur, joining segments prev-cur and cur-nxt.

    The bisector of the two unit tangents is divided by their cross
    product, giving 1/sin(theta/2) times a unit normal: a right angle
    yields length sqrt(2).

    Parallel or anti-parallel tangents (and zero length segments)
    have no miter; the segment normal is used instead, which keeps
    straight runs at full width and gives a butt join on reversals.
    Miters longer than miter_limit are shortened to miter_limit.
    """
    t1 = normalize(sub(prev, cur))
    t2 = normalize(sub(nxt, cur))
    c = cross(t1, t2)
    if abs(c) < EPSILON:
        normal = get_normal(prev, cur)
        if normal == ZERO:
            normal = get_normal(cur, nxt)
        return normal

    miter = mul(add(t1, t2), 1.0 / c)
    if miter_limit is not None:
        size = length(miter)
        if size > miter_limit:
            miter = mul(miter, miter_limit / size)
    return miter


def _is_closed(line):
    first, last = line[0], line[-1]
    return abs(first.x - last.x) < EPSILON and abs(first.y - last.y) < EPSILON


def extrude_thickline(line, thickness, closed=False, miter_limit=MITER_LIMIT):
    """Extrude a path into the two rails of a thick stroke.

    Args:
        line: Sequence of at least 2 Points.
        thickness: Full stroke width.
        closed: When True and the path ends where it starts, the
                end vertices are mitered against each other so a
                closed ring has no seam.
        miter_limit: Passed to get_miter for interior vertices.

    Returns:
        Tuple of 2 * len(line) Points: for each vertex the point
        offset to one side followed by the point offset to the
        other, ready to draw as a triangle strip.

    Raises:
        DegenerateGeometryError: fewer than 2 points.
    """
    n = len(line)
    if n < 2:
        raise DegenerateGeometryError(
            f"a thick line needs at least 2 points, got {n}")

    wrap = closed and n > 2 and _is_closed(line)
    half = thickness / 2.0
    pts = []

    for i, cur in enumerate(line):
        if wrap and (i == 0 or i == n - 1):
            normal = get_miter(line[n - 2], cur, line[1], miter_limit)
        elif i == 0:
            normal = get_normal(cur, line[1])
        elif i == n - 1:
            normal = get_normal(line[i - 1], cur)
        else:
            normal = get_miter(line[i - 1], cur, line[i + 1], miter_limit)

        extrusion = mul(normal, half)
        pts.append(add(cur, extrusion))
        pts.append(sub(cur, extrusion))

    return tuple(pts)


# ----------------------------------------------------------------------
# Circles and arcs
# ----------------------------------------------------------------------
def circle_outline(radius, n_points):
    """The n_points + 1 rim points of a circle, counter-clockwise from 0.

    The last point is the first one again, so the outline is closed
    exactly.
    """
    if n_points < 3:
        raise DegenerateGeometryError(
            f"a circle needs at least 3 points, got {n_points}")
    step = 2.0 * math.pi / n_points
    rim = []
    for i in range(n_points + 1):
        angle = step * (i % n_points)
        rim.append(Point(radius * math.cos(angle), radius * math.sin(angle)))
    return tuple(rim)


def circle_to_polygon(radius, n_points):
    """Triangle fan for a filled circle: the center and then the rim.

    Returns n_points + 2 Points.
    """
    return (ZERO,) + circle_outline(radius, n_points)


def arc_sweep(start, end):
    """Counter-clockwise sweep in degrees from start to end.

    Equal angles sweep nothing; otherwise a multiple of 360 is
    a full turn.
    """
    if start == end:
        return 0.0
    sweep = (end - start) % 360.0
    if sweep == 0.0:
        sweep = 360.0
    return sweep


def arc_outline(start, end, radius, n_points):
    """Rim points of an arc, counter-clockwise from start to end degrees.

    n_points is the resolution of a full circle; an arc uses the
    share of it matching its sweep, at least one segment.
    An empty sweep yields no points.
    """
    if n_points < 3:
        raise DegenerateGeometryError(
            f"an arc needs a resolution of at least 3 points, got {n_points}")
    sweep = arc_sweep(start, end)
    if sweep == 0.0:
        return ()
    segments = max(1, math.ceil(n_points * sweep / 360.0))
    a0 = math.radians(start)
    step = math.radians(sweep) / segments
    rim = []
    for i in range(segments + 1):
        angle = a0 + step * i
        rim.append(Point(radius * math.cos(angle), radius * math.sin(angle)))
    return tuple(rim)


def arc_to_polygon(start, end, radius, n_points):
    """Triangle fan for a filled sector: the center and then the rim."""
    return (ZERO,) + arc_outline(start, end, radius, n_points)
