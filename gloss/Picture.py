# Picture - Immutable scene description
#
# A Picture is a tree of small immutable values. Client code builds
# one per frame and hands it to a SceneRenderer, which walks it and
# issues draw calls. Nothing here knows how pictures are drawn.
#
# Every variant is a frozen dataclass. Children are held by value;
# point lists and Pictures children are stored as tuples so a tree
# cannot be changed after construction.

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Tuple


class Point(NamedTuple):
    """A point (or vector) in 2D picture space."""

    x: float
    y: float


def point(x, y):
    return Point(float(x), float(y))


def points(*coords):
    """Build a tuple of Points from (x, y) pairs."""
    return tuple(point(x, y) for x, y in coords)


def _as_points(seq):
    return tuple(p if isinstance(p, Point) else point(*p) for p in seq)


# ----------------------------------------------------------------------
# Colors
# ----------------------------------------------------------------------
class Preset(Enum):
    """Named colors. The value is the (r, g, b, a) tuple."""

    Black = (0.0, 0.0, 0.0, 1.0)
    Blue = (0.0, 0.0, 1.0, 1.0)
    Green = (0.0, 1.0, 0.0, 1.0)
    Red = (1.0, 0.0, 0.0, 1.0)
    White = (1.0, 1.0, 1.0, 1.0)


Black = Preset.Black
Blue = Preset.Blue
Green = Preset.Green
Red = Preset.Red
White = Preset.White


@dataclass(frozen=True, slots=True)
class RGB:
    r: float
    g: float
    b: float


@dataclass(frozen=True, slots=True)
class RGBA:
    r: float
    g: float
    b: float
    a: float


def color_to_rgba(color):
    """Convert any color to an (r, g, b, a) tuple.

    Channels are passed through unchanged, even outside [0, 1].
    The three channel form gets an alpha of 1.0.
    """
    if isinstance(color, Preset):
        return color.value
    if isinstance(color, RGBA):
        return (color.r, color.g, color.b, color.a)
    if isinstance(color, RGB):
        return (color.r, color.g, color.b, 1.0)
    raise TypeError(f"not a color: {color!r}")


def color_from_string(text):
    """Parse a color from a config value.

    Accepts a preset name ("white", "Red") or three or four
    comma separated channels ("0.3, 0, 0.3" or "1,0,0,0.5").
    """
    text = text.strip()
    for preset in Preset:
        if preset.name.lower() == text.lower():
            return preset
    try:
        channels = [float(c) for c in text.split(",")]
    except ValueError:
        raise ValueError(f"invalid color {text!r}") from None
    if len(channels) == 3:
        return RGB(*channels)
    if len(channels) == 4:
        return RGBA(*channels)
    raise ValueError(f"invalid color {text!r}")


# ----------------------------------------------------------------------
# Pictures
# ----------------------------------------------------------------------
@dataclass(frozen=True, slots=True)
class Blank:
    """A blank picture, with nothing in it."""


@dataclass(frozen=True, slots=True)
class Polygon:
    """A convex polygon filled with the current color.

    Drawn as a triangle fan pivoting on the first point, so
    concave outlines do not render correctly.
    """

    points: Tuple[Point, ...]

    def __post_init__(self):
        object.__setattr__(self, "points", _as_points(self.points))


@dataclass(frozen=True, slots=True)
class Line:
    """A line along an arbitrary path."""

    points: Tuple[Point, ...]

    def __post_init__(self):
        object.__setattr__(self, "points", _as_points(self.points))


@dataclass(frozen=True, slots=True)
class Circle:
    radius: float


@dataclass(frozen=True, slots=True)
class ThickCircle:
    """A circle outline. A thickness of 0 is the same as Circle."""

    thickness: float
    radius: float


@dataclass(frozen=True, slots=True)
class Arc:
    """A filled sector drawn counter-clockwise between two angles in degrees."""

    start: float
    end: float
    radius: float


@dataclass(frozen=True, slots=True)
class ThickArc:
    """A stroked arc. A thickness of 0 is the same as Arc."""

    thickness: float
    start: float
    end: float
    radius: float


@dataclass(frozen=True, slots=True)
class Text:
    """Text drawn with a vector font."""

    text: str


@dataclass(frozen=True, slots=True)
class Bitmap:
    """A width x height image of 32-bit RGBA pixels.

    cache tells the renderer whether it may keep device resources
    between frames (True for images loaded from a file) or must
    upload the data every frame (False for generated images).
    """

    width: int
    height: int
    data: bytes
    cache: bool


@dataclass(frozen=True, slots=True)
class Colored:
    """A picture drawn with the given color."""

    color: object
    picture: object


@dataclass(frozen=True, slots=True)
class Translate:
    dx: float
    dy: float
    picture: object


@dataclass(frozen=True, slots=True)
class Rotate:
    """A picture rotated clockwise by the given angle in degrees."""

    degrees: float
    picture: object


@dataclass(frozen=True, slots=True)
class Scale:
    sx: float
    sy: float
    picture: object


@dataclass(frozen=True, slots=True)
class Pictures:
    """Several pictures, drawn in order."""

    pictures: tuple

    def __post_init__(self):
        object.__setattr__(self, "pictures", tuple(self.pictures))


PICTURE_TYPES = (
    Blank, Polygon, Line, Circle, ThickCircle, Arc, ThickArc,
    Text, Bitmap, Colored, Translate, Rotate, Scale, Pictures,
)


def is_picture(value):
    return isinstance(value, PICTURE_TYPES)
