# errors - Exception taxonomy for Gloss
#
# Each error also derives from the builtin it specialises so callers
# can catch either the Gloss type or the generic one.


class GlossError(Exception):
    """Base class for all Gloss errors."""


class DegenerateGeometryError(GlossError, ValueError):
    """Geometry input that cannot produce a well defined shape."""


class UnsupportedPictureError(GlossError, NotImplementedError):
    """A recognised Picture variant the renderer cannot draw yet."""

    def __init__(self, node):
        super().__init__(f"{type(node).__name__} pictures are not supported")
        self.node = node


class WindowAlreadyOpenError(GlossError, RuntimeError):
    """Raised when a session is asked for a second window."""


class SetupError(GlossError, RuntimeError):
    """Fatal failure while creating the window or drawing device."""
