# Qt Event Translation
#
# Maps Qt input events onto the toolkit-independent Event set.
# translate_event() is total: every Qt event maps to exactly one
# Event.
#
# The default (coarse) mapping only tells the Escape key apart:
# Escape -> KeyPress, everything else -> MousePress. Setting
# [Events] detailed = 1 gives key press, mouse press, mouse move and
# resize their own Events; anything else still falls back to
# MousePress.

from PySide6.QtCore import QEvent, Qt

from .. import utils_core as Utils
from ..Events import Event

_DETAILED = {
    QEvent.Type.KeyPress: Event.KeyPress,
    QEvent.Type.MouseButtonPress: Event.MousePress,
    QEvent.Type.MouseButtonDblClick: Event.MousePress,
    QEvent.Type.MouseMove: Event.MouseMotion,
    QEvent.Type.Resize: Event.WindowResize,
}


def is_escape_press(event):
    return (event.type() == QEvent.Type.KeyPress
            and int(event.key()) == Qt.Key.Key_Escape.value)


def translate_event(event, detailed=None):
    """Translate a Qt event into an Event.

    Args:
        event: Any QEvent.
        detailed: Use the detailed mapping. None reads
                  [Events] detailed from the configuration.

    In detailed mode, events with no Event of their own (key release,
    mouse release, focus changes and so on) still fall back to
    MousePress, as every event does in the coarse mapping.

    Returns:
        An Event member.
    """
    if detailed is None:
        detailed = Utils.getBool("Events", "detailed", False)

    if not detailed:
        return Event.KeyPress if is_escape_press(event) else Event.MousePress
    return _DETAILED.get(event.type(), Event.MousePress)
