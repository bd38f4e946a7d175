# Events - Toolkit-independent input events
#
# Host toolkits translate their native events into the small Event
# set below (see gloss.qt.events). Translated events are queued as
# they arrive and handed to the caller's handler once per frame, in
# arrival order.

import threading
from collections import deque
from enum import Enum


class Event(Enum):
    KeyPress = "key_press"
    MousePress = "mouse_press"
    MouseMotion = "mouse_motion"
    WindowResize = "window_resize"


class EventQueue:
    """First-in first-out queue of translated events.

    The host pushes events as its toolkit delivers them; the frame
    loop drains them with dispatch(). Handlers are called
    synchronously on the draining thread.
    """

    def __init__(self):
        self._pending = deque()
        self._lock = threading.Lock()

    def push(self, event):
        """Queue an event.

        Args:
            event: An Event member.
        """
        if not isinstance(event, Event):
            raise TypeError(f"not an Event: {event!r}")
        with self._lock:
            self._pending.append(event)

    def dispatch(self, handler):
        """Call handler once for each pending event, oldest first.

        Events pushed by the handler itself are kept for the next
        dispatch.

        Returns:
            Number of events dispatched.
        """
        with self._lock:
            events = list(self._pending)
            self._pending.clear()
        for event in events:
            handler(event)
        return len(events)

    def clear(self):
        """Drop all pending events."""
        with self._lock:
            self._pending.clear()

    def __len__(self):
        with self._lock:
            return len(self._pending)
