# Qt Application Entry Point
#
# Opens a window and runs the Gloss demo picture.
#
# Usage:
#     python -m gloss.qt.app
#   or, once installed:
#     gloss-demo

import logging
import sys

from .. import utils_core as Utils
from ..Events import Event
from ..Picture import (
    Circle, Colored, Line, Pictures, RGB, White, point,
)
from ..errors import SetupError
from .window import Session


def demo_picture():
    """Two nested discs and a white diagonal."""
    return Pictures([
        Colored(RGB(0.0, 0.6, 0.8), Circle(200.0)),
        Colored(RGB(0.0, 0.7, 0.9), Circle(100.0)),
        Colored(White, Line([point(-100.0, -100.0), point(100.0, 100.0)])),
    ])


def main():
    """Load the configuration, open the window and run the frame loop."""
    Utils.loadConfiguration()
    logging.basicConfig(
        level=Utils.getStr("Log", "level", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.info("Starting %s", Utils.__title__)

    try:
        session = Session()
        window = session.open_window()
    except SetupError as e:
        logging.critical("Cannot start %s: %s", Utils.__prg__, e)
        sys.exit(1)

    def _update(picture, event):
        # Escape closes the demo; the picture itself is static
        if event is Event.KeyPress:
            window.request_close()
        return picture

    sys.exit(session.run(demo_picture(), _update))


if __name__ == "__main__":
    main()
