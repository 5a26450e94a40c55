#!/usr/bin/env python3

import logging
import sys

from python_qt_binding.QtWidgets import QApplication

from .events import UpdateEvent
from .widgets import StickWidget


logger = logging.getLogger(__name__)


def describe(event: UpdateEvent) -> str:
    if event.direction is None:
        return event.type.value
    return f"{event.type.value} ({event.x:+.1f}, {event.y:+.1f}) {event.direction.value}"


def main():
    """Launch a StickWidget as a standalone window that logs its events."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    app = QApplication(sys.argv)
    widget = StickWidget()
    widget.setWindowTitle("Virtual Stick")
    for signal in (widget.started, widget.moved, widget.stopped):
        signal.connect(lambda event: logger.info(describe(event)))
    widget.show()
    sys.exit(app.exec_())


if __name__ == '__main__':
    main()
