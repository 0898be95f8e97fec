"""Entry point: python -m touchbar_toggler

Menu bar app that toggles the Touch Bar control strip on a double press of
Command.
"""

import logging
import sys

from touchbar_toggler.config import DOUBLE_PRESS_THRESHOLD, LOG_LEVEL
from touchbar_toggler.monitor import DoublePressDetector
from touchbar_toggler.toggler import ToggleContext, TouchBarToggler


def build(surface, events, runner=None):
    """Wire the detector and sequencer onto ``events`` and ``surface``.

    Returns:
        (context, toggler)
    """
    context = ToggleContext()
    toggler = TouchBarToggler(context, surface, runner)
    detector = DoublePressDetector(context, toggler.toggle)
    events.register(detector.feed)
    return context, toggler


def main():
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if sys.platform != "darwin":
        print("touchbar-toggler: ERROR: macOS only.", file=sys.stderr)
        sys.exit(1)

    from touchbar_toggler.events import ModifierEventSource
    from touchbar_toggler.menubar import TogglerMenuBar

    events = ModifierEventSource()
    app = TogglerMenuBar(events)
    _, app.toggler = build(app, events)

    print("touchbar-toggler: listening. Double-press Command to toggle the Touch Bar.")
    print(f"touchbar-toggler: double-press window is {DOUBLE_PRESS_THRESHOLD:.2f}s.")

    events.start()
    app.run()


if __name__ == "__main__":
    main()
