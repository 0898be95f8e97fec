"""Detect a double press of the Command key in a stream of modifier events."""

from dataclasses import dataclass

from touchbar_toggler.config import DOUBLE_PRESS_THRESHOLD

COMMAND = "cmd"


@dataclass(frozen=True)
class ModifierEvent:
    """Snapshot of the active modifier keys at one flag change."""

    timestamp: float
    modifiers: frozenset


class DoublePressDetector:
    """Fires ``on_double_press`` when two Command events land inside the window.

    Only events with Command in the active set count. Releases (events without
    Command) are ignored, so holding Command and tapping Shift twice counts too.
    After firing, the window is cleared: a third quick press starts over
    instead of toggling again.

    The last qualifying timestamp lives on ``context.last_press`` so the
    sequencer and the detector share one explicitly owned state object.
    """

    def __init__(self, context, on_double_press, threshold=DOUBLE_PRESS_THRESHOLD):
        self.context = context
        self.on_double_press = on_double_press
        self.threshold = threshold

    def feed(self, event):
        """Process one modifier event.

        Returns:
            True if this event completed a double press and the callback ran.
        """
        if COMMAND not in event.modifiers:
            return False

        prior = self.context.last_press
        if prior is not None and event.timestamp - prior < self.threshold:
            self.context.last_press = None
            self.on_double_press()
            return True

        self.context.last_press = event.timestamp
        return False
