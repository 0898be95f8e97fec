"""Global modifier-key event source backed by pynput.

pynput reports modifiers as individual press/release callbacks. The source
folds them into the set of currently held modifiers and hands every change
to the registered handlers as a ``ModifierEvent``.
"""

import logging
import time

from touchbar_toggler.monitor import ModifierEvent

log = logging.getLogger(__name__)


def _modifier_names():
    from pynput.keyboard import Key

    return {
        Key.cmd: "cmd", Key.cmd_l: "cmd", Key.cmd_r: "cmd",
        Key.shift: "shift", Key.shift_l: "shift", Key.shift_r: "shift",
        Key.ctrl: "ctrl", Key.ctrl_l: "ctrl", Key.ctrl_r: "ctrl",
        Key.alt: "alt", Key.alt_l: "alt", Key.alt_r: "alt", Key.alt_gr: "alt",
    }


class ModifierTracker:
    """Turns key press/release notifications into modifier-set snapshots.

    Left and right variants share one flag, the way macOS reports them:
    releasing either Command key clears "cmd" even if the other side was
    pressed. pynput reports the release of one side while the other is held
    as a press, so per-side bookkeeping would leave "cmd" stuck on.
    """

    def __init__(self, names, clock=time.monotonic):
        self._names = names
        self._clock = clock
        self._held = set()

    def press(self, key):
        return self._update(key, self._held.add)

    def release(self, key):
        return self._update(key, self._drop)

    def _update(self, key, op):
        if key not in self._names:
            return None
        before = self.active()
        op(key)
        after = self.active()
        if key in self._held or before != after:
            return ModifierEvent(self._clock(), after)
        return None

    def _drop(self, key):
        name = self._names[key]
        self._held = {k for k in self._held if self._names[k] != name}

    def active(self):
        return frozenset(self._names[k] for k in self._held)


class ModifierEventSource:
    """Registers handlers receiving every ``ModifierEvent`` for the process lifetime."""

    def __init__(self, tracker=None):
        self._tracker = tracker or ModifierTracker(_modifier_names())
        self._handlers = []
        self._listener = None

    def register(self, handler):
        self._handlers.append(handler)

    def dispatch(self, event):
        if event is None:
            return
        for handler in self._handlers:
            handler(event)

    def _on_press(self, key):
        self.dispatch(self._tracker.press(key))

    def _on_release(self, key):
        self.dispatch(self._tracker.release(key))

    def start(self):
        """Start the global pynput listener in its own thread."""
        from pynput import keyboard

        self._listener = keyboard.Listener(
            on_press=self._on_press, on_release=self._on_release
        )
        self._listener.start()
        log.debug("Keyboard listener started")

    def stop(self):
        if self._listener is not None:
            self._listener.stop()
            self._listener = None
