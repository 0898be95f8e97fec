"""Toggle sequencer: flips the enabled flag and runs the matching commands."""

import logging
import threading
from dataclasses import dataclass, field
from typing import Optional

from touchbar_toggler.commands import CommandRunner, disable_steps, enable_steps

log = logging.getLogger(__name__)

ERROR_TITLE = "Error Toggling Touch Bar"
ERROR_MESSAGE = "Make sure System Integrity Protection is disabled and try again."


@dataclass
class ToggleContext:
    """All mutable state of the app, owned by whoever wires it up."""

    touchbar_enabled: bool = True
    last_press: Optional[float] = None


@dataclass
class ToggleResult:
    enabled: bool
    failed: list = field(default_factory=list)

    @property
    def ok(self):
        return not self.failed


class TouchBarToggler:
    """Runs the enable/disable sequence each time ``toggle`` is called.

    The flag flips before any command runs and is never rolled back, so after
    a failed sequence it records what was attempted rather than what the OS
    ended up doing. Every step is attempted even when an earlier one fails.
    """

    def __init__(self, context, surface, runner=None):
        self.context = context
        self.surface = surface
        self.runner = runner or CommandRunner()
        self._lock = threading.Lock()

    def toggle(self):
        with self._lock:
            self.context.touchbar_enabled = not self.context.touchbar_enabled
            enabled = self.context.touchbar_enabled
            steps = enable_steps() if enabled else disable_steps()
            log.info("%s Touch Bar (%d steps)", "Enabling" if enabled else "Disabling", len(steps))

            result = ToggleResult(enabled)
            for step in steps:
                status = self.runner.run(step)
                if status not in step.ok_codes:
                    result.failed.append(step)

            if result.ok:
                self.surface.show_enabled(enabled)
            else:
                log.error(
                    "Toggle finished with %d failed step(s): %s",
                    len(result.failed), "; ".join(str(s) for s in result.failed),
                )
                self.surface.alert(ERROR_TITLE, ERROR_MESSAGE)
            return result
