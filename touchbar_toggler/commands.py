"""External commands that flip the Touch Bar presentation mode.

Every step is a plain executable + argv run to completion before the next
one starts. A step lists the exit statuses it accepts: deleting a key that
is not there and pkill matching nothing both exit 1 and are harmless.
"""

import logging
import subprocess
from dataclasses import dataclass

from touchbar_toggler.config import (
    COMMAND_TIMEOUT,
    DEFAULTS,
    FN_MODES_DICT,
    FULL_CONTROL_STRIP,
    LAUNCHCTL,
    PKILL,
    PREFS_DOMAIN,
    PRESENTATION_MODE_FN_MODES,
    PRESENTATION_MODE_GLOBAL,
    RESTART_PROCESSES,
    SERVICE_PLISTS,
)

log = logging.getLogger(__name__)

# Exit status reported when a step could not be launched or timed out
LAUNCH_FAILED = -1


@dataclass(frozen=True)
class CommandStep:
    path: str
    args: tuple
    ok_codes: tuple = (0,)

    @property
    def argv(self):
        return [self.path, *self.args]

    def __str__(self):
        return " ".join(self.argv)


def _restart_steps():
    return [CommandStep(PKILL, (name,), ok_codes=(0, 1)) for name in RESTART_PROCESSES]


def enable_steps():
    """Commands that bring back the app-controlled strip."""
    steps = [
        CommandStep(
            DEFAULTS,
            ("delete", PREFS_DOMAIN, PRESENTATION_MODE_GLOBAL),
            ok_codes=(0, 1),
        ),
        CommandStep(
            DEFAULTS,
            ("write", PREFS_DOMAIN, PRESENTATION_MODE_FN_MODES, FN_MODES_DICT),
        ),
    ]
    steps += [CommandStep(LAUNCHCTL, ("load", plist)) for plist in SERVICE_PLISTS]
    return steps + _restart_steps()


def disable_steps():
    """Commands that pin the Touch Bar to the full control strip."""
    steps = [
        CommandStep(
            DEFAULTS,
            ("write", PREFS_DOMAIN, PRESENTATION_MODE_GLOBAL, "-string", FULL_CONTROL_STRIP),
        ),
    ]
    steps += [CommandStep(LAUNCHCTL, ("unload", plist)) for plist in SERVICE_PLISTS]
    return steps + _restart_steps()


class CommandRunner:
    """Runs a step, waits for it, and returns its exit status."""

    def __init__(self, timeout=None):
        self.timeout = COMMAND_TIMEOUT if timeout is None else timeout

    def run(self, step):
        """Run ``step`` to completion.

        Returns:
            The process exit status, or LAUNCH_FAILED if the executable could
            not be started or did not finish within the timeout.
        """
        log.debug("Running: %s", step)
        try:
            result = subprocess.run(
                step.argv,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired:
            log.error("Timed out after %.1fs: %s", self.timeout, step)
            return LAUNCH_FAILED
        except OSError as e:
            log.error("Could not launch %s: %s", step.path, e)
            return LAUNCH_FAILED

        if result.returncode not in step.ok_codes:
            log.warning(
                "%s exited with %d: %s",
                step, result.returncode, result.stderr.strip(),
            )
        return result.returncode
