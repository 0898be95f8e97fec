"""Notification surfaces the toggler reports to.

A surface shows the current enabled state and pops up alerts. The menu bar
app is the real one; ``LogStatus`` is used headless and in tests.
"""

import logging

log = logging.getLogger(__name__)


class LogStatus:
    """Surface that only logs."""

    def show_enabled(self, enabled):
        log.info("Touch Bar %s", "enabled" if enabled else "disabled")

    def alert(self, title, message):
        log.warning("%s: %s", title, message)
