"""macOS menu bar front end.

The status item title doubles as the state indicator. AppKit calls must run
on the main thread, while toggles from the hotkey arrive on the pynput
listener thread, so every UI update goes through ``callAfter``.
"""

import logging

import rumps
from PyObjCTools.AppHelper import callAfter

from touchbar_toggler.config import APP_NAME, TITLE_DISABLED, TITLE_ENABLED
from touchbar_toggler.sip import check_sip
from touchbar_toggler.status import LogStatus

log = logging.getLogger(__name__)


class TogglerMenuBar(LogStatus, rumps.App):
    def __init__(self, events):
        super().__init__(APP_NAME, title=TITLE_ENABLED, quit_button=None)
        self.events = events
        self.toggler = None

        self.menu = [
            rumps.MenuItem("Toggle Touch Bar", callback=self._on_toggle),
            None,
            rumps.MenuItem("Quit", callback=self._quit, key="q"),
        ]

        # Let the run loop come up before showing a modal
        self._startup_timer = rumps.Timer(self._on_startup, 1)
        self._startup_timer.start()

    # --- StatusSurface --------------------------------------------------------

    def show_enabled(self, enabled):
        LogStatus.show_enabled(self, enabled)
        callAfter(self._set_title, TITLE_ENABLED if enabled else TITLE_DISABLED)

    def alert(self, title, message):
        LogStatus.alert(self, title, message)
        callAfter(rumps.alert, title=title, message=message, ok="OK")

    # --- Callbacks ------------------------------------------------------------

    def _set_title(self, title):
        self.title = title

    def _on_startup(self, timer):
        timer.stop()
        check_sip(self)

    def _on_toggle(self, _):
        if self.toggler is not None:
            self.toggler.toggle()

    def _quit(self, _):
        log.info("Quitting")
        self.events.stop()
        rumps.quit_application()
