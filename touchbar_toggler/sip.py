"""Startup check for System Integrity Protection.

With SIP on, launchctl refuses to unload the system Touch Bar agents, so
toggling silently does nothing. Warn once and keep running.
"""

import logging
import subprocess

from touchbar_toggler.config import COMMAND_TIMEOUT, CSRUTIL

log = logging.getLogger(__name__)

SIP_TITLE = "System Integrity Protection Enabled"
SIP_MESSAGE = (
    "This app requires System Integrity Protection to be disabled to function "
    "properly. Please disable SIP in Recovery Mode:\n\n"
    "1. Restart your Mac\n"
    "2. Hold Power button during startup\n"
    "3. Open Terminal from Utilities menu\n"
    "4. Run: csrutil disable\n"
    "5. Restart your Mac"
)


def sip_enabled():
    """Return True/False from ``csrutil status``, or None if it could not run."""
    try:
        result = subprocess.run(
            [CSRUTIL, "status"],
            capture_output=True,
            text=True,
            timeout=COMMAND_TIMEOUT,
        )
    except (subprocess.TimeoutExpired, OSError) as e:
        log.error("Error checking SIP status: %s", e)
        return None
    return "enabled" in result.stdout


def check_sip(surface):
    """Show the SIP advisory on ``surface`` when protection is on."""
    enabled = sip_enabled()
    if enabled:
        log.warning("SIP is enabled; toggling will likely have no effect")
        surface.alert(SIP_TITLE, SIP_MESSAGE)
    return enabled
