"""Configuration constants for touchbar-toggler."""

import os

# Double-press window: two Command events closer than this toggle the bar.
# Override with TOUCHBAR_TOGGLER_THRESHOLD (seconds, e.g. "0.4")
_threshold_env = os.environ.get("TOUCHBAR_TOGGLER_THRESHOLD")
DOUBLE_PRESS_THRESHOLD = float(_threshold_env) if _threshold_env else 0.3

# Per-command timeout; a hung launchctl must not stall the hotkey thread forever
_timeout_env = os.environ.get("TOUCHBAR_TOGGLER_TIMEOUT")
COMMAND_TIMEOUT = float(_timeout_env) if _timeout_env else 10.0

LOG_LEVEL = os.environ.get("TOUCHBAR_TOGGLER_LOG_LEVEL", "INFO").upper()

# Executables
DEFAULTS = "/usr/bin/defaults"
LAUNCHCTL = "/bin/launchctl"
PKILL = "/usr/bin/pkill"
CSRUTIL = "/usr/bin/csrutil"

# Preference store
PREFS_DOMAIN = "com.apple.touchbar.agent"
PRESENTATION_MODE_GLOBAL = "PresentationModeGlobal"
PRESENTATION_MODE_FN_MODES = "PresentationModeFnModes"
FULL_CONTROL_STRIP = "fullControlStrip"
FN_MODES_DICT = (
    "<dict>"
    "<key>app</key><string>fullControlStrip</string>"
    "<key>appWithControlStrip</key><string>fullControlStrip</string>"
    "<key>fullControlStrip</key><string>app</string>"
    "</dict>"
)

# launchd descriptors, in load/unload order
SERVICE_PLISTS = (
    "/System/Library/LaunchAgents/com.apple.controlstrip.plist",
    "/System/Library/LaunchAgents/com.apple.touchbar.agent.plist",
    "/System/Library/LaunchDaemons/com.apple.touchbar.user-device.plist",
)

# Processes restarted after every toggle; launchd relaunches them
RESTART_PROCESSES = ("ControlStrip", "Touch Bar agent", "Dock")

# Menu bar
APP_NAME = "Touch Bar Toggler"
TITLE_ENABLED = "⌘"
TITLE_DISABLED = "⌘●"
