"""
Environment constants for sysbanner.

Everything here is resolved once at import time and never re-read.
"""

import os
import platform
from getpass import getuser


def _os_label():
    try:
        release = platform.freedesktop_os_release()
    except (AttributeError, OSError):
        return platform.system()
    return release.get("PRETTY_NAME") or release.get("NAME") or platform.system()


def _user():
    try:
        return os.environ.get("USER") or getuser()
    except (KeyError, OSError):
        return ""


USER = _user()
HOSTNAME = os.environ.get("HOSTNAME") or platform.node()
SHELL = os.environ.get("SHELL", "")
OS = _os_label()

# Subprocess limits
COMMAND_TIMEOUT = 10
MAX_LINE_CHARS = 127

LOG_LEVEL = "WARNING"
