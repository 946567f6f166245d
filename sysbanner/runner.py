"""
Command execution helpers for sysbanner.

Responsibilities:
- Run a shell command and capture the first line of its stdout
- Bound every call with a timeout and a line-length cap
- Turn spawn/read failures into diagnostics instead of crashes
"""

import logging
import os
import signal
import subprocess
import threading

from sysbanner import config

log = logging.getLogger(__name__)


class CommandError(Exception):
    def __init__(self, command, message):
        super().__init__(f"{message}: {command}")
        self.command = command


class SpawnFailed(CommandError):
    pass


class NoOutput(CommandError):
    pass


def _kill_group(p):
    try:
        os.killpg(p.pid, signal.SIGKILL)
    except (ProcessLookupError, PermissionError):
        pass


def read_first_line(command, timeout=None, max_chars=None):
    """
    Execute `command` through /bin/sh and return its first stdout line.
    - timeout: seconds before the command's process group is killed
    - max_chars: longer lines are truncated to this many characters

    At most max_chars + 1 characters are read; the rest of the output is
    discarded along with the process group. The trailing newline is
    removed. Raises SpawnFailed if the shell cannot be started and NoOutput
    if nothing was written before EOF or timeout.
    """
    if not command:
        raise ValueError("Empty command")
    if timeout is None:
        timeout = config.COMMAND_TIMEOUT
    if max_chars is None:
        max_chars = config.MAX_LINE_CHARS

    try:
        p = subprocess.Popen(
            command,
            shell=True,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            errors="replace",
            start_new_session=True,
        )
    except OSError as e:
        raise SpawnFailed(command, f"Error executing command ({e})") from e

    # Killing the whole group closes every writer of the pipe, so the read
    # returns at EOF for pipelines and background jobs too.
    timer = threading.Timer(timeout, _kill_group, [p])
    timer.start()
    try:
        raw = p.stdout.readline(max_chars + 1)
    finally:
        timer.cancel()
        timer.join()
        p.stdout.close()
        _kill_group(p)
        p.wait()

    if not raw:
        raise NoOutput(command, "Error reading output from command")

    line = raw.split("\n", 1)[0]
    return line[:max_chars]


class ShellRunner:
    """Runs commands for the collectors; failures degrade to ''."""

    def __init__(self, timeout=None, max_chars=None):
        self.timeout = timeout
        self.max_chars = max_chars

    def run(self, command):
        try:
            return read_first_line(command, timeout=self.timeout, max_chars=self.max_chars)
        except CommandError as e:
            log.warning("%s", e)
            return ""


__all__ = [
    "CommandError",
    "SpawnFailed",
    "NoOutput",
    "read_first_line",
    "ShellRunner",
]
