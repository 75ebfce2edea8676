"""Helper programs run during auto check-in: updater scripts and channel checks."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass

log = logging.getLogger(__name__)

DEFAULT_PYTHON_PATH = "/usr/bin/python"
_SHELL_CANNOT_EXECUTE = 127


def _run_shell(command: str) -> int:
    """Run ``command`` through the shell and return its exit status."""
    return subprocess.run(command, shell=True, check=False).returncode


def python_command(python_path: str | None, script_file: str) -> str:
    """Return the shell command that runs ``script_file`` with debugging on.

    An empty or missing ``python_path`` selects ``DEFAULT_PYTHON_PATH``.
    """
    interpreter = python_path or DEFAULT_PYTHON_PATH
    return "%s %s -d" % (interpreter, script_file)


def run_python_script(python_path: str | None, script_file: str) -> bool:
    """Run ``script_file`` with python; return True when it succeeds."""
    command = python_command(python_path, script_file)
    log.debug("running python command: %s", command)
    status = _run_shell(command)
    if status == 0:
        log.debug("python script %s succeeded", script_file)
        return True
    if status < 0:
        log.error("ERROR: failed to run python script %s", script_file)
    elif status == _SHELL_CANNOT_EXECUTE:
        log.error("ERROR: unable to execute python for script %s", script_file)
    else:
        log.error("python script %s failed, status %d", script_file, status)
    return False


def send_version(python_path: str | None, script_file: str) -> bool:
    """Send the gateway version information with the version updater script."""
    return run_python_script(python_path, script_file)


def send_channel(python_path: str | None, script_file: str) -> bool:
    """Send channel information with the channel updater script."""
    return run_python_script(python_path, script_file)


def channel_available(check_prog: str | None) -> bool:
    """Run a channel status checker through the shell.

    A zero exit status means the channel is available.
    """
    command = check_prog or ""
    status = _run_shell(command)
    if status == 0:
        log.debug("%s reports available", command)
        return True
    if status < 0:
        log.error("ERROR: failed to run %s", command)
    elif status == _SHELL_CANNOT_EXECUTE:
        log.error("ERROR: unable to execute %s", command)
    else:
        log.info("%s reports unavailable", command)
    return False


def needs_update(status_age: int, channels_age: int, interval: int) -> bool:
    """Decide whether a channel's status must be sent again.

    True when the last update is at least ``interval`` seconds old, or
    the channels file changed after the last update.
    """
    return status_age >= interval or channels_age < status_age


@dataclass
class ChannelStats:
    """Channel counts gathered during one auto check-in run."""

    read: int = 0
    active: int = 0
    down: int = 0
    updated: int = 0
    errors: int = 0

    def summary(self) -> str:
        """Return the log line describing the run."""
        return (
            "Channel Stats: %d read, %d active, %d down, %d updated, %d errors"
            % (self.read, self.active, self.down, self.updated, self.errors)
        )