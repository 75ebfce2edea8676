"""Greeting, banner and login/logout messages of a gateway session."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass
class UserStats:
    """Outcome and byte counts of one gateway conversation."""

    errcode: int = 0
    bytes_recv: int = 0
    bytes_sent: int = 0


def format_greeting(
    gwcall: str, package: str, label: str, build_date: str, gridsquare: str
) -> str:
    """Return the greeting sent to the RF client when it connects."""
    return "\n%s - %s %s %s (%s)\n\n" % (gwcall, package, label, build_date, gridsquare)


def read_banner(path: str | os.PathLike[str], max_len: int) -> list[str]:
    """Return the banner file split into pieces to send one at a time.

    Each piece is a line, or part of a line, of at most ``max_len - 1``
    characters.  Raises OSError when the file cannot be read and
    ValueError when ``max_len`` is below 2.
    """
    if max_len < 2:
        raise ValueError("max_len must be at least 2")
    width = max_len - 1
    pieces: list[str] = []
    with open(path, encoding="utf-8", errors="replace", newline="") as fp:
        for line in fp:
            pieces.extend(line[start : start + width] for start in range(0, len(line), width))
    return pieces


def format_logon(usercall: str, port: str, hostname: str) -> str:
    """Return the log message for a user logging in."""
    return "Login %.9s on %s connected to %s" % (usercall, port, hostname)


def _rate(total: int, elapsed: float) -> float:
    if elapsed:
        return total / elapsed
    if total:
        return float("inf")
    return float("nan")


def format_logout(usercall: str, stats: UserStats, elapsed: float) -> str:
    """Return the log message for a user logging out, with transfer rate."""
    rate = _rate(stats.bytes_sent + stats.bytes_recv, elapsed)
    return "Logout %-9.9s tx:%d rx:%d %.1fs %.1f Bytes/s (%d)" % (
        usercall,
        stats.bytes_sent,
        stats.bytes_recv,
        elapsed,
        rate,
        stats.errcode,
    )