"""Building blocks for an amateur radio RMS gateway."""

__version__ = "1.0.0"

__all__ = [
    "handshake",
    "messages",
    "monitor",
    "scripts",
    "statblock",
    "statfile",
    "strutil",
    "symbols",
    "syslogmap",
]