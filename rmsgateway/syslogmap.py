"""Map syslog priority and facility names to their numeric values."""

from __future__ import annotations

LOG_EMERG = 0
LOG_ALERT = 1
LOG_CRIT = 2
LOG_ERR = 3
LOG_WARNING = 4
LOG_NOTICE = 5
LOG_INFO = 6
LOG_DEBUG = 7

LOG_KERN = 0 << 3
LOG_USER = 1 << 3
LOG_MAIL = 2 << 3
LOG_DAEMON = 3 << 3
LOG_AUTH = 4 << 3
LOG_SYSLOG = 5 << 3
LOG_LPR = 6 << 3
LOG_NEWS = 7 << 3
LOG_UUCP = 8 << 3
LOG_CRON = 9 << 3
LOG_AUTHPRIV = 10 << 3
LOG_FTP = 11 << 3
LOG_LOCAL0 = 16 << 3
LOG_LOCAL1 = 17 << 3
LOG_LOCAL2 = 18 << 3
LOG_LOCAL3 = 19 << 3
LOG_LOCAL4 = 20 << 3
LOG_LOCAL5 = 21 << 3
LOG_LOCAL6 = 22 << 3
LOG_LOCAL7 = 23 << 3

_NOPRI = 0x10
_MARK = 24 << 3

PRIORITY_NAMES: dict[str, int] = {
    "alert": LOG_ALERT,
    "crit": LOG_CRIT,
    "debug": LOG_DEBUG,
    "emerg": LOG_EMERG,
    "err": LOG_ERR,
    "error": LOG_ERR,
    "info": LOG_INFO,
    "none": _NOPRI,
    "notice": LOG_NOTICE,
    "panic": LOG_EMERG,
    "warn": LOG_WARNING,
    "warning": LOG_WARNING,
}

FACILITY_NAMES: dict[str, int] = {
    "auth": LOG_AUTH,
    "authpriv": LOG_AUTHPRIV,
    "cron": LOG_CRON,
    "daemon": LOG_DAEMON,
    "ftp": LOG_FTP,
    "kern": LOG_KERN,
    "lpr": LOG_LPR,
    "mail": LOG_MAIL,
    "mark": _MARK,
    "news": LOG_NEWS,
    "security": LOG_AUTH,
    "syslog": LOG_SYSLOG,
    "user": LOG_USER,
    "uucp": LOG_UUCP,
    "local0": LOG_LOCAL0,
    "local1": LOG_LOCAL1,
    "local2": LOG_LOCAL2,
    "local3": LOG_LOCAL3,
    "local4": LOG_LOCAL4,
    "local5": LOG_LOCAL5,
    "local6": LOG_LOCAL6,
    "local7": LOG_LOCAL7,
}


def map_priority(name: str) -> int:
    """Return the priority value for ``name``; unknown names give LOG_INFO."""
    return PRIORITY_NAMES.get(name, LOG_INFO)


def map_facility(name: str) -> int:
    """Return the facility value for ``name``; unknown names give LOG_LOCAL0."""
    return FACILITY_NAMES.get(name, LOG_LOCAL0)