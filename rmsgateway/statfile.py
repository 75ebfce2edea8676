"""Touch a status file used as a simple timestamp."""

from __future__ import annotations

import os

STAT_MODE = 0o644


def set_stat_file(path: str | os.PathLike[str]) -> None:
    """Create ``path`` if needed and set its access and modification times to now.

    Raises OSError when the file cannot be created or updated.
    """
    fd = os.open(path, os.O_CREAT | os.O_RDWR, STAT_MODE)
    os.close(fd)
    os.utime(path, None)