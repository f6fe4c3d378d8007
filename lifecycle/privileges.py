"""
Root privilege check shared by the entry points.
"""

import os
import sys

from utils import console


def is_root() -> bool:
    """Check whether the process runs with effective UID 0."""
    return os.geteuid() == 0


def require_root(command: str) -> None:
    """
    Exit with status 1 unless running as root.

    Args:
        command: Command shown in the ``sudo`` hint.
    """
    try:
        root = is_root()
    except AttributeError:
        # os.geteuid does not exist outside POSIX
        console.error("Unable to check root privileges.")
        sys.exit(1)

    if not root:
        console.error("This script must be run as root.")
        console.warning(f"Please run with: sudo {command}")
        sys.exit(1)
