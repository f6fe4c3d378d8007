"""
Linux distribution detection and macchanger package installation.
"""

import logging
import os
from typing import Callable, Optional

from config import settings
from core.commands import run_command
from core.errors import CommandError, UnsupportedDistributionError

logger = logging.getLogger(__name__)


def _match_distribution(text: str, os_release: bool = False) -> Optional[str]:
    for distro in settings.SUPPORTED_DISTRIBUTIONS:
        needle = f"ID={distro}" if os_release else distro
        if needle in text:
            return distro
    return None


def detect_distribution(
    os_release_path: str = settings.OS_RELEASE_FILE,
    run: Callable = run_command,
    exists: Callable[[str], bool] = os.path.exists,
) -> Optional[str]:
    """
    Detect the Linux distribution.

    Checks /etc/os-release first, then ``lsb_release -i``, then the
    distribution-specific release files.

    Returns:
        One of ``settings.SUPPORTED_DISTRIBUTIONS``, or None if unknown.
    """
    if exists(os_release_path):
        try:
            with open(os_release_path, "r", encoding="utf-8") as fh:
                distro = _match_distribution(fh.read(), os_release=True)
        except OSError as e:
            logger.warning("Cannot read %s: %s", os_release_path, e)
        else:
            if distro:
                return distro

    try:
        result = run(["lsb_release", "-i"])
    except (CommandError, OSError):
        # lsb_release not available
        pass
    else:
        distro = _match_distribution(result.stdout.lower())
        if distro:
            return distro

    for path, distro in settings.RELEASE_FILES.items():
        if exists(path):
            return distro

    return None


def install_macchanger(distro: str, run: Callable = run_command) -> None:
    """
    Install the macchanger package with the distribution's package manager.

    Raises:
        UnsupportedDistributionError: If ``distro`` has no known package manager.
        CommandError: If the package manager fails.
    """
    commands = settings.INSTALL_COMMANDS.get(distro)
    if commands is None:
        raise UnsupportedDistributionError(f"Unsupported distribution: {distro}")

    for cmd in commands:
        logger.info("Running %s", " ".join(cmd))
        run(cmd)
