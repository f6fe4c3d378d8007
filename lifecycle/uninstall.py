#!/usr/bin/env python3
"""
Auto MAC Changer uninstallation

Stops and disables the service, then removes its unit file, launcher and
configuration directory. The macchanger package itself is left installed.

Usage:
    sudo auto-mac-changer-uninstall
"""

import os
import shutil
import sys

from colorama import Fore

from config import settings
from core.errors import CommandError
from lifecycle import systemd
from lifecycle.privileges import require_root
from utils import console
from utils.logger_setup import setup_logging


def remove_files(config_dir: str = settings.CONFIG_DIR) -> bool:
    """Remove service files and the configuration directory"""
    try:
        systemd.remove_service_files()
        if os.path.isdir(config_dir):
            shutil.rmtree(config_dir)
    except (CommandError, OSError) as e:
        console.error(f"Failed to remove files: {e}")
        return False
    console.success("Files removed successfully")
    return True


def uninstall(config_dir: str = settings.CONFIG_DIR) -> None:
    console.heading("===== Auto MAC Changer - Uninstallation =====")
    require_root("auto-mac-changer-uninstall")

    if systemd.stop_service():
        console.success("Service stopped and disabled")
    else:
        console.warning("Service was not installed or could not be stopped cleanly")

    removed = remove_files(config_dir)

    if removed:
        console.success(console.bold("\n✓ Auto MAC Changer uninstalled successfully!"))
    console.warning("Note: The macchanger package was not removed.")
    console.warning("If you want to remove it, run:")
    for distro, command in settings.REMOVE_HINTS.items():
        print(f"  - {distro}: {console.coloured(command, Fore.BLUE)}")

    if not removed:
        sys.exit(1)


def main() -> None:
    """Main entry point"""
    setup_logging(log_level="WARNING", log_file=None)
    uninstall()


if __name__ == "__main__":
    main()
