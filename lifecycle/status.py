#!/usr/bin/env python3
"""
Auto MAC Changer status

Shows whether the service is running, the current configuration, the
current MAC address of each configured interface and the latest log
entries.

Usage:
    sudo auto-mac-changer-status
"""

import os
from collections import deque
from typing import Callable, Dict, List, Sequence

from colorama import Fore

from config import settings
from config.store import load_config
from core.commands import run_command
from core.errors import CommandError, ConfigError
from core.network_utils import get_current_mac
from lifecycle import systemd
from lifecycle.privileges import is_root
from utils import console
from utils.logger_setup import setup_logging


def get_current_macs(interfaces: Sequence[str], run: Callable = run_command) -> Dict[str, str]:
    """
    Look up the current MAC address of each interface.

    Returns:
        Mapping of interface to address, ``Unknown`` when macchanger output
        has no address, or ``Error`` when macchanger fails.
    """
    macs = {}
    for interface in interfaces:
        try:
            mac = get_current_mac(interface, run)
        except (CommandError, OSError):
            macs[interface] = "Error"
        else:
            macs[interface] = mac or "Unknown"
    return macs


def get_recent_logs(count: int = settings.STATUS_LOG_LINES,
                    log_file: str = settings.LOG_FILE) -> List[str]:
    """Return the last ``count`` lines of the service log."""
    if not os.path.exists(log_file):
        return []
    try:
        with open(log_file, "r", encoding="utf-8", errors="replace") as fh:
            return [line.rstrip("\n") for line in deque(fh, maxlen=count)]
    except OSError as e:
        console.error(f"Error reading logs: {e}")
        return []


def show_status(config_path: str = None, log_file: str = settings.LOG_FILE) -> None:
    """Print the status report"""
    console.heading("===== Auto MAC Changer - Status =====\n")

    if not is_root():
        console.warning("Warning: Not running as root. Some information may be limited.")

    active = systemd.is_active()
    state = console.coloured("RUNNING", Fore.GREEN) if active else console.coloured("STOPPED", Fore.RED)
    print(f"Service status: {state}")

    try:
        config = load_config(config_path)
    except ConfigError as e:
        console.error(f"Error loading status: {e}")
    else:
        enabled = console.coloured("YES", Fore.GREEN) if config.enabled else console.coloured("NO", Fore.RED)
        print("\nConfiguration:")
        print(f"- Change interval: {console.coloured(config.interval, Fore.BLUE)} seconds")
        print(f"- Service enabled: {enabled}")
        print(f"- Configured interfaces: {console.coloured(', '.join(config.interfaces), Fore.BLUE)}")

        if config.interfaces:
            print("\nCurrent MAC addresses:")
            for interface, mac in get_current_macs(config.interfaces).items():
                print(f"- {interface}: {console.coloured(mac, Fore.BLUE)}")

    logs = get_recent_logs(log_file=log_file)
    if logs:
        print(f"\nRecent activity (last {len(logs)} log entries):")
        for line in logs:
            print(f"- {line}")

    print("\nCommands:")
    print("- Start service: " + console.coloured(f"sudo systemctl start {settings.SERVICE_NAME}", Fore.YELLOW))
    print("- Stop service: " + console.coloured(f"sudo systemctl stop {settings.SERVICE_NAME}", Fore.YELLOW))
    print("- Configure settings: " + console.coloured("sudo auto-mac-changer-configure", Fore.YELLOW))


def main() -> None:
    """Main entry point"""
    setup_logging(log_level="WARNING", log_file=None)
    show_status()


if __name__ == "__main__":
    main()
