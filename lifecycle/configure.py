#!/usr/bin/env python3
"""
Auto MAC Changer configuration

Changes the interval, the managed interfaces and the enabled flag, then
restarts the service so the new values take effect. Keys in the
configuration file that this tool does not ask about are preserved.

Usage:
    sudo auto-mac-changer-configure
"""

import sys
from typing import Any, Dict, Optional, Sequence

from config import settings
from config.store import merge_config, read_config_file, save_config
from core.errors import CommandError, ConfigError, ConfigNotFoundError
from core.network_utils import get_network_interfaces
from lifecycle import systemd
from lifecycle.privileges import require_root
from lifecycle.prompts import prompt_confirm, prompt_interfaces, prompt_interval
from utils import console
from utils.logger_setup import setup_logging


def ask_answers(current: Dict[str, Any], interfaces: Sequence[str]) -> Dict[str, Any]:
    """Prompt for new values, defaulting to the current ones"""
    enabled = current.get("enabled")
    return {
        "interval": prompt_interval(current.get("interval") or settings.DEFAULT_INTERVAL),
        "interfaces": prompt_interfaces(interfaces, current.get("interfaces") or []),
        "enabled": prompt_confirm(
            "Enable auto MAC changing?", True if enabled is None else bool(enabled)
        ),
    }


def configure(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Run the interactive configuration.

    Returns:
        The configuration object written.
    """
    console.heading("===== Auto MAC Changer - Configuration =====")
    require_root("auto-mac-changer-configure")

    try:
        current = read_config_file(config_path)
    except ConfigNotFoundError:
        console.error("Configuration file not found.")
        sys.exit(1)
    except ConfigError as e:
        console.error(str(e))
        sys.exit(1)

    interfaces = get_network_interfaces()
    if not interfaces:
        console.error("No network interfaces found.")
        sys.exit(1)

    new_config = merge_config(current, ask_answers(current, interfaces))

    try:
        save_config(new_config, config_path)
        console.success("Configuration saved successfully.")

        console.info("Restarting service to apply changes...")
        systemd.restart_service()
        console.success("Service restarted.")
    except (ConfigError, CommandError, OSError) as e:
        console.error(f"Error saving configuration: {e}")
        sys.exit(1)

    return new_config


def main() -> None:
    """Main entry point"""
    setup_logging(log_level="WARNING", log_file=None)
    try:
        configure()
    except KeyboardInterrupt:
        console.warning("\nConfiguration cancelled")
        sys.exit(1)


if __name__ == "__main__":
    main()
