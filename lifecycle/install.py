#!/usr/bin/env python3
"""
Auto MAC Changer installation

Installs macchanger, asks which interfaces to manage and how often, writes
the configuration and starts the systemd service.

Usage:
    sudo auto-mac-changer-install
"""

import sys

from tqdm import tqdm

from config import settings
from config.store import save_config
from core.errors import CommandError, ConfigError, UnsupportedDistributionError
from core.network_utils import get_network_interfaces
from lifecycle import systemd
from lifecycle.distro import detect_distribution, install_macchanger
from lifecycle.privileges import require_root
from lifecycle.prompts import prompt_interfaces, prompt_interval
from utils import console
from utils.logger_setup import setup_logging


def prepare_system() -> str:
    """
    Detect the distribution and install macchanger.

    Returns:
        The detected distribution.

    Raises:
        UnsupportedDistributionError: If the distribution is not supported.
        CommandError: If the package manager fails.
    """
    if not settings.IS_LINUX:
        raise UnsupportedDistributionError("Auto MAC Changer only runs on Linux")

    with tqdm(total=2, unit="step", leave=False) as progress:
        progress.set_description("Detecting Linux distribution")
        distro = detect_distribution()
        if not distro:
            raise UnsupportedDistributionError("Unsupported Linux distribution")
        progress.update(1)
        tqdm.write(f"Detected {distro.capitalize()} Linux")

        progress.set_description("Installing macchanger package")
        install_macchanger(distro)
        progress.update(1)
        tqdm.write("Macchanger installed successfully")

    return distro


def write_configuration(interval: int, interfaces, config_path: str = settings.CONFIG_FILE) -> dict:
    """Write the initial configuration file"""
    config = {
        "interval": interval,
        "interfaces": list(interfaces),
        "randomize": True,
        "enabled": True,
    }
    save_config(config, config_path)
    return config


def print_summary(interval: int, config_path: str = settings.CONFIG_FILE) -> None:
    console.success(console.bold("\n✓ Auto MAC Changer installed successfully!"))
    console.info(f"MAC addresses will change every {console.bold(interval)} seconds")
    console.info(f"Service status: {console.bold('RUNNING')}")
    console.info(f"Configuration file: {console.bold(config_path)}")
    print(f"\nTo check service status: systemctl status {settings.SERVICE_NAME}")
    print(f"To stop the service: systemctl stop {settings.SERVICE_NAME}")
    print(f"To disable on boot: systemctl disable {settings.SERVICE_NAME}")


def install(config_path: str = settings.CONFIG_FILE) -> None:
    console.heading("===== Auto MAC Changer - Installation =====")
    require_root("auto-mac-changer-install")

    try:
        prepare_system()
    except UnsupportedDistributionError as e:
        console.error(str(e))
        supported = ", ".join(d.capitalize() for d in settings.SUPPORTED_DISTRIBUTIONS)
        console.warning(f"This tool only supports {supported} Linux.")
        sys.exit(1)
    except (CommandError, OSError) as e:
        console.error(f"Failed to install macchanger: {e}")
        console.error("Failed to install macchanger. Installation aborted.")
        sys.exit(1)

    interfaces = get_network_interfaces()
    if not interfaces:
        console.error("No network interfaces found. Installation aborted.")
        sys.exit(1)

    interval = prompt_interval(settings.DEFAULT_INTERVAL)
    selected = prompt_interfaces(interfaces)

    with tqdm(total=2, unit="step", leave=False) as progress:
        progress.set_description("Creating configuration")
        try:
            write_configuration(interval, selected, config_path)
        except (ConfigError, OSError) as e:
            console.error(f"Failed to create configuration: {e}")
            sys.exit(1)
        progress.update(1)
        tqdm.write("Configuration created successfully")

        progress.set_description("Creating systemd service")
        try:
            systemd.install_service()
        except (CommandError, OSError) as e:
            console.error(f"Failed to create systemd service: {e}")
            console.error("Failed to create systemd service. Installation not complete.")
            sys.exit(1)
        progress.update(1)
        tqdm.write("Systemd service created and started")

    print_summary(interval, config_path)


def main() -> None:
    """Main entry point"""
    setup_logging(log_level="WARNING", log_file=None)
    try:
        install()
    except KeyboardInterrupt:
        console.warning("\nInstallation interrupted")
        sys.exit(1)


if __name__ == "__main__":
    main()
