"""
Configuration settings for Auto MAC Changer.
"""

import os
import platform

# =============================================================================
# Platform Detection
# =============================================================================
PLATFORM = platform.system().lower()
IS_LINUX = PLATFORM == "linux"

# =============================================================================
# Paths
# =============================================================================
# Everything the service owns lives under one directory
CONFIG_DIR = os.environ.get("AUTO_MAC_CHANGER_HOME", "/etc/auto-mac-changer")
CONFIG_FILE = os.path.join(CONFIG_DIR, "config.json")
LOG_FILE = os.path.join(CONFIG_DIR, "mac-changer.log")

# =============================================================================
# Service Settings
# =============================================================================
SERVICE_NAME = "auto-mac-changer"
SERVICE_UNIT = f"{SERVICE_NAME}.service"
SERVICE_FILE = f"/etc/systemd/system/{SERVICE_UNIT}"
SCRIPT_PATH = f"/usr/local/bin/{SERVICE_NAME}"
SERVICE_DESCRIPTION = "Auto MAC Changer Service"

# Seconds systemd waits before restarting a failed service
RESTART_SEC = 30

# =============================================================================
# MAC Changing Settings
# =============================================================================
DEFAULT_INTERVAL = 300  # seconds
LOOPBACK_INTERFACE = "lo"

# External programs
IP_COMMAND = "ip"
MACCHANGER_COMMAND = "macchanger"

DEFAULT_CONFIG = {
    "interval": DEFAULT_INTERVAL,
    "interfaces": [],
    "randomize": True,
    "enabled": True,
}

# =============================================================================
# Distribution Settings
# =============================================================================
OS_RELEASE_FILE = "/etc/os-release"

# Marker files checked when os-release and lsb_release are inconclusive
RELEASE_FILES = {
    "/etc/fedora-release": "fedora",
    "/etc/arch-release": "arch",
}

SUPPORTED_DISTRIBUTIONS = ("fedora", "kali", "parrot", "arch")

INSTALL_COMMANDS = {
    "fedora": [["dnf", "install", "-y", "macchanger"]],
    "kali": [["apt-get", "update"], ["apt-get", "install", "-y", "macchanger"]],
    "parrot": [["apt-get", "update"], ["apt-get", "install", "-y", "macchanger"]],
    "arch": [["pacman", "-Sy", "--noconfirm", "macchanger"]],
}

REMOVE_HINTS = {
    "Fedora": "sudo dnf remove macchanger",
    "Kali/Parrot": "sudo apt-get remove macchanger",
    "Arch": "sudo pacman -R macchanger",
}

# =============================================================================
# Logging Settings
# =============================================================================
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

# Number of log lines shown by the status tool
STATUS_LOG_LINES = 10


# =============================================================================
# Helper Functions
# =============================================================================

def service_command(*args: str) -> list:
    """Build a systemctl command line for the managed unit."""
    return ["systemctl", *args, SERVICE_UNIT]
