"""
Core module for MAC address changing.

Includes:
- Network utilities for interface discovery and MAC address parsing
- The external command runner for ip and macchanger
- The MAC cycler that changes one interface's address
"""

from .commands import CommandRunner, run_command
from .errors import (
    CommandError,
    ConfigError,
    ConfigNotFoundError,
    MacChangerError,
    MacParseError,
    UnsupportedDistributionError,
)
from .mac_cycler import MacCycler
from .network_utils import (
    get_network_interfaces,
    list_network_interfaces,
    parse_interfaces,
    parse_current_mac,
    normalize_mac,
)
