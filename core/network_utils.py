"""
Network utilities for interface discovery and MAC address handling.
"""

import logging
import re
from typing import Callable, List, Optional

from config import settings
from core.commands import CommandRunner, run_command
from core.errors import CommandError, MacParseError

logger = logging.getLogger(__name__)

# "2: eth0: <BROADCAST,...>" or "3: veth1@if2: <...>"
_LINK_LINE = re.compile(r"^\d+:\s+([^:@\s]+)")

# "Current MAC:   00:11:22:33:44:55 (unknown)"
_CURRENT_MAC = re.compile(
    r"Current MAC:\s+([0-9a-f]{2}(?::[0-9a-f]{2}){5})\b", re.IGNORECASE
)


def parse_interfaces(output: str) -> List[str]:
    """
    Extract interface names from ``ip link show`` output.

    Args:
        output: Raw command output.

    Returns:
        Interface names in the order listed, without loopback and without
        any ``@parent`` suffix.
    """
    interfaces = []
    for line in output.splitlines():
        match = _LINK_LINE.match(line)
        if match and match.group(1) != settings.LOOPBACK_INTERFACE:
            interfaces.append(match.group(1))
    return interfaces


def get_network_interfaces(run: Callable = run_command) -> List[str]:
    """
    Get the non-loopback link-layer interfaces known to the OS.

    Failures are logged and reported as an empty list; callers decide
    whether that is fatal.

    Args:
        run: Command runner (``run_command`` signature).

    Returns:
        List of interface names, possibly empty.
    """
    try:
        result = run([settings.IP_COMMAND, "link", "show"])
    except (CommandError, OSError) as e:
        logger.error("Error getting network interfaces: %s", e)
        return []
    return parse_interfaces(result.stdout)


async def list_network_interfaces(runner: CommandRunner) -> List[str]:
    """
    Awaitable counterpart of ``get_network_interfaces`` for the service loop.

    Args:
        runner: Command runner whose ``list_links`` is awaited.

    Returns:
        List of interface names, possibly empty.
    """
    try:
        output = await runner.list_links()
    except (CommandError, OSError) as e:
        logger.error("Error getting network interfaces: %s", e)
        return []
    return parse_interfaces(output)


def normalize_mac(mac: str) -> str:
    """Normalize MAC address format"""
    return mac.strip().lower()


def parse_current_mac(output: str) -> str:
    """
    Parse the current hardware address from ``macchanger -s`` output.

    Args:
        output: Raw command output.

    Returns:
        The address in canonical lowercase colon form.

    Raises:
        MacParseError: If no ``Current MAC:`` line is present.
    """
    match = _CURRENT_MAC.search(output)
    if not match:
        raise MacParseError("Failed to retrieve new MAC address")
    return normalize_mac(match.group(1))


def get_current_mac(interface: str, run: Callable = run_command) -> Optional[str]:
    """
    Get the current MAC address of an interface via macchanger.

    Args:
        interface: Interface name.
        run: Command runner (``run_command`` signature).

    Returns:
        MAC address string, or None if the output could not be parsed.

    Raises:
        CommandError: If macchanger fails.
        OSError: If macchanger is not installed.
    """
    result = run([settings.MACCHANGER_COMMAND, "-s", interface])
    try:
        return parse_current_mac(result.stdout)
    except MacParseError:
        return None
