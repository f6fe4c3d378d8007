"""
MAC Cycler

Assigns a fresh random hardware address to a single interface. The
interface must be administratively down while the address is changed, so
the steps always run in this order:

1. ip link set dev <iface> down
2. macchanger -r <iface>
3. ip link set dev <iface> up
4. macchanger -s <iface>, confirming the new address
"""

import logging
from typing import Optional

from core.commands import CommandRunner
from core.errors import CommandError, MacParseError
from core.network_utils import parse_current_mac
from utils import console

logger = logging.getLogger(__name__)


class MacCycler:
    """
    Changes the MAC address of one interface at a time.

    Usage:
        cycler = MacCycler(CommandRunner())
        ok = await cycler.change_mac("eth0")
    """

    def __init__(self, runner: Optional[CommandRunner] = None):
        self.runner = runner or CommandRunner()

    async def cycle(self, interface: str) -> str:
        """
        Run the down / randomize / up / confirm sequence.

        Returns:
            The new MAC address.

        Raises:
            CommandError: If any command fails.
            MacParseError: If the new address cannot be confirmed.
        """
        await self.runner.set_link_state(interface, "down")
        await self.runner.randomize_mac(interface)
        await self.runner.set_link_state(interface, "up")
        output = await self.runner.show_mac(interface)
        return parse_current_mac(output)

    async def change_mac(self, interface: str) -> bool:
        """
        Change the MAC address of an interface, absorbing failures.

        Args:
            interface: Interface name.

        Returns:
            True if a new address was confirmed.
        """
        logger.info("Changing MAC address for %s", interface)
        try:
            new_mac = await self.cycle(interface)
        except (CommandError, MacParseError, OSError) as e:
            logger.error("Error changing MAC for %s: %s", interface, e)
            console.error(f"✗ Failed to change MAC address for {interface}: {e}")
            return False

        logger.info("Successfully changed MAC address for %s to %s", interface, new_mac)
        console.success(f"✓ MAC address for {interface} changed to {console.bold(new_mac)}")
        return True
