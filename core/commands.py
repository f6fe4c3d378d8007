"""
External command runner.

Every privileged operation the service performs is an external program:
``ip`` for link state and ``macchanger`` for the hardware address. They are
reached through ``CommandRunner`` so the orchestration code can be exercised
against a fake runner without touching real network state.
"""

import asyncio
import logging
import subprocess
from typing import List, Sequence

from config import settings
from core.errors import CommandError

logger = logging.getLogger(__name__)


class CommandRunner:
    """
    Asynchronous runner for the commands the MAC cycler needs.

    Each method awaits one external process and raises ``CommandError`` when
    it exits non-zero. A missing executable surfaces as ``OSError``.
    """

    def __init__(self, ip_command: str = settings.IP_COMMAND,
                 macchanger_command: str = settings.MACCHANGER_COMMAND):
        self.ip_command = ip_command
        self.macchanger_command = macchanger_command

    async def _run(self, cmd: Sequence[str]) -> str:
        """Run a command and return its standard output"""
        logger.debug("Running: %s", " ".join(cmd))
        process = await asyncio.create_subprocess_exec(
            *cmd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        stdout, stderr = await process.communicate()
        if process.returncode != 0:
            raise CommandError(cmd, process.returncode, stderr.decode(errors="replace"))
        return stdout.decode(errors="replace")

    async def list_links(self) -> str:
        """Return the raw output of ``ip link show``."""
        return await self._run([self.ip_command, "link", "show"])

    async def set_link_state(self, interface: str, state: str) -> None:
        """Set an interface administratively ``up`` or ``down``."""
        if state not in ("up", "down"):
            raise ValueError(f"Invalid link state: {state}")
        await self._run([self.ip_command, "link", "set", "dev", interface, state])

    async def randomize_mac(self, interface: str) -> str:
        """Assign a random hardware address with ``macchanger -r``."""
        return await self._run([self.macchanger_command, "-r", interface])

    async def show_mac(self, interface: str) -> str:
        """Return the output of ``macchanger -s``."""
        return await self._run([self.macchanger_command, "-s", interface])


def run_command(cmd: List[str], check: bool = True) -> subprocess.CompletedProcess:
    """
    Run a command synchronously, for the one-shot lifecycle tools.

    Raises:
        CommandError: If ``check`` is set and the command exits non-zero.
    """
    logger.debug("Running: %s", " ".join(cmd))
    result = subprocess.run(cmd, capture_output=True, text=True)
    if check and result.returncode != 0:
        raise CommandError(cmd, result.returncode, result.stderr or "")
    return result
