"""
Exception types shared by the service and the lifecycle tools.
"""

from typing import Sequence


class MacChangerError(Exception):
    """Base class for all Auto MAC Changer errors."""


class CommandError(MacChangerError):
    """An external command exited with a non-zero status."""

    def __init__(self, command: Sequence[str], returncode: int, stderr: str = ""):
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr.strip()
        message = f"Command '{' '.join(self.command)}' failed with exit code {returncode}"
        if self.stderr:
            message += f": {self.stderr}"
        super().__init__(message)


class MacParseError(MacChangerError):
    """macchanger output did not contain a 'Current MAC:' line."""


class ConfigError(MacChangerError):
    """The configuration file is unreadable or invalid."""


class ConfigNotFoundError(ConfigError):
    """The configuration file does not exist."""


class UnsupportedDistributionError(MacChangerError):
    """The Linux distribution is not one the installer knows about."""
