"""
Coloured console output for the service and the lifecycle tools.
"""

import sys

from colorama import Fore, Style, init

init(autoreset=True)


def heading(message: str) -> None:
    """Print a bold blue heading"""
    print(f"{Style.BRIGHT}{Fore.BLUE}{message}")


def info(message: str) -> None:
    print(f"{Fore.BLUE}{message}")


def success(message: str) -> None:
    print(f"{Fore.GREEN}{message}")


def warning(message: str) -> None:
    print(f"{Fore.YELLOW}{message}")


def error(message: str) -> None:
    print(f"{Fore.RED}{message}", file=sys.stderr)


def bold(text) -> str:
    """Embolden part of a line, restoring normal weight afterwards."""
    return f"{Style.BRIGHT}{text}{Style.NORMAL}"


def coloured(text, colour: str) -> str:
    """Wrap text in a colorama foreground colour."""
    return f"{colour}{text}{Fore.RESET}"
