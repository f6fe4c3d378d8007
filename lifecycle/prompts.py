"""
Interactive prompts for the install and configure tools.
"""

from typing import List, Optional, Sequence

from utils import console


def prompt_interval(default: int) -> int:
    """Ask for the change interval in seconds until a positive number is given."""
    while True:
        answer = input(
            f"How often do you want to change MAC addresses (in seconds)? [{default}] "
        ).strip()
        if not answer:
            return default
        try:
            value = int(answer)
        except ValueError:
            value = 0
        if value > 0:
            return value
        console.error("Please enter a positive number")


def _parse_selection(answer: str, choices: Sequence[str]) -> Optional[List[str]]:
    selected = []
    for token in answer.replace(",", " ").split():
        if token.isdigit() and 1 <= int(token) <= len(choices):
            name = choices[int(token) - 1]
        elif token in choices:
            name = token
        else:
            return None
        if name not in selected:
            selected.append(name)
    return selected


def prompt_interfaces(choices: Sequence[str], default: Sequence[str] = ()) -> List[str]:
    """
    Ask which interfaces to manage.

    Interfaces may be given by number or name, separated by spaces or
    commas. An empty answer keeps ``default`` when it is non-empty.
    """
    default = [name for name in default if name in choices]

    print("Select network interfaces to change MAC addresses:")
    for i, name in enumerate(choices, 1):
        marker = "*" if name in default else " "
        print(f"  {i}. [{marker}] {name}")

    while True:
        hint = f" [{', '.join(default)}]" if default else ""
        answer = input(f"Interfaces{hint}: ").strip()
        if not answer and default:
            return list(default)

        selected = _parse_selection(answer, choices)
        if selected is None:
            console.error("Unknown interface in selection")
        elif not selected:
            console.error("Please select at least one interface")
        else:
            return selected


def prompt_confirm(message: str, default: bool = True) -> bool:
    """Ask a yes/no question."""
    suffix = "[Y/n]" if default else "[y/N]"
    while True:
        answer = input(f"{message} {suffix} ").strip().lower()
        if not answer:
            return default
        if answer in ("y", "yes"):
            return True
        if answer in ("n", "no"):
            return False
        console.error("Please answer yes or no")
