"""
systemd integration for the MAC changer service.
"""

import logging
import os
import shlex
import sys
from typing import Callable

from config import settings
from core.commands import run_command
from core.errors import CommandError

logger = logging.getLogger(__name__)


def render_unit(exec_path: str = settings.SCRIPT_PATH) -> str:
    """Render the systemd unit file"""
    return f"""[Unit]
Description={settings.SERVICE_DESCRIPTION}
After=network.target

[Service]
ExecStart={exec_path}
Restart=on-failure
RestartSec={settings.RESTART_SEC}
User=root
Group=root

[Install]
WantedBy=multi-user.target
"""


def render_launcher(python_path: str = sys.executable) -> str:
    """Render the /bin/sh launcher that systemd executes."""
    project_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    return f"""#!/bin/sh
cd {shlex.quote(project_dir)}
exec {shlex.quote(python_path)} -m orchestration.service
"""


def install_service(
    service_file: str = settings.SERVICE_FILE,
    script_path: str = settings.SCRIPT_PATH,
    run: Callable = run_command,
) -> None:
    """
    Write the unit file and launcher, then enable and start the service.

    Raises:
        OSError: If a file cannot be written.
        CommandError: If systemctl fails.
    """
    with open(service_file, "w", encoding="utf-8") as fh:
        fh.write(render_unit(script_path))

    with open(script_path, "w", encoding="utf-8") as fh:
        fh.write(render_launcher())
    os.chmod(script_path, 0o755)

    run(["systemctl", "daemon-reload"])
    run(settings.service_command("enable"))
    run(settings.service_command("start"))
    logger.info("Installed systemd service at %s", service_file)


def stop_service(service_file: str = settings.SERVICE_FILE, run: Callable = run_command) -> bool:
    """
    Stop and disable the service if its unit exists.

    Returns:
        True if both ``systemctl stop`` and ``systemctl disable`` succeeded,
        False if the unit is not installed or either call failed.
    """
    if not os.path.exists(service_file):
        logger.info("No unit file at %s, nothing to stop", service_file)
        return False
    stopped = True
    for action in ("stop", "disable"):
        try:
            run(settings.service_command(action))
        except (CommandError, OSError) as e:
            # Already stopped or disabled
            logger.warning("systemctl %s failed: %s", action, e)
            stopped = False
    return stopped



def remove_service_files(
    service_file: str = settings.SERVICE_FILE,
    script_path: str = settings.SCRIPT_PATH,
    run: Callable = run_command,
) -> None:
    """Delete the unit file and launcher and reload systemd."""
    for path in (service_file, script_path):
        if os.path.exists(path):
            os.unlink(path)
    run(["systemctl", "daemon-reload"])
    logger.info("Uninstalled systemd service %s", settings.SERVICE_NAME)


def restart_service(run: Callable = run_command) -> None:
    run(settings.service_command("restart"))


def is_active(run: Callable = run_command) -> bool:
    """Check whether the service is currently running."""
    try:
        result = run(settings.service_command("is-active"), check=False)
    except OSError:
        return False
    return result.stdout.strip() == "active"
