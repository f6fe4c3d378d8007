"""
Auto MAC Changer service

Entry point run by systemd. Loads the configuration once, changes every
configured MAC address immediately, then keeps changing them on the
recurring trigger until SIGINT or SIGTERM.

Usage:
    sudo python -m orchestration.service
"""

import asyncio
import json
import logging
import signal
import sys
from typing import Optional

from config.store import load_config
from core.errors import ConfigError, ConfigNotFoundError
from lifecycle.privileges import require_root
from orchestration.scheduler import MacChangeScheduler
from utils import console
from utils.logger_setup import setup_logging

logger = logging.getLogger(__name__)

SHUTDOWN_SIGNALS = {
    signal.SIGINT: ("Service stopped by user", "Stopping Auto MAC Changer service"),
    signal.SIGTERM: ("Service terminated", "Auto MAC Changer service terminated"),
}


class MacChangerService:
    """
    Runs the scheduler on an asyncio event loop until a shutdown signal.

    The first cycle starts as soon as ``serve`` is awaited. A signal stops
    the service at once; a cycle in progress is not waited for.
    """

    def __init__(self, scheduler: MacChangeScheduler):
        self.scheduler = scheduler
        self._stopped: Optional[asyncio.Event] = None
        self._error: Optional[BaseException] = None

    async def serve(self) -> int:
        """
        Run until stopped.

        Returns:
            Process exit code: 0 after a signal, 1 if start-up failed.
        """
        loop = asyncio.get_running_loop()
        self._stopped = asyncio.Event()
        for sig, (reason, notice) in SHUTDOWN_SIGNALS.items():
            loop.add_signal_handler(sig, self.stop, reason, notice)

        startup = asyncio.ensure_future(self._start())
        startup.add_done_callback(self._on_started)

        try:
            await self._stopped.wait()
        finally:
            self.scheduler.shutdown()
            for sig in SHUTDOWN_SIGNALS:
                loop.remove_signal_handler(sig)

        return 1 if self._error else 0

    async def _start(self) -> None:
        # Immediate first change, then the recurring trigger
        await self.scheduler.cycle_all()
        self.scheduler.start()
        console.info(
            f"MAC addresses will change every {console.bold(self.scheduler.config.interval)} seconds"
        )
        console.success(console.bold("Auto MAC Changer service is running"))

    def _on_started(self, task: asyncio.Future) -> None:
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error("Service error: %s", error)
            console.error(f"Error: {error}")
            self._error = error
            self._stopped.set()

    def stop(self, reason: str = "Service stopped", notice: Optional[str] = None) -> None:
        """Log the shutdown reason and release ``serve``."""
        logger.info(reason)
        if notice:
            console.warning(f"\n{notice}")
        if self._stopped is not None:
            self._stopped.set()


def main(config_path: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """Main entry point"""
    require_root("auto-mac-changer")
    if log_file is None:
        setup_logging()
    else:
        setup_logging(log_file=log_file)

    console.heading("Auto MAC Changer - Starting service")

    try:
        config = load_config(config_path)
    except ConfigNotFoundError:
        logger.error("Configuration file not found. Please run installation.")
        sys.exit(1)
    except ConfigError as e:
        logger.error("Error loading configuration: %s", e)
        sys.exit(1)

    logger.info("Service started with configuration: %s", json.dumps(config.to_dict()))

    if not config.enabled:
        logger.info("Service is disabled in configuration")
        console.warning("Service is currently disabled in configuration. Exiting.")
        sys.exit(0)

    service = MacChangerService(MacChangeScheduler(config))
    sys.exit(asyncio.run(service.serve()))


if __name__ == "__main__":
    main()
