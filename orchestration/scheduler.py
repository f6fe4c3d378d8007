"""
MAC Change Scheduler

Runs a cycle over every configured interface immediately, then again on a
recurring trigger. The trigger is expressed in whole minutes: the configured
interval is rounded up to the next minute, with a floor of one minute.
"""

import logging
import math
from typing import Awaitable, Callable, Dict, List, Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from config.store import MacChangerConfig
from core.mac_cycler import MacCycler
from core.network_utils import list_network_interfaces
from utils import console

logger = logging.getLogger(__name__)

CYCLE_JOB_ID = "cycle_all"


def trigger_period_minutes(interval: int) -> int:
    """
    Convert an interval in seconds to the recurring trigger period.

    Args:
        interval: Seconds between cycles.

    Returns:
        Whole minutes, rounded up, at least 1.
    """
    if interval <= 0:
        raise ValueError(f"Interval must be positive, got {interval}")
    return max(1, math.ceil(interval / 60))


class MacChangeScheduler:
    """
    Schedules MAC address changes for the configured interfaces.

    The configuration is a snapshot taken at construction; changes on disk
    take effect after a restart.

    Usage:
        scheduler = MacChangeScheduler(load_config())
        await scheduler.cycle_all()
        scheduler.start()
    """

    def __init__(
        self,
        config: MacChangerConfig,
        cycler: Optional[MacCycler] = None,
        interface_source: Optional[Callable[[], Awaitable[List[str]]]] = None,
        scheduler: Optional[AsyncIOScheduler] = None,
    ):
        """
        Initialize scheduler

        Args:
            config: Configuration snapshot
            cycler: MAC cycler (a default one is built if None)
            interface_source: Coroutine function returning live interfaces when
                none are configured (defaults to ``ip link show`` through
                the cycler's runner)
            scheduler: APScheduler instance (built if None)
        """
        self.config = config
        self.cycler = cycler or MacCycler()
        self.interface_source = interface_source or self._list_live_interfaces
        # A trigger that fires while a cycle is still running is skipped
        self.scheduler = scheduler or AsyncIOScheduler(
            job_defaults={
                "max_instances": 1,
                "coalesce": True,
            },
        )

    @property
    def period_minutes(self) -> int:
        return trigger_period_minutes(self.config.interval)

    async def _list_live_interfaces(self) -> List[str]:
        return await list_network_interfaces(self.cycler.runner)

    async def resolve_interfaces(self) -> List[str]:
        """Configured interfaces, or every live interface if none are set."""
        if self.config.interfaces:
            return list(self.config.interfaces)
        return await self.interface_source()

    async def cycle_all(self) -> Dict[str, bool]:
        """
        Change the MAC address of every interface, one after another.

        Returns:
            Mapping of interface name to success, in processing order.
            Empty if no interfaces are available.
        """
        interfaces = await self.resolve_interfaces()
        if not interfaces:
            logger.error("No network interfaces available")
            return {}

        console.info("Changing MAC addresses...")
        results = {}
        for interface in interfaces:
            results[interface] = await self.cycler.change_mac(interface)

        failed = [name for name, ok in results.items() if not ok]
        if failed:
            logger.warning("MAC change failed for: %s", ", ".join(failed))
        return results

    async def _scheduled_cycle(self) -> None:
        logger.info("Running scheduled MAC address change")
        await self.cycle_all()

    def start(self) -> None:
        """Register the recurring job and start the scheduler."""
        period = self.period_minutes
        logger.info(
            "Scheduling MAC changes with interval: %d seconds (every %d minute%s)",
            self.config.interval, period, "" if period == 1 else "s",
        )
        self.scheduler.add_job(
            self._scheduled_cycle,
            trigger=IntervalTrigger(minutes=period),
            id=CYCLE_JOB_ID,
            replace_existing=True,
        )
        self.scheduler.start()

    def shutdown(self) -> None:
        """Stop the scheduler without waiting for a running cycle."""
        if self.scheduler.running:
            self.scheduler.shutdown(wait=False)

    @property
    def running(self) -> bool:
        return self.scheduler.running
