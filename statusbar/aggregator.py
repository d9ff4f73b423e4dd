import asyncio
import logging
import time
from datetime import datetime
from typing import Callable, List, Optional

from statusbar import formatting
from statusbar.config import Settings
from statusbar.errors import StatusError
from statusbar.services import (
    battery_monitor,
    cpu_monitor,
    memory_monitor,
    network_monitor,
    volume_monitor,
)
from statusbar.services.counters import CounterStore

logger = logging.getLogger(__name__)


class StatusAggregator:
    """
    Builds one status line per tick from all metric sources.

    Holds the CounterStore between ticks. Callers must await one tick before
    starting the next.
    """

    def __init__(
        self,
        settings: Settings,
        store: Optional[CounterStore] = None,
        clock: Callable[[], float] = time.monotonic,
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._settings = settings
        self._store = store if store is not None else CounterStore()
        self._clock = clock
        self._now = now

    @property
    def store(self) -> CounterStore:
        return self._store

    async def collect(self) -> str:
        """
        Sample every metric concurrently and return the joined status line.

        Battery and network are optional: when absent or unreadable their
        segment is left out. A failure of CPU, memory or volume is raised and
        leaves the CounterStore untouched.
        """
        settings = self._settings
        network, battery, cpu, meminfo, volume = await asyncio.gather(
            network_monitor.read_network_counters(
                settings.net_class_dir, settings.net_interface, clock=self._clock
            ),
            battery_monitor.read_battery(settings.power_supply_dir, settings.battery_device),
            cpu_monitor.read_cpu_sample(settings.proc_stat_path),
            memory_monitor.read_meminfo(settings.meminfo_path),
            volume_monitor.read_volume(settings.volume_command),
            return_exceptions=True,
        )

        for result in (cpu, meminfo, volume):
            if isinstance(result, BaseException):
                raise result

        if isinstance(network, BaseException):
            logger.warning("Network counters for %s unavailable: %s", settings.net_interface, network)
            network = None
        if isinstance(battery, BaseException):
            logger.warning("Battery %s unavailable: %s", settings.battery_device, battery)
            battery = None

        segments: List[str] = []
        if network is not None:
            sample = network_monitor.diff_network(
                self._store, network, min_interval=settings.min_rate_interval
            )
            segments.append(formatting.format_network(sample))
        if battery is not None:
            segments.append(formatting.format_battery(battery))

        delta = cpu_monitor.diff_cpu(self._store, cpu)
        segments.append(formatting.format_cpu(cpu_monitor.cpu_usage(delta)))
        segments.append(formatting.format_memory(meminfo))
        segments.append(formatting.format_volume(volume))
        segments.append(formatting.format_time(self._now()))

        return settings.separator.join(segments)

    async def tick(self) -> str:
        """Like collect(), but a failed tick yields the error text as its line."""
        try:
            return await self.collect()
        except StatusError as exc:
            logger.error("Status tick failed: %s", exc)
            return str(exc)
