import asyncio
import math
import time
from pathlib import Path
from typing import Callable, Optional

from statusbar.models.network import NetworkCounters, NetworkSample
from statusbar.services.counters import CounterStore
from statusbar.services.pseudo_files import exists, read_int


async def read_network_counters(
    net_class_dir: str,
    interface: str,
    clock: Callable[[], float] = time.monotonic,
) -> Optional[NetworkCounters]:
    """
    Read the cumulative tx/rx byte counters of ``interface``.

    Returns None when the interface does not exist on this host.
    """
    interface_dir = Path(net_class_dir) / interface
    if not exists(interface_dir):
        return None

    tx_bytes, rx_bytes = await asyncio.gather(
        read_int(interface_dir / "statistics" / "tx_bytes"),
        read_int(interface_dir / "statistics" / "rx_bytes"),
    )
    return NetworkCounters(tx_bytes=tx_bytes, rx_bytes=rx_bytes, captured_at=clock())


def diff_network(
    store: CounterStore,
    counters: NetworkCounters,
    min_interval: float = 0.0,
) -> NetworkSample:
    """
    Turn cumulative counters into per-second rates against the previous sample.

    Rates are 0 on the first sample, and also when the time since the previous
    sample is not positive or is below ``min_interval``. The store is updated
    unconditionally.
    """
    tx_rate = rx_rate = 0
    previous = store.network

    if previous is not None:
        elapsed = counters.captured_at - previous.captured_at
        if elapsed > 0 and elapsed >= min_interval:
            tx_rate = math.floor((counters.tx_bytes - previous.tx_bytes) / elapsed)
            rx_rate = math.floor((counters.rx_bytes - previous.rx_bytes) / elapsed)

    store.network = counters
    return NetworkSample(
        tx_bytes=counters.tx_bytes,
        rx_bytes=counters.rx_bytes,
        tx_rate=tx_rate,
        rx_rate=rx_rate,
    )
