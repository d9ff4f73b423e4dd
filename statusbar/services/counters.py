from dataclasses import dataclass
from typing import Optional

from statusbar.models.cpu import CpuSample
from statusbar.models.network import NetworkCounters


@dataclass
class CounterStore:
    """
    Last raw sample of every cumulative counter, kept between ticks.

    Owned by the aggregator and handed to the diff functions once per tick,
    after all reads of that tick have completed. Ticks never overlap, so no
    locking is needed.
    """

    cpu: Optional[CpuSample] = None
    network: Optional[NetworkCounters] = None
