import math
from datetime import datetime
from typing import Optional, Union

from statusbar.models.battery import BatteryInfo
from statusbar.models.cpu import CpuUsage
from statusbar.models.memory import MemInfo
from statusbar.models.network import NetworkSample

Number = Union[int, float]

BYTE_UNITS = ("B", "K", "M", "G", "T")

# Nerd Font glyphs; escaped because they live in the private use area
UPLOAD_ICON = "\U000f0552"
DOWNLOAD_ICON = "\U000f01da"
CPU_ICON = "\uf4bc"
MEMORY_ICON = "\uefc5"
VOLUME_ICON = "\uf028"
MUTED_ICON = "\ueee8"

# Indexed by round(capacity / 10), empty to full
BATTERY_ICONS = (
    "\U000f008e",
    "\U000f007a",
    "\U000f007b",
    "\U000f007c",
    "\U000f007d",
    "\U000f007e",
    "\U000f007f",
    "\U000f0080",
    "\U000f0081",
    "\U000f0082",
    "\U000f0079",
)
CHARGING_ICONS = (
    "\U000f089f",
    "\U000f089c",
    "\U000f0086",
    "\U000f0087",
    "\U000f0088",
    "\U000f089d",
    "\U000f0089",
    "\U000f089e",
    "\U000f008a",
    "\U000f008b",
    "\U000f0085",
)
FULL_ICON = "\U000f06a5"


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 going up (Python's round() goes to even)."""
    return math.floor(value + 0.5)


def percentage(numerator: Number, denominator: Number) -> int:
    """Whole percent of numerator / denominator; 0 when the denominator is 0."""
    if denominator == 0:
        return 0
    return round_half_up(numerator / denominator * 100)


def _trim_number(value: float) -> str:
    # 1.50 -> "1.5", 1024.0 -> "1024"
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def format_bytes(size: Number) -> str:
    """
    Format a byte count with a binary unit suffix, e.g. 1536 -> "1.5K".

    Values below 10 keep two decimals, below 100 one, and larger values none.
    T is the largest unit; bigger values simply grow in T.
    """
    value = size
    unit_index = 0
    while abs(value) >= 1024 and unit_index < len(BYTE_UNITS) - 1:
        value /= 1024
        unit_index += 1

    if abs(value) >= 100:
        precision = 0
    elif abs(value) >= 10:
        precision = 1
    else:
        precision = 2

    scale = 10**precision
    rounded = round_half_up(value * scale) / scale
    return f"{_trim_number(rounded)}{BYTE_UNITS[unit_index]}"


def format_rate(bytes_per_second: Number) -> str:
    return f"{format_bytes(bytes_per_second)}/s"


def battery_icon(battery: BatteryInfo) -> str:
    if battery.is_full:
        return FULL_ICON

    bucket = min(max(round_half_up(battery.capacity / 10), 0), len(BATTERY_ICONS) - 1)
    if battery.is_charging:
        return CHARGING_ICONS[bucket]
    return BATTERY_ICONS[bucket]


def format_battery(battery: BatteryInfo) -> str:
    return f"{battery_icon(battery)} {battery.capacity}%"


def format_network(sample: NetworkSample) -> str:
    return (
        f"{UPLOAD_ICON} {format_rate(sample.tx_rate)} ({format_bytes(sample.tx_bytes)}) "
        f"{DOWNLOAD_ICON} {format_rate(sample.rx_rate)} ({format_bytes(sample.rx_bytes)})"
    )


def format_cpu(usage: CpuUsage) -> str:
    return f"{CPU_ICON} {usage.busy_percent}%"


def memory_percentage(meminfo: MemInfo) -> int:
    return percentage(meminfo.used, meminfo.total)


def format_memory(meminfo: MemInfo) -> str:
    return f"{MEMORY_ICON} {memory_percentage(meminfo)}%"


def format_volume(level: float) -> str:
    """
    Volume segment for a level in [0, 1].

    Anything not above zero shows as muted, which includes both the muted
    sentinel and a real, unmuted volume of 0.
    """
    if level > 0:
        return f"{VOLUME_ICON} {math.floor(level * 100)}%"
    return f"{MUTED_ICON} MUTED"


def format_time(now: Optional[datetime] = None) -> str:
    """Time of day in the current locale's format."""
    return (now or datetime.now()).strftime("%X")
