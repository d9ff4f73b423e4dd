import asyncio
from pathlib import Path
from typing import Optional

from statusbar.models.battery import BatteryInfo
from statusbar.services.pseudo_files import exists, read_int, read_text


async def read_battery(power_supply_dir: str, device: str) -> Optional[BatteryInfo]:
    """
    Read the state of one battery device.

    Returns None when the device directory does not exist (e.g. desktops).
    Once the device is present, any unreadable attribute raises SourceIOError.
    """
    device_dir = Path(power_supply_dir) / device
    if not exists(device_dir):
        return None

    status, capacity, energy_full, energy_now = await asyncio.gather(
        read_text(device_dir / "status"),
        read_int(device_dir / "capacity"),
        read_int(device_dir / "energy_full"),
        read_int(device_dir / "energy_now"),
    )

    return BatteryInfo(
        status=status.strip(),
        capacity=capacity,
        energy_full=energy_full,
        energy_now=energy_now,
    )
