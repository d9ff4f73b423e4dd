import os
import shlex
from functools import lru_cache
from typing import List

from pydantic import BaseModel, Field


def _env(name: str, default: str) -> str:
    # Empty values behave like unset ones
    return os.getenv(name) or default


def _env_float(name: str, default: str) -> float:
    raw = _env(name, default)
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc


class Settings(BaseModel):
    # Sampling loop
    update_interval: float = Field(
        default=1.0,
        gt=0,
        description="Seconds between two status line updates",
    )

    # Metric sources
    net_interface: str = Field(
        default="wlp3s0",
        description="Network interface whose traffic is shown, e.g. wlp3s0 or eth0",
    )
    battery_device: str = Field(
        default="BAT0",
        description="Battery device name below the power_supply directory",
    )
    volume_command: List[str] = Field(
        default_factory=lambda: ["wpctl", "get-volume", "@DEFAULT_AUDIO_SINK@"],
        description="Command printing the current volume, e.g. 'Volume: 0.55 [MUTED]'",
    )

    # Kernel pseudo-files (overridable for containers and tests)
    proc_stat_path: str = Field(default="/proc/stat", description="Aggregate CPU statistics")
    meminfo_path: str = Field(default="/proc/meminfo", description="Memory statistics")
    power_supply_dir: str = Field(
        default="/sys/class/power_supply",
        description="Directory holding one subdirectory per power supply",
    )
    net_class_dir: str = Field(
        default="/sys/class/net",
        description="Directory holding one subdirectory per network interface",
    )

    # Output
    separator: str = Field(default=" | ", description="Text placed between two segments")
    min_rate_interval: float = Field(
        default=0.001,
        ge=0,
        description="Minimum seconds between two network samples for a rate to be computed",
    )
    log_level: str = Field(default="INFO", description="Root logger level")

    @classmethod
    def from_env(cls) -> "Settings":
        raw_volume_command = os.getenv("STATUS_VOLUME_COMMAND", "")
        volume_command = shlex.split(raw_volume_command) or None

        values = dict(
            update_interval=_env_float("STATUS_UPDATE_INTERVAL", "1.0"),
            net_interface=_env("STATUS_NET_INTERFACE", "wlp3s0"),
            battery_device=_env("STATUS_BATTERY_DEVICE", "BAT0"),
            proc_stat_path=_env("STATUS_PROC_STAT", "/proc/stat"),
            meminfo_path=_env("STATUS_MEMINFO", "/proc/meminfo"),
            power_supply_dir=_env("STATUS_POWER_SUPPLY_DIR", "/sys/class/power_supply"),
            net_class_dir=_env("STATUS_NET_CLASS_DIR", "/sys/class/net"),
            separator=_env("STATUS_SEPARATOR", " | "),
            min_rate_interval=_env_float("STATUS_MIN_RATE_INTERVAL", "0.001"),
            log_level=_env("STATUS_LOG_LEVEL", "INFO").upper(),
        )
        if volume_command:
            values["volume_command"] = volume_command

        return cls(**values)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
