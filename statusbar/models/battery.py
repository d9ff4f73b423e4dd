from pydantic import BaseModel, Field


class BatteryInfo(BaseModel):
    """State of a single battery device as exposed below /sys/class/power_supply."""

    status: str = Field(
        ...,
        description="Charging status, e.g. Charging, Discharging, Full, Not charging",
    )
    capacity: int = Field(
        ...,
        ge=0,
        description="Remaining charge in percent as reported by the kernel",
    )
    energy_full: int = Field(..., ge=0, description="Energy when full, in µWh")
    energy_now: int = Field(..., ge=0, description="Current energy, in µWh")

    @property
    def is_charging(self) -> bool:
        return self.status.startswith("Charging")

    @property
    def is_full(self) -> bool:
        return self.status == "Full"
