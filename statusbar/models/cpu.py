from pydantic import BaseModel, Field

# Column order of the aggregate "cpu" line in /proc/stat
CPU_FIELDS = (
    "user",
    "nice",
    "system",
    "idle",
    "iowait",
    "irq",
    "softirq",
    "steal",
    "guest",
    "guest_nice",
)


class _CpuTicks(BaseModel):
    user: int
    nice: int
    system: int
    idle: int
    iowait: int
    irq: int
    softirq: int
    steal: int
    guest: int
    guest_nice: int

    @property
    def total(self) -> int:
        return sum(getattr(self, name) for name in CPU_FIELDS)

    @property
    def idle_total(self) -> int:
        return self.idle + self.iowait

    @property
    def busy_total(self) -> int:
        return self.total - self.idle_total


class CpuSample(_CpuTicks):
    """Cumulative CPU tick counters since boot, read from the aggregate cpu line."""

    user: int = Field(..., ge=0)
    nice: int = Field(..., ge=0)
    system: int = Field(..., ge=0)
    idle: int = Field(..., ge=0)
    iowait: int = Field(..., ge=0)
    irq: int = Field(..., ge=0)
    softirq: int = Field(..., ge=0)
    steal: int = Field(..., ge=0)
    guest: int = Field(..., ge=0)
    guest_nice: int = Field(..., ge=0)


class CpuDelta(_CpuTicks):
    """
    Field-wise difference of two CpuSamples.

    Fields are signed: a counter reset between two samples shows up as a
    negative value and is left for the display layer to deal with.
    """

    @classmethod
    def between(cls, previous: CpuSample, current: CpuSample) -> "CpuDelta":
        return cls(
            **{
                name: getattr(current, name) - getattr(previous, name)
                for name in CPU_FIELDS
            }
        )

    @classmethod
    def from_sample(cls, sample: CpuSample) -> "CpuDelta":
        return cls(**sample.model_dump())


class CpuUsage(BaseModel):
    """CPU utilisation over one tick, in whole percent."""

    busy_percent: int = Field(..., ge=0, le=100, description="Non-idle share of all ticks")
    iowait_percent: int = Field(..., ge=0, le=100, description="Share of ticks spent in iowait")
