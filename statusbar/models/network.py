from pydantic import BaseModel, Field


class NetworkCounters(BaseModel):
    """Raw cumulative byte counters of one interface."""

    tx_bytes: int = Field(..., ge=0, description="Bytes sent since the interface came up")
    rx_bytes: int = Field(..., ge=0, description="Bytes received since the interface came up")
    captured_at: float = Field(..., description="Monotonic clock reading at capture time, in seconds")


class NetworkSample(BaseModel):
    """Counters of one interface plus the transfer rates derived from them."""

    tx_bytes: int = Field(..., ge=0)
    rx_bytes: int = Field(..., ge=0)
    tx_rate: int = Field(0, description="Bytes per second sent since the previous sample")
    rx_rate: int = Field(0, description="Bytes per second received since the previous sample")
