from typing import Dict

from pydantic import BaseModel, Field


class MemInfo(BaseModel):
    """Parsed /proc/meminfo: field name -> size in kilobytes."""

    fields: Dict[str, int] = Field(
        default_factory=dict,
        description="All parsed fields, e.g. {'MemTotal': 16318480, ...}",
    )

    @property
    def total(self) -> int:
        return self.fields["MemTotal"]

    @property
    def available(self) -> int:
        return self.fields["MemAvailable"]

    @property
    def used(self) -> int:
        return self.total - self.available
