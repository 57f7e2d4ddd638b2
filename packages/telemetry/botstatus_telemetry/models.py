"""Typed telemetry models."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(frozen=True)
class DiskEntry:
    name: str
    total_mb: float
    used_mb: float
    used_percent: float


@dataclass(frozen=True)
class Uptime:
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    @classmethod
    def from_seconds(cls, total: float) -> "Uptime":
        seconds = max(int(total), 0)
        minutes, seconds = divmod(seconds, 60)
        hours, minutes = divmod(minutes, 60)
        days, hours = divmod(hours, 24)
        return cls(days=days, hours=hours, minutes=minutes, seconds=seconds)

    @property
    def total_seconds(self) -> int:
        return ((self.days * 24 + self.hours) * 60 + self.minutes) * 60 + self.seconds


@dataclass(frozen=True)
class SystemSnapshot:
    """One immutable set of metrics; sizes are MB, percentages are 0-100."""

    cpu_used_percent: float
    cpu_cores: int
    cpu_info: str
    mem_all_mb: float
    mem_used_mb: float
    mem_used_percent: float
    uptime: Uptime
    bot_uptime: Uptime
    os: str
    arch: str
    backend: str
    sent_total: int
    received_total: int
    disks: tuple[DiskEntry, ...] = field(default_factory=tuple)
    cpu_load1: float | None = None
    cpu_load5: float | None = None
    cpu_load15: float | None = None

    @property
    def has_load_average(self) -> bool:
        return None not in (self.cpu_load1, self.cpu_load5, self.cpu_load15)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["disks"] = [asdict(d) for d in self.disks]
        return data

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "SystemSnapshot":
        data = dict(raw)
        data["disks"] = tuple(DiskEntry(**d) for d in data.get("disks", ()) or ())
        data["uptime"] = Uptime(**(data.get("uptime") or {}))
        data["bot_uptime"] = Uptime(**(data.get("bot_uptime") or {}))
        return cls(**data)
