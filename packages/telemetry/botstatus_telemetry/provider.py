"""Cross-platform snapshot provider backed by psutil."""

from __future__ import annotations

import logging
import platform
import re
import time
from pathlib import Path

import psutil

from .counters import BotCounters
from .models import DiskEntry, SystemSnapshot, Uptime

_MB = 1024 * 1024
_CLOCK_SUFFIX_RE = re.compile(r"( @ ).*Hz")

logger = logging.getLogger("botstatus.telemetry")


def _cpu_model() -> str:
    cpuinfo = Path("/proc/cpuinfo")
    if cpuinfo.exists():
        try:
            for line in cpuinfo.read_text(encoding="utf-8", errors="replace").splitlines():
                if line.lower().startswith("model name"):
                    return _CLOCK_SUFFIX_RE.sub("", line.split(":", 1)[1].strip())
        except OSError:
            pass
    return _CLOCK_SUFFIX_RE.sub("", platform.processor() or "")


def _load_average() -> tuple[float | None, float | None, float | None]:
    try:
        load1, load5, load15 = psutil.getloadavg()
    except (AttributeError, OSError):
        return None, None, None
    return float(load1), float(load5), float(load15)


def _disks(all_partitions: bool) -> tuple[DiskEntry, ...]:
    entries: list[DiskEntry] = []
    for part in psutil.disk_partitions(all=all_partitions):
        try:
            usage = psutil.disk_usage(part.mountpoint)
        except (PermissionError, OSError) as exc:
            logger.debug(f"skipping mount point {part.mountpoint}: {exc}", extra={"event": "disk_skipped"})
            continue
        entries.append(
            DiskEntry(
                name=part.mountpoint,
                total_mb=float(usage.total // _MB),
                used_mb=float(usage.used // _MB),
                used_percent=float(usage.percent),
            )
        )
    return tuple(entries)


class TelemetryProvider:
    """Single polling provider with normalized units."""

    def __init__(
        self,
        counters: BotCounters | None = None,
        cpu_sample_ms: int = 200,
        all_partitions: bool = False,
    ) -> None:
        self.counters = counters or BotCounters()
        self.cpu_sample_ms = cpu_sample_ms
        self.all_partitions = all_partitions
        self._cpu_info = _cpu_model()

    def poll(self) -> SystemSnapshot:
        cpu_percent = float(psutil.cpu_percent(interval=self.cpu_sample_ms / 1000.0))
        load1, load5, load15 = _load_average()

        vm = psutil.virtual_memory()
        mem_used = vm.total - vm.free
        mem_percent = (mem_used / vm.total * 100.0) if vm.total else 0.0

        now = time.time()
        return SystemSnapshot(
            cpu_used_percent=cpu_percent,
            cpu_cores=int(psutil.cpu_count(logical=True) or 0),
            cpu_info=self._cpu_info,
            cpu_load1=load1,
            cpu_load5=load5,
            cpu_load15=load15,
            mem_all_mb=float(vm.total // _MB),
            mem_used_mb=float(mem_used // _MB),
            mem_used_percent=mem_percent,
            disks=_disks(self.all_partitions),
            uptime=Uptime.from_seconds(now - psutil.boot_time()),
            bot_uptime=self.counters.uptime(now),
            os=platform.system().lower(),
            arch=platform.machine().lower(),
            backend=self.counters.backend,
            sent_total=self.counters.sent_total,
            received_total=self.counters.received_total,
        )
