"""Fixed label strings for the dashboard."""

from __future__ import annotations

from botstatus_telemetry.models import DiskEntry, SystemSnapshot, Uptime

# Both marks must exist in the bundled face used when no font_path is configured.
BULLET = "·"
SEPARATOR = "·"
ELLIPSIS = "..."


def format_size(mb: float) -> str:
    if mb >= 1024 * 1024:
        return f"{mb / (1024 * 1024):.1f} TB"
    if mb >= 1024:
        return f"{mb / 1024:.1f} GB"
    return f"{mb:.0f} MB"


def format_uptime(uptime: Uptime) -> str:
    """Render as "N Days HH:MM:SS"; only exactly one day is singular, so zero reads "0 Days"."""
    unit = "Day" if uptime.days == 1 else "Days"
    return f"{uptime.days} {unit} {uptime.hours:02d}:{uptime.minutes:02d}:{uptime.seconds:02d}"


def title_text(bot_name: str, snapshot: SystemSnapshot) -> str:
    return f"{BULLET} {bot_name} on {snapshot.os} {snapshot.arch}"


def metric_texts(snapshot: SystemSnapshot) -> tuple[str, str, str]:
    return (
        f"{BULLET} {snapshot.backend}",
        f"{BULLET} Recv: {snapshot.received_total}",
        f"{BULLET} Sent: {snapshot.sent_total}",
    )


def uptime_texts(snapshot: SystemSnapshot) -> tuple[str, str]:
    return (
        f"{BULLET} System uptime:\n{format_uptime(snapshot.uptime)}",
        f"{BULLET} Bot uptime:\n{format_uptime(snapshot.bot_uptime)}",
    )


def cpu_title() -> str:
    return f"{BULLET} CPU"


def cpu_caption(snapshot: SystemSnapshot) -> str:
    text = f"Usage {snapshot.cpu_used_percent:.0f}% {SEPARATOR} {snapshot.cpu_cores} Cores"
    if snapshot.has_load_average:
        text += f" {SEPARATOR} Load {snapshot.cpu_load1:.2f} {snapshot.cpu_load5:.2f} {snapshot.cpu_load15:.2f}"
    return text


def memory_title() -> str:
    return f"{BULLET} Memory"


def usage_caption(used_mb: float, total_mb: float, percent: float) -> str:
    return f"{format_size(used_mb)} / {format_size(total_mb)} {SEPARATOR} {percent:.0f}%"


def memory_caption(snapshot: SystemSnapshot) -> str:
    return usage_caption(snapshot.mem_used_mb, snapshot.mem_all_mb, snapshot.mem_used_percent)


def disk_title(disk: DiskEntry) -> str:
    return f"{BULLET} {disk.name} ({format_size(disk.total_mb)})"


def disk_caption(disk: DiskEntry) -> str:
    return usage_caption(disk.used_mb, disk.total_mb, disk.used_percent)
