"""System snapshot models and providers for BotStatus."""

from .counters import BotCounters
from .models import DiskEntry, SystemSnapshot, Uptime
from .provider import TelemetryProvider

__all__ = [
    "BotCounters",
    "DiskEntry",
    "SystemSnapshot",
    "TelemetryProvider",
    "Uptime",
]
