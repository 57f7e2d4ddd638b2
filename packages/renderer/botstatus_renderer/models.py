"""Typed renderer models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FontRole(str, Enum):
    TITLE = "title"
    CONTENT = "content"


class MetricKind(str, Enum):
    CPU = "cpu"
    MEMORY = "memory"
    DISK = "disk"


class Band(str, Enum):
    SUCCESS = "success"
    WARNING = "warning"
    DANGER = "danger"


@dataclass(frozen=True)
class Palette:
    """Colors are #RRGGBBAA strings."""

    accent: str
    success: str
    warning: str
    danger: str
    shadow: str
    panel: str
    track: str
    neutral: str
    text_light: str
    text_dark: str
    background_start: str
    background_end: str

    def for_band(self, band: Band) -> str:
        return getattr(self, band.value)


@dataclass(frozen=True)
class LayoutConstants:
    width: int = 1280
    outer_margin: int = 48
    panel_gap: int = 48
    panel_padding: int = 52
    panel_radius: int = 64
    badge_padding_x: int = 58
    badge_padding_y: int = 32
    badge_margin: int = 24
    badge_radius: int = 50
    shadow_offset_x: int = 10
    shadow_offset_y: int = 10
    bar_height: int = 48
    bar_radius: int = 24
    line_spacing: int = 12
    title_font_size: int = 48
    content_font_size: int = 36
    reference_glyph: str = "Hg"


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    w: int
    h: int

    @property
    def right(self) -> int:
        return self.x + self.w

    @property
    def bottom(self) -> int:
        return self.y + self.h

    def shifted(self, dx: int, dy: int) -> "Rect":
        return Rect(self.x + dx, self.y + dy, self.w, self.h)


@dataclass(frozen=True)
class BadgeSlot:
    text: str
    rect: Rect
    role: FontRole
    text_width: int


@dataclass(frozen=True)
class MeterSlot:
    kind: MetricKind
    percent: float
    panel: Rect
    title: BadgeSlot
    detail: BadgeSlot | None
    bar: Rect
    caption: str
    caption_y: int


@dataclass(frozen=True)
class CanvasGeometry:
    width: int
    total_height: int
    title_line_height: int
    content_line_height: int
    badges_panel_height: int
    meter_panel_height: int
    disk_slot_height: int
    badges_panel: Rect
    title_badge: BadgeSlot
    metric_badges: tuple[BadgeSlot, ...]
    uptime_badges: tuple[BadgeSlot, ...]
    cpu: MeterSlot
    memory: MeterSlot
    disks: tuple[MeterSlot, ...]

    @property
    def fixed_height(self) -> int:
        """Height of the canvas without any disk panels."""
        return self.total_height - len(self.disks) * self.disk_slot_height

    @property
    def meters(self) -> tuple[MeterSlot, ...]:
        return (self.cpu, self.memory) + self.disks
