"""Fixed dashboard palette, layout defaults, and threshold color bands."""

from __future__ import annotations

from .models import Band, LayoutConstants, MetricKind, Palette

DEFAULT_PALETTE = Palette(
    accent="#007D9CC0",
    success="#67C23AC0",
    warning="#E6A23CC0",
    danger="#F56C6CC0",
    shadow="#00000070",
    panel="#FFFFFF9C",
    track="#0000004D",
    neutral="#606266C0",
    text_light="#FFFFFFFF",
    text_dark="#000000FF",
    background_start="#1A253F",
    background_end="#35D9FF",
)

DEFAULT_LAYOUT = LayoutConstants()

# (upper bound exclusive, band); the last band also takes everything above it.
_CPU_BANDS: tuple[tuple[float, Band], ...] = (
    (40.0, Band.SUCCESS),
    (80.0, Band.WARNING),
    (100.0, Band.DANGER),
)
_MEMORY_BANDS = _CPU_BANDS
_DISK_BANDS = _CPU_BANDS

BAND_TABLES: dict[MetricKind, tuple[tuple[float, Band], ...]] = {
    MetricKind.CPU: _CPU_BANDS,
    MetricKind.MEMORY: _MEMORY_BANDS,
    MetricKind.DISK: _DISK_BANDS,
}


def band_for(kind: MetricKind, percent: float) -> Band:
    table = BAND_TABLES[kind]
    for upper, band in table[:-1]:
        if percent < upper:
            return band
    return table[-1][1]


def color_for(kind: MetricKind, percent: float, palette: Palette = DEFAULT_PALETTE) -> str:
    return palette.for_band(band_for(kind, percent))


def hex_to_rgba(value: str) -> tuple[int, int, int, int]:
    raw = value.lstrip("#")
    if len(raw) == 6:
        raw += "FF"
    if len(raw) != 8:
        raise ValueError(f"Unsupported color: {value}")
    return tuple(int(raw[i : i + 2], 16) for i in (0, 2, 4, 6))  # type: ignore[return-value]
