"""Canvas geometry for one snapshot.

Every vertical offset is produced by a ``_Cursor`` that walks down the canvas
and every horizontal badge offset by a ``_Row`` that walks right, so the total
height and the offsets used for drawing always come from the same sums.
"""

from __future__ import annotations

from botstatus_telemetry.models import SystemSnapshot

from . import labels
from .metrics import TextMetrics
from .models import BadgeSlot, CanvasGeometry, FontRole, LayoutConstants, MeterSlot, MetricKind, Rect


class _Cursor:
    def __init__(self, start: int) -> None:
        self.y = start

    def take(self, height: int) -> int:
        top = self.y
        self.y += height
        return top

    def skip(self, gap: int) -> None:
        self.y += gap


class _Row:
    def __init__(self, start: int, margin: int, limit: int) -> None:
        self.start = start
        self.x = start
        self.margin = margin
        self.limit = limit

    @property
    def room(self) -> int:
        return self.limit - self.x

    @property
    def empty(self) -> bool:
        return self.x == self.start

    def place(self, width: int) -> int:
        left = self.x
        self.x += width + self.margin
        return left

    def wrap(self) -> None:
        self.x = self.start


def _badge(metrics: TextMetrics, text: str, role: FontRole, row: _Row, y: int) -> BadgeSlot:
    width, height = metrics.badge_size(text, role)
    text_width, _ = metrics.measure(text, role)
    return BadgeSlot(text=text, rect=Rect(row.place(width), y, width, height), role=role, text_width=text_width)


def _badge_rows(
    metrics: TextMetrics,
    texts: tuple[str, ...],
    role: FontRole,
    row: _Row,
    rows: _Cursor,
    lines: int = 1,
) -> tuple[BadgeSlot, ...]:
    """Place badges left to right, starting a new row when the next one would cross ``row.limit``."""
    c = metrics.constants
    height = metrics.block_height(lines, role) + 2 * c.badge_padding_y
    y = rows.take(height)
    slots = []
    for text in texts:
        text = metrics.fit(text, role, row.limit - row.start, labels.ELLIPSIS)
        width, _ = metrics.badge_size(text, role)
        if not row.empty and width > row.room:
            row.wrap()
            rows.skip(c.badge_margin)
            y = rows.take(height)
        slots.append(_badge(metrics, text, role, row, y))
    return tuple(slots)


def meter_panel_height(metrics: TextMetrics, c: LayoutConstants) -> int:
    badge = metrics.block_height(1, FontRole.CONTENT) + 2 * c.badge_padding_y
    caption = metrics.line_height(FontRole.CONTENT)
    return 2 * c.panel_padding + badge + c.badge_margin + c.bar_height + c.badge_margin + caption


def _meter(
    metrics: TextMetrics,
    c: LayoutConstants,
    panel: Rect,
    kind: MetricKind,
    percent: float,
    title: str,
    caption: str,
    detail: str | None = None,
) -> MeterSlot:
    inner_x = panel.x + c.panel_padding
    rows = _Cursor(panel.y + c.panel_padding)
    row = _Row(inner_x, c.badge_margin, panel.right - c.panel_padding)

    badge_y = rows.take(metrics.block_height(1, FontRole.CONTENT) + 2 * c.badge_padding_y)
    title = metrics.fit(title, FontRole.CONTENT, row.room, labels.ELLIPSIS)
    title_slot = _badge(metrics, title, FontRole.CONTENT, row, badge_y)

    # The detail badge shares the title row; it is shortened to the room left or dropped.
    detail_slot = None
    if detail:
        detail = metrics.fit(detail, FontRole.CONTENT, row.room, labels.ELLIPSIS)
        if detail != labels.ELLIPSIS and metrics.badge_size(detail, FontRole.CONTENT)[0] <= row.room:
            detail_slot = _badge(metrics, detail, FontRole.CONTENT, row, badge_y)
    rows.skip(c.badge_margin)

    bar = Rect(inner_x, rows.take(c.bar_height), panel.w - 2 * c.panel_padding, c.bar_height)
    rows.skip(c.badge_margin)

    return MeterSlot(
        kind=kind,
        percent=percent,
        panel=panel,
        title=title_slot,
        detail=detail_slot,
        bar=bar,
        caption=caption,
        caption_y=rows.take(metrics.line_height(FontRole.CONTENT)),
    )


def compute_geometry(
    snapshot: SystemSnapshot,
    metrics: TextMetrics,
    bot_name: str = "Bot",
) -> CanvasGeometry:
    """Lay out the dashboard for ``snapshot``; never fails, an empty disk list adds no panels."""
    c = metrics.constants
    panel_x = c.outer_margin
    panel_w = c.width - 2 * c.outer_margin
    inner_x = panel_x + c.panel_padding
    inner_right = panel_x + panel_w - c.panel_padding

    meter_h = meter_panel_height(metrics, c)
    canvas = _Cursor(c.outer_margin)

    # Badges panel: title row, traffic row, uptime row. Rows that overflow wrap,
    # so the panel height is whatever the rows took.
    rows = _Cursor(canvas.y + c.panel_padding)
    (title_badge,) = _badge_rows(
        metrics,
        (labels.title_text(bot_name, snapshot),),
        FontRole.TITLE,
        _Row(inner_x, c.badge_margin, inner_right),
        rows,
    )
    rows.skip(c.badge_margin)
    metric_badges = _badge_rows(
        metrics,
        labels.metric_texts(snapshot),
        FontRole.CONTENT,
        _Row(inner_x, c.badge_margin, inner_right),
        rows,
    )
    rows.skip(c.badge_margin)
    uptime_badges = _badge_rows(
        metrics,
        labels.uptime_texts(snapshot),
        FontRole.CONTENT,
        _Row(inner_x, c.badge_margin, inner_right),
        rows,
        lines=2,
    )
    rows.skip(c.panel_padding)

    badges_h = rows.y - canvas.y
    badges_panel = Rect(panel_x, canvas.take(badges_h), panel_w, badges_h)

    canvas.skip(c.panel_gap)
    cpu = _meter(
        metrics,
        c,
        Rect(panel_x, canvas.take(meter_h), panel_w, meter_h),
        MetricKind.CPU,
        snapshot.cpu_used_percent,
        labels.cpu_title(),
        labels.cpu_caption(snapshot),
        detail=snapshot.cpu_info or None,
    )

    canvas.skip(c.panel_gap)
    memory = _meter(
        metrics,
        c,
        Rect(panel_x, canvas.take(meter_h), panel_w, meter_h),
        MetricKind.MEMORY,
        snapshot.mem_used_percent,
        labels.memory_title(),
        labels.memory_caption(snapshot),
    )

    disks = []
    for disk in snapshot.disks:
        canvas.skip(c.panel_gap)
        disks.append(
            _meter(
                metrics,
                c,
                Rect(panel_x, canvas.take(meter_h), panel_w, meter_h),
                MetricKind.DISK,
                disk.used_percent,
                labels.disk_title(disk),
                labels.disk_caption(disk),
            )
        )

    canvas.skip(c.outer_margin)
    return CanvasGeometry(
        width=c.width,
        total_height=canvas.y,
        title_line_height=metrics.line_height(FontRole.TITLE),
        content_line_height=metrics.line_height(FontRole.CONTENT),
        badges_panel_height=badges_h,
        meter_panel_height=meter_h,
        disk_slot_height=meter_h + c.panel_gap,
        badges_panel=badges_panel,
        title_badge=title_badge,
        metric_badges=metric_badges,
        uptime_badges=uptime_badges,
        cpu=cpu,
        memory=memory,
        disks=tuple(disks),
    )
