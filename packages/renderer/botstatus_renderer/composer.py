"""Drawing primitives shared by every panel, badge, and bar."""

from __future__ import annotations

from PIL import Image, ImageDraw

from .metrics import TextMetrics
from .models import FontRole, MetricKind, Palette, Rect
from .palette import DEFAULT_PALETTE, color_for, hex_to_rgba


class Composer:
    """Draws onto one RGBA surface.

    Translucent shapes are rendered on a layer the size of the shape and
    alpha-composited, so a fill over its shadow blends instead of replacing it.
    """

    def __init__(self, surface: Image.Image, metrics: TextMetrics, palette: Palette = DEFAULT_PALETTE) -> None:
        if surface.mode != "RGBA":
            raise ValueError("Composer surface must be RGBA")
        self.surface = surface
        self.metrics = metrics
        self.constants = metrics.constants
        self.palette = palette

    def _fill_rounded(self, rect: Rect, radius: int, fill: str) -> None:
        if rect.w <= 0 or rect.h <= 0:
            return
        layer = Image.new("RGBA", (rect.w, rect.h), (0, 0, 0, 0))
        ImageDraw.Draw(layer).rounded_rectangle(
            (0, 0, rect.w - 1, rect.h - 1),
            radius=min(radius, rect.w // 2, rect.h // 2),
            fill=hex_to_rgba(fill),
        )
        self.surface.alpha_composite(layer, dest=(rect.x, rect.y))

    def draw_panel(self, rect: Rect, radius: int, fill: str) -> None:
        c = self.constants
        self._fill_rounded(rect.shifted(c.shadow_offset_x, c.shadow_offset_y), radius, self.palette.shadow)
        self._fill_rounded(rect, radius, fill)

    def draw_text(
        self,
        text: str,
        x: int,
        y: int,
        role: FontRole = FontRole.CONTENT,
        fill: str | None = None,
        align: str = "left",
    ) -> None:
        """Draw ``text`` with its ink starting at ``x`` and its reference line top at ``y``."""
        left = self.metrics.bbox(text, role)[0]
        ImageDraw.Draw(self.surface).multiline_text(
            (x - left, y - self.metrics.reference_top(role)),
            text,
            font=self.metrics.resources.font(role),
            fill=hex_to_rgba(fill or self.palette.text_dark),
            spacing=self.constants.line_spacing,
            align=align,
        )

    def draw_badge(
        self,
        text: str,
        x: int,
        y: int,
        fill: str,
        role: FontRole = FontRole.CONTENT,
        text_fill: str | None = None,
    ) -> Rect:
        c = self.constants
        width, height = self.metrics.badge_size(text, role)
        rect = Rect(x, y, width, height)
        self.draw_panel(rect, c.badge_radius, fill)
        self.draw_text(
            text,
            x + c.badge_padding_x,
            y + c.badge_padding_y,
            role=role,
            fill=text_fill or self.palette.text_light,
            align="center" if "\n" in text else "left",
        )
        return rect

    def draw_progress_bar(self, rect: Rect, percent: float, kind: MetricKind) -> str:
        """Draw track and fill; return the fill color chosen for ``percent``."""
        c = self.constants
        self.draw_panel(rect, c.bar_radius, self.palette.track)
        color = color_for(kind, percent, self.palette)
        filled = int(round(rect.w * min(max(percent, 0.0), 100.0) / 100.0))
        self._fill_rounded(Rect(rect.x, rect.y, filled, rect.h), c.bar_radius, color)
        return color
