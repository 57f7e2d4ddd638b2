"""Status dashboard composer with content-dependent canvas height."""

from __future__ import annotations

import logging
import math
import time

from PIL import Image

from botstatus_telemetry.models import SystemSnapshot

from .composer import Composer
from .encoding import DEFAULT_SCHEME, encode_png, to_data_url, to_image_ref
from .layout import compute_geometry
from .metrics import TextMetrics
from .models import CanvasGeometry, FontRole, LayoutConstants, MeterSlot, Palette
from .palette import DEFAULT_LAYOUT, DEFAULT_PALETTE
from .resources import RenderResources

logger = logging.getLogger("botstatus.renderer")


class DashboardRenderer:
    """Draws the badges, CPU, memory and disk panels and encodes the result."""

    def __init__(
        self,
        resources: RenderResources,
        bot_name: str = "Bot",
        constants: LayoutConstants = DEFAULT_LAYOUT,
        palette: Palette = DEFAULT_PALETTE,
        scheme: str = DEFAULT_SCHEME,
    ) -> None:
        self.resources = resources
        self.bot_name = bot_name
        self.constants = constants
        self.palette = palette
        self.scheme = scheme
        self.metrics = TextMetrics(resources, constants)

    def geometry(self, snapshot: SystemSnapshot) -> CanvasGeometry:
        return compute_geometry(snapshot, self.metrics, bot_name=self.bot_name)

    def render(self, snapshot: SystemSnapshot) -> str:
        start = time.perf_counter()
        image = self.render_image(snapshot)
        ref = to_image_ref(encode_png(image), self.scheme)
        logger.debug(
            f"dashboard rendered size={image.width}x{image.height} disks={len(snapshot.disks)} "
            f"ms={(time.perf_counter() - start) * 1000:.1f}",
            extra={"event": "dashboard_rendered"},
        )
        return ref

    def render_image(self, snapshot: SystemSnapshot) -> Image.Image:
        geometry = self.geometry(snapshot)
        surface = self._background(geometry.total_height)
        composer = Composer(surface, self.metrics, self.palette)

        self._draw_badges(composer, geometry)
        for meter in geometry.meters:
            self._draw_meter(composer, meter)
        return surface.convert("RGB")

    def preview_data_url(self, snapshot: SystemSnapshot) -> str:
        return to_data_url(encode_png(self.render_image(snapshot)))

    def _background(self, height: int) -> Image.Image:
        width = self.constants.width
        bg = self.resources.background
        scale = max(width / bg.width, height / bg.height)
        if scale > 1.0:
            bg = bg.resize(
                (math.ceil(bg.width * scale), math.ceil(bg.height * scale)),
                Image.Resampling.LANCZOS,
            )
        left = (bg.width - width) // 2
        top = (bg.height - height) // 2
        return bg.crop((left, top, left + width, top + height)).convert("RGBA")

    def _draw_badges(self, composer: Composer, g: CanvasGeometry) -> None:
        p = self.palette
        composer.draw_panel(g.badges_panel, self.constants.panel_radius, p.panel)

        title = g.title_badge
        composer.draw_badge(title.text, title.rect.x, title.rect.y, p.accent, role=FontRole.TITLE)

        for slot, fill in zip(g.metric_badges, (p.accent, p.success, p.warning)):
            composer.draw_badge(slot.text, slot.rect.x, slot.rect.y, fill)

        for slot in g.uptime_badges:
            composer.draw_badge(slot.text, slot.rect.x, slot.rect.y, p.success, text_fill=p.text_dark)

    def _draw_meter(self, composer: Composer, meter: MeterSlot) -> None:
        p = self.palette
        composer.draw_panel(meter.panel, self.constants.panel_radius, p.panel)
        composer.draw_badge(meter.title.text, meter.title.rect.x, meter.title.rect.y, p.accent)
        if meter.detail is not None:
            composer.draw_badge(meter.detail.text, meter.detail.rect.x, meter.detail.rect.y, p.neutral)
        composer.draw_progress_bar(meter.bar, meter.percent, meter.kind)
        composer.draw_text(meter.caption, meter.bar.x, meter.caption_y, fill=p.text_dark)
