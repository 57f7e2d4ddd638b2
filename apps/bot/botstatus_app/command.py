"""Chat "status" command: poll a snapshot, render it, reply with the image."""

from __future__ import annotations

from dataclasses import replace

from botstatus_core.config import AppConfig
from botstatus_core.logging_setup import get_logger
from botstatus_renderer import DEFAULT_LAYOUT, DashboardRenderer, LayoutConstants, ResourceCache, load_resources
from botstatus_telemetry import BotCounters, TelemetryProvider


def layout_from_config(cfg: AppConfig) -> LayoutConstants:
    return replace(
        DEFAULT_LAYOUT,
        width=cfg.render.width,
        title_font_size=cfg.render.title_font_size,
        content_font_size=cfg.render.content_font_size,
    )


def resource_cache_from_config(cfg: AppConfig) -> ResourceCache:
    layout = layout_from_config(cfg)
    return ResourceCache(
        lambda: load_resources(
            font_path=cfg.render.font_path,
            background_path=cfg.render.background_path,
            title_size=layout.title_font_size,
            content_size=layout.content_font_size,
            background_size=layout.width,
        )
    )


class StatusCommand:
    def __init__(
        self,
        provider: TelemetryProvider,
        resources: ResourceCache,
        bot_name: str = "Bot",
        keywords: tuple[str, ...] = ("status", "状态", "stat"),
        constants: LayoutConstants = DEFAULT_LAYOUT,
        scheme: str = "base64",
    ) -> None:
        self.provider = provider
        self.resources = resources
        self.bot_name = bot_name
        self.keywords = tuple(k.lower() for k in keywords)
        self.constants = constants
        self.scheme = scheme
        self.logger = get_logger("command")

    @classmethod
    def from_config(cls, cfg: AppConfig, counters: BotCounters | None = None) -> "StatusCommand":
        provider = TelemetryProvider(
            counters=counters or BotCounters(backend=cfg.bot.backend),
            cpu_sample_ms=cfg.telemetry.cpu_sample_ms,
            all_partitions=cfg.telemetry.all_partitions,
        )
        return cls(
            provider=provider,
            resources=resource_cache_from_config(cfg),
            bot_name=cfg.bot.name,
            keywords=tuple(cfg.bot.command_keywords),
            constants=layout_from_config(cfg),
            scheme=cfg.render.image_scheme,
        )

    @property
    def counters(self) -> BotCounters:
        return self.provider.counters

    def matches(self, text: str) -> bool:
        word = text.strip().lstrip("/").lower()
        return word in self.keywords

    def handle(self, text: str) -> str | None:
        """Return the image reference for a status command, or None for other messages."""
        self.counters.record_incoming()
        if not self.matches(text):
            return None

        renderer = DashboardRenderer(
            self.resources.get(),
            bot_name=self.bot_name,
            constants=self.constants,
            scheme=self.scheme,
        )
        ref = renderer.render(self.provider.poll())
        self.counters.record_outgoing()
        self.logger.info("status reply sent", extra={"event": "status_reply"})
        return ref
