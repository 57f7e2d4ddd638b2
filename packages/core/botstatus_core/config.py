"""Persistent app settings schema and load/save helpers."""

from __future__ import annotations

import json
import os
import platform
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any


CONFIG_VERSION = 1
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class BotConfig:
    name: str = "Bot"
    backend: str = "console"
    command_keywords: list[str] = field(default_factory=lambda: ["status", "状态", "stat"])


@dataclass
class RenderConfig:
    width: int = 1280
    title_font_size: int = 48
    content_font_size: int = 36
    font_path: str | None = None
    background_path: str | None = None
    image_scheme: str = "base64"


@dataclass
class TelemetryConfig:
    cpu_sample_ms: int = 200
    all_partitions: bool = False


@dataclass
class LoggingConfig:
    level: str = "INFO"
    keep_log_files: int = 7
    console: bool = True


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    bot: BotConfig = field(default_factory=BotConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    telemetry: TelemetryConfig = field(default_factory=TelemetryConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def config_root() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "BotStatus"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "BotStatus"
    return Path.home() / ".config" / "botstatus"


def config_path() -> Path:
    return config_root() / "config.json"


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    for k, v in (raw or {}).items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _normalize_bot(cfg: AppConfig) -> None:
    cfg.bot.name = str(cfg.bot.name or "Bot")
    keywords = [str(k).strip().lower() for k in (cfg.bot.command_keywords or []) if str(k).strip()]
    cfg.bot.command_keywords = keywords or BotConfig().command_keywords


def _normalize_render(cfg: AppConfig) -> None:
    cfg.render.width = max(640, min(4096, int(cfg.render.width)))
    cfg.render.title_font_size = max(8, min(256, int(cfg.render.title_font_size)))
    cfg.render.content_font_size = max(8, min(256, int(cfg.render.content_font_size)))
    if not cfg.render.image_scheme:
        cfg.render.image_scheme = "base64"


def _normalize_telemetry(cfg: AppConfig) -> None:
    cfg.telemetry.cpu_sample_ms = max(0, min(2000, int(cfg.telemetry.cpu_sample_ms)))
    cfg.telemetry.all_partitions = bool(cfg.telemetry.all_partitions)


def _normalize_logging(cfg: AppConfig) -> None:
    cfg.logging.level = str(cfg.logging.level).upper()
    if cfg.logging.level not in _LOG_LEVELS:
        cfg.logging.level = "INFO"
    cfg.logging.keep_log_files = max(2, int(cfg.logging.keep_log_files))


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return AppConfig()
    if not isinstance(data, dict):
        return AppConfig()

    cfg = AppConfig(
        config_version=int(data.get("config_version", CONFIG_VERSION)),
        bot=_merge(BotConfig, data.get("bot", {})),
        render=_merge(RenderConfig, data.get("render", {})),
        telemetry=_merge(TelemetryConfig, data.get("telemetry", {})),
        logging=_merge(LoggingConfig, data.get("logging", {})),
    )

    _normalize_bot(cfg)
    _normalize_render(cfg)
    _normalize_telemetry(cfg)
    _normalize_logging(cfg)
    return cfg


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True, ensure_ascii=False), encoding="utf-8")
    return path
