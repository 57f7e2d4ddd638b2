"""Doctor payload for support requests."""

from __future__ import annotations

import platform
import re
from dataclasses import asdict
from datetime import datetime, timezone
from importlib import metadata
from pathlib import Path
from typing import Any

from .config import AppConfig, config_path


_SECRET_RE = re.compile(r"(token|secret|password|apikey|api_key|auth)", re.IGNORECASE)


def redact(value: Any) -> Any:
    if isinstance(value, dict):
        out: dict[str, Any] = {}
        for k, v in value.items():
            if _SECRET_RE.search(k):
                out[k] = "***REDACTED***"
            else:
                out[k] = redact(v)
        return out
    if isinstance(value, list):
        return [redact(v) for v in value]
    return value


def _version(dist: str) -> str | None:
    try:
        return metadata.version(dist)
    except metadata.PackageNotFoundError:
        return None


def _asset_status(path: str | None, fallback: str) -> dict[str, Any]:
    if not path:
        return {"path": None, "source": fallback, "ok": True}
    resolved = Path(path).expanduser()
    return {"path": str(resolved), "source": "file", "ok": resolved.is_file()}


def build_doctor_payload(cfg: AppConfig) -> dict[str, Any]:
    return {
        "ts_utc": datetime.now(timezone.utc).isoformat(),
        "platform": platform.platform(),
        "python": platform.python_version(),
        "libraries": {name: _version(name) for name in ("Pillow", "numpy", "psutil")},
        "config_path": str(config_path()),
        "config": redact(asdict(cfg)),
        "resources": {
            "font": _asset_status(cfg.render.font_path, "bundled"),
            "background": _asset_status(cfg.render.background_path, "gradient"),
        },
    }
