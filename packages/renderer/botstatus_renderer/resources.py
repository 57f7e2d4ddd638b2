"""Font and background resources, loaded once before the first render."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

import numpy as np
from PIL import Image, ImageFont

from .models import FontRole, Palette
from .palette import DEFAULT_LAYOUT, DEFAULT_PALETTE, hex_to_rgba

logger = logging.getLogger("botstatus.renderer")


class ResourceLoadError(RuntimeError):
    """A font or background asset is missing or unreadable."""


@dataclass(frozen=True, eq=False)
class RenderResources:
    title_font: ImageFont.FreeTypeFont
    content_font: ImageFont.FreeTypeFont
    background: Image.Image

    def font(self, role: FontRole) -> ImageFont.FreeTypeFont:
        return self.title_font if role is FontRole.TITLE else self.content_font


def gradient_background(size: int, palette: Palette = DEFAULT_PALETTE) -> Image.Image:
    top = np.array(hex_to_rgba(palette.background_start), dtype=np.float32)
    bottom = np.array(hex_to_rgba(palette.background_end), dtype=np.float32)
    t = np.linspace(0.0, 1.0, size, dtype=np.float32)[:, None]
    rows = top * (1.0 - t) + bottom * t
    pixels = np.repeat(rows[:, None, :], size, axis=1).round().astype(np.uint8)
    return Image.fromarray(pixels)


def _load_font(path: Path | None, size: int) -> ImageFont.FreeTypeFont:
    if path is None:
        return ImageFont.load_default(size=size)
    try:
        return ImageFont.truetype(str(path), size)
    except OSError as exc:
        raise ResourceLoadError(f"Cannot load font {path}: {exc}") from exc


def _load_background(path: Path | None, size: int, palette: Palette) -> Image.Image:
    if path is None:
        return gradient_background(size, palette)
    try:
        with Image.open(path) as im:
            return im.convert("RGBA")
    except (OSError, ValueError) as exc:
        raise ResourceLoadError(f"Cannot load background {path}: {exc}") from exc


def load_resources(
    font_path: str | Path | None = None,
    background_path: str | Path | None = None,
    title_size: int = DEFAULT_LAYOUT.title_font_size,
    content_size: int = DEFAULT_LAYOUT.content_font_size,
    background_size: int = DEFAULT_LAYOUT.width,
    palette: Palette = DEFAULT_PALETTE,
) -> RenderResources:
    """Load both assets or raise ResourceLoadError.

    Without a font path Pillow's bundled scalable face is used, and without a
    background path a square gradient of ``background_size`` is generated.
    """
    font = Path(font_path).expanduser() if font_path else None
    background = Path(background_path).expanduser() if background_path else None
    resources = RenderResources(
        title_font=_load_font(font, title_size),
        content_font=_load_font(font, content_size),
        background=_load_background(background, background_size, palette),
    )
    logger.info(
        f"render resources loaded font={font or 'bundled'} background={background or 'gradient'}",
        extra={"event": "resources_loaded"},
    )
    return resources


class ResourceCache:
    """Loads resources on first use; concurrent first callers share one load."""

    def __init__(self, loader: Callable[[], RenderResources]) -> None:
        self._loader = loader
        self._lock = threading.Lock()
        self._resources: RenderResources | None = None

    @property
    def loaded(self) -> bool:
        return self._resources is not None

    def get(self) -> RenderResources:
        resources = self._resources
        if resources is not None:
            return resources
        with self._lock:
            if self._resources is None:
                self._resources = self._loader()
            return self._resources
