"""Renderer package for BotStatus dashboard composition."""

from .composer import Composer
from .dashboard import DashboardRenderer
from .encoding import DEFAULT_SCHEME, RenderEncodingError, decode_image_ref, encode_png, to_image_ref
from .layout import compute_geometry
from .metrics import TextMetrics
from .models import Band, CanvasGeometry, FontRole, LayoutConstants, MetricKind, Palette
from .palette import DEFAULT_LAYOUT, DEFAULT_PALETTE, band_for, color_for
from .resources import RenderResources, ResourceCache, ResourceLoadError, load_resources

__all__ = [
    "Band",
    "CanvasGeometry",
    "Composer",
    "DEFAULT_LAYOUT",
    "DEFAULT_PALETTE",
    "DEFAULT_SCHEME",
    "DashboardRenderer",
    "FontRole",
    "LayoutConstants",
    "MetricKind",
    "Palette",
    "RenderEncodingError",
    "RenderResources",
    "ResourceCache",
    "ResourceLoadError",
    "TextMetrics",
    "band_for",
    "color_for",
    "compute_geometry",
    "decode_image_ref",
    "encode_png",
    "load_resources",
    "to_image_ref",
]
