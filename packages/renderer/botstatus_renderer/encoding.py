"""PNG encoding and inline image references."""

from __future__ import annotations

import base64
import binascii
from io import BytesIO

from PIL import Image

DEFAULT_SCHEME = "base64"


class RenderEncodingError(RuntimeError):
    """The finished surface could not be encoded."""


def encode_png(image: Image.Image) -> bytes:
    buf = BytesIO()
    try:
        image.save(buf, format="PNG")
    except (OSError, ValueError, MemoryError) as exc:
        raise RenderEncodingError(f"PNG encoding failed: {exc}") from exc
    return buf.getvalue()


def to_image_ref(png: bytes, scheme: str = DEFAULT_SCHEME) -> str:
    return f"{scheme}://{base64.b64encode(png).decode('ascii')}"


def decode_image_ref(ref: str, scheme: str = DEFAULT_SCHEME) -> bytes:
    prefix = f"{scheme}://"
    if not ref.startswith(prefix):
        raise ValueError(f"Image reference does not start with {prefix!r}")
    try:
        return base64.b64decode(ref[len(prefix) :], validate=True)
    except binascii.Error as exc:
        raise ValueError(f"Image reference is not valid base64: {exc}") from exc


def to_data_url(png: bytes) -> str:
    return f"data:image/png;base64,{base64.b64encode(png).decode('ascii')}"
