# -*- coding: utf-8 -*-
"""Meal photo preparation before it is sent to the vision model."""

from __future__ import annotations

import io
from dataclasses import dataclass

from PIL import Image, UnidentifiedImageError

MAX_DIMENSION = 768
JPEG_QUALITY = 72


class ImageTooLarge(ValueError):
    def __init__(self, size: int, limit: int) -> None:
        super().__init__(f"Image too large: {size} bytes > {limit}")
        self.size = size
        self.limit = limit


@dataclass(frozen=True)
class PreparedImage:
    data: bytes
    mime: str
    resized: bool


def prepare_image(image_bytes: bytes, mime: str, *, max_bytes: int) -> PreparedImage:
    """Downscale to fit MAX_DIMENSION, re-encoding as JPEG only when scaled."""
    data, out_mime, resized = image_bytes, mime, False
    try:
        with Image.open(io.BytesIO(image_bytes)) as img:
            if max(img.size) > MAX_DIMENSION:
                img.thumbnail((MAX_DIMENSION, MAX_DIMENSION))
                if img.mode not in ("RGB", "L"):
                    img = img.convert("RGB")
                buf = io.BytesIO()
                img.save(buf, format="JPEG", quality=JPEG_QUALITY)
                data, out_mime, resized = buf.getvalue(), "image/jpeg", True
    except (UnidentifiedImageError, OSError):
        # Not something Pillow can read (e.g. HEIC): forward as-is.
        pass

    if len(data) > max_bytes:
        raise ImageTooLarge(len(data), max_bytes)
    return PreparedImage(data=data, mime=out_mime, resized=resized)
