"""Deepfry an image file and render the result as a PNG data URL."""

from __future__ import annotations

import base64
import io
from os import PathLike

from PIL import Image

from deepfry.core import BitChange, ChangeMode, deepfry

_PREFIX = "data:image/png;base64,"


def image_to_data_url(img: Image.Image) -> str:
    """Encode an image as PNG and wrap it in a ``data:`` URL."""
    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    return _PREFIX + base64.b64encode(buffer.getvalue()).decode("ascii")


def start_deepfry(
    mode: ChangeMode, red: int, green: int, blue: int, path: str | PathLike[str]
) -> str:
    """Deepfry the image at ``path`` with byte-sized operands and return a data URL."""
    for name, value in (("red", red), ("green", green), ("blue", blue)):
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 0xFF:
            raise ValueError(f"{name} must be between 0 and 255, got {value!r}")
    with Image.open(path) as source:
        image = source.convert("RGB")
    return image_to_data_url(deepfry(image, BitChange(mode, red, green, blue)))