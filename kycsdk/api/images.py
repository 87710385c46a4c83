"""Image encoding for document verification uploads."""

import base64
from pathlib import Path
from typing import Any, Protocol


class ImageEncoder(Protocol):
    """Converts a captured image to a base64 string."""

    def to_base64(self, image: Any) -> str: ...


class Base64ImageEncoder:
    """Encodes raw bytes or image files on disk.

    Strings are taken to be base64 already and pass through unchanged.
    """

    def to_base64(self, image: bytes | str | Path) -> str:
        if isinstance(image, Path):
            image = image.read_bytes()
        if isinstance(image, str):
            return image
        return base64.b64encode(image).decode("ascii")
