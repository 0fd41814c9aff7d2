from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import BinaryIO, List

from PIL import Image, ImageOps, UnidentifiedImageError

from ..errors import DecodeError, FileError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecodedImage:
    """Row-major luminance samples (0-255) plus their dimensions."""

    samples: List[int]
    width: int
    height: int


class ImageSource:
    def __init__(self, width: int, height: int, fit: bool = False) -> None:
        self.width = width
        self.height = height
        self.fit = fit

    def load(self, path: str) -> DecodedImage:
        logger.info("Opening image %s...", path)
        try:
            handle = open(path, "rb")
        except OSError as exc:
            raise FileError(f"Cannot open image {path}: {exc}") from exc
        with handle:
            return self.decode(handle)

    def decode(self, handle: BinaryIO) -> DecodedImage:
        logger.info("Reading image data...")
        img = self._load_image(handle)
        if (img.width, img.height) != (self.width, self.height):
            if not self.fit:
                raise DecodeError(
                    f"Image is {img.width}x{img.height}, display expects {self.width}x{self.height} "
                    "(use --fit to resize)"
                )
            img = img.resize((self.width, self.height), Image.LANCZOS)
        samples = list(img.tobytes())
        if len(samples) != img.width * img.height:
            raise DecodeError(f"Decoded {len(samples)} samples for a {img.width}x{img.height} image")
        return DecodedImage(samples, img.width, img.height)

    @staticmethod
    def _load_image(handle: BinaryIO) -> Image.Image:
        try:
            with Image.open(handle) as img:
                img = ImageOps.exif_transpose(img)
                return img.convert("L")
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError, ValueError) as exc:
            raise DecodeError(f"Cannot decode image: {exc}") from exc


def load_samples(path: str, width: int, height: int, fit: bool = False) -> DecodedImage:
    return ImageSource(width, height, fit=fit).load(path)
