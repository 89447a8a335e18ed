"""
Image data models for Image Combiner.

This module defines core data structures passed between the combine stages.

Classes:
    Dimensions: Width and height of a pixel grid
    DecodedImage: A decoded RGBA pixel grid together with its encoded format

Functions:
    to_rgba8: Convert any Pillow image mode to 8-bit RGBA

Type Aliases:
    FormatTag: Pillow format name such as "PNG" or "JPEG"
    PixelBuffer: Flat RGBA8 bytes, four per pixel, row-major
"""

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Tuple

import numpy as np
from PIL import Image

from IC_Libs.constants import BYTES_PER_PIXEL, RGBA_MODE

FormatTag = str
PixelBuffer = bytes

# 16-bit samples map onto 8 bits by dividing by 257 (65535 -> 255)
SIXTEEN_BIT_MAX = 65535
SIXTEEN_TO_EIGHT_BIT = 257.0


def to_rgba8(image: 'Image.Image') -> 'Image.Image':
    """
    Convert an image of any mode to a new RGBA image with 8-bit channels.

    Pillow clips wide grayscale modes when converting them to RGBA, so
    16/32-bit integer samples (``I;16*``, ``I``) are first scaled from the
    16-bit range and float samples (``F``) from 0.0-1.0 down to 8-bit ``L``.

    Args:
        image: PIL Image in any mode

    Returns:
        A new PIL Image in RGBA mode, independent of the source's file handle
    """
    if image.mode == "F":
        samples = np.clip(np.asarray(image, dtype=np.float64), 0.0, 1.0) * 255.0
        image = Image.fromarray(np.round(samples).astype(np.uint8))
    elif image.mode == "I" or image.mode.startswith("I;16"):
        samples = np.clip(np.asarray(image).astype(np.int64), 0, SIXTEEN_BIT_MAX)
        image = Image.fromarray(np.round(samples / SIXTEEN_TO_EIGHT_BIT).astype(np.uint8))
    return image.convert(RGBA_MODE)


@dataclass(frozen=True)
class Dimensions:
    """Width and height of an image; compare by ``pixel_count``, not as a tuple."""

    width: int
    height: int

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    @property
    def buffer_size(self) -> int:
        return self.pixel_count * BYTES_PER_PIXEL

    def as_tuple(self) -> Tuple[int, int]:
        return (self.width, self.height)


@dataclass(frozen=True)
class DecodedImage:
    """
    A fully decoded image and the format it was encoded in.

    Attributes:
        path: File the image was decoded from
        image: Loaded PIL Image in RGBA mode
        format: Encoded format detected by the decoder
    """

    path: Path
    image: 'Image.Image'
    format: FormatTag

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    @property
    def dimensions(self) -> Dimensions:
        return Dimensions(self.image.width, self.image.height)

    @property
    def pixel_count(self) -> int:
        return self.dimensions.pixel_count

    def to_rgba_bytes(self) -> PixelBuffer:
        """Return the pixel grid as RGBA8 bytes."""
        img = self.image
        if img.mode != RGBA_MODE:
            img = to_rgba8(img)
        return img.tobytes()

    def resized(self, dimensions: Dimensions) -> "DecodedImage":
        """Return a new DecodedImage resized exactly to ``dimensions`` (nearest neighbour)."""
        resized_image = self.image.resize(dimensions.as_tuple(), Image.Resampling.NEAREST)
        return replace(self, image=resized_image)
