"""
Channel interleaving for Image Combiner.

The combined buffer is built channel by channel: a selector maps each RGBA
channel index to the image it is taken from. The default selector takes Red
from image A and Green, Blue and Alpha from image B.

Classes:
    ChannelSource: Which input image a channel is taken from

Functions:
    select_source: Default channel selector
    alternate_pixels: Interleave two equal-length RGBA8 buffers
    combine_images: Interleave two reconciled DecodedImages
"""

from enum import Enum
from typing import Callable

import numpy as np

from IC_Libs.constants import BYTES_PER_PIXEL, CHANNEL_RED
from IC_Libs.ImageIOLib.image_models import DecodedImage, PixelBuffer


class ChannelSource(Enum):
    IMAGE_A = "a"
    IMAGE_B = "b"


ChannelSelector = Callable[[int], ChannelSource]


def select_source(channel_index: int) -> ChannelSource:
    """Red comes from image A, every other channel from image B."""
    return ChannelSource.IMAGE_A if channel_index == CHANNEL_RED else ChannelSource.IMAGE_B


def alternate_pixels(
    buffer_a: bytes,
    buffer_b: bytes,
    selector: ChannelSelector = select_source,
) -> PixelBuffer:
    """
    Merge two RGBA8 buffers byte by byte.

    Byte ``i`` of the output is byte ``i`` of the buffer that ``selector``
    picks for channel ``i % 4``.

    Args:
        buffer_a: RGBA8 bytes of image A
        buffer_b: RGBA8 bytes of image B, same length as buffer_a
        selector: Maps a channel index (0-3) to a ChannelSource

    Returns:
        Combined buffer, same length as the inputs

    Raises:
        ValueError: If the buffers differ in length

    Example:
        >>> alternate_pixels(bytes([1, 2, 3, 4]), bytes([5, 6, 7, 8]))
        b'\\x01\\x06\\x07\\x08'
    """
    if len(buffer_a) != len(buffer_b):
        raise ValueError(
            f"Buffers must have equal length, got {len(buffer_a)} and {len(buffer_b)}"
        )

    array_a = np.frombuffer(buffer_a, dtype=np.uint8)
    array_b = np.frombuffer(buffer_b, dtype=np.uint8)
    sources = {ChannelSource.IMAGE_A: array_a, ChannelSource.IMAGE_B: array_b}

    output = np.empty_like(array_a)
    for channel in range(BYTES_PER_PIXEL):
        output[channel::BYTES_PER_PIXEL] = sources[selector(channel)][channel::BYTES_PER_PIXEL]

    return output.tobytes()


def combine_images(
    image_a: DecodedImage,
    image_b: DecodedImage,
    selector: ChannelSelector = select_source,
) -> PixelBuffer:
    """
    Interleave two images that already share the same dimensions.

    Raises:
        ValueError: If the images' dimensions differ
    """
    if image_a.dimensions != image_b.dimensions:
        raise ValueError(
            f"Images must be reconciled first: {image_a.width}x{image_a.height} "
            f"vs {image_b.width}x{image_b.height}"
        )
    return alternate_pixels(image_a.to_rgba_bytes(), image_b.to_rgba_bytes(), selector)
