"""
Shared image builders for Image Combiner tests.
"""

import random

from PIL import Image


def make_noise_image(width: int, height: int, seed: int = 0, mode: str = "RGBA") -> Image.Image:
    """Build a deterministic image whose every byte differs pseudo-randomly."""
    channels = len(mode)
    data = random.Random(seed).randbytes(width * height * channels)
    return Image.frombytes(mode, (width, height), data)
