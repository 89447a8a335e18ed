"""
Pytest configuration and shared fixtures for Image Combiner tests.

This module provides shared test fixtures and configuration
used across multiple test modules.
"""

from pathlib import Path

import pytest

from tests.helpers import make_noise_image


@pytest.fixture
def temp_image_dir(tmp_path):
    """
    Provide a temporary directory for input and output images.

    Args:
        tmp_path: Pytest's built-in temporary directory fixture

    Returns:
        Path object pointing to a temporary directory
    """
    return tmp_path


@pytest.fixture
def write_image(temp_image_dir):
    """
    Provide a factory that saves a noise image and returns its path.

    Usage:
        path = write_image("a.png", 10, 10, fmt="PNG", seed=1)
    """
    def _write(name: str, width: int, height: int, fmt: str = "PNG", seed: int = 0) -> Path:
        mode = "RGB" if fmt == "JPEG" else "RGBA"
        path = temp_image_dir / name
        make_noise_image(width, height, seed=seed, mode=mode).save(path, format=fmt)
        return path

    return _write
