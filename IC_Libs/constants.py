"""
Constants and configuration values for Image Combiner.

This module centralizes all constant values, magic numbers, and
configuration settings used throughout the application.
"""

# Pixel layout
RGBA_MODE = "RGBA"
RGB_MODE = "RGB"
BYTES_PER_PIXEL = 4

# Channel indices within an RGBA8 pixel
CHANNEL_RED = 0
CHANNEL_GREEN = 1
CHANNEL_BLUE = 2
CHANNEL_ALPHA = 3

# Output encoding
DEFAULT_JPEG_QUALITY = 95
MIN_JPEG_QUALITY = 1
MAX_JPEG_QUALITY = 100
FORMAT_ALIASES = {"JPG": "JPEG", "TIF": "TIFF"}
FORMATS_WITHOUT_ALPHA = {"JPEG", "MPO", "PPM", "PCX", "EPS"}
QUALITY_FORMATS = {"JPEG", "MPO", "WEBP"}

# Process exit codes
EXIT_OK = 0
EXIT_USAGE = 2
EXIT_CODES = {
    "path_read_failure": 10,
    "format_undetected": 11,
    "decode_failure": 12,
    "different_image_formats": 13,
    "capacity_exceeded": 14,
    "encode_failure": 15,
}
