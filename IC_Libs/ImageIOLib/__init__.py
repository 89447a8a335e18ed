"""
ImageIOLib - Image decoding and output encoding

This module provides the image data models, the image loader and the
output image buffer for the Image Combiner project.
"""

from IC_Libs.ImageIOLib.image_models import DecodedImage, Dimensions, FormatTag, PixelBuffer
from IC_Libs.ImageIOLib.image_loader import load_image, load_image_with_format
from IC_Libs.ImageIOLib.output_image import OutputImage

__all__ = [
    "DecodedImage",
    "Dimensions",
    "FormatTag",
    "PixelBuffer",
    "load_image",
    "load_image_with_format",
    "OutputImage",
]
